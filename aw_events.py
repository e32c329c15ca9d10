# ======================================================================================================================
# 📁 file        : aw_events.py — Схема связывания событий AutoWire Forms
# 🕒 created     : 14.10.2026 11:25
# 🎉 contains    : TEventTag/event_tag, TEventItem, TBindStep/TBindStatus, TBindResult, TBindReport
# 🌅 project     : AutoWire Forms 2026 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional
from pydantic import BaseModel, Field

# ALIAS: AW_EVENTS
__all__ = ["TEventTag", "event_tag", "TEventItem", "TBindStep", "TBindStatus", "TBindResult", "TBindReport"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TEventTag — тег поля формы: "привяжи сюда уже найденный обработчик"
# ----------------------------------------------------------------------------------------------------------------------
class TEventTag:
    """
    Метка поля формы. Два равноправных способа объявить:

        class TMainForm(TForm):
            Button2 = event_tag("OnButton1Click")
            Button3: Annotated[TButton, event_tag("OnButton1Click")]
    """
    __slots__ = ("name",)

    def __init__(self, name: str):
        if not name:
            raise ValueError("event tag needs a handler name")
        self.name = str(name)

    def __eq__(self, other):
        return isinstance(other, TEventTag) and other.name == self.name

    def __hash__(self):
        return hash(("TEventTag", self.name))

    def __repr__(self):
        return f"event_tag({self.name!r})"
# ---
def event_tag(name: str) -> TEventTag:
    return TEventTag(name)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TEventItem — запись таблицы "имя обработчика → тип события"
# ----------------------------------------------------------------------------------------------------------------------
@dataclass
class TEventItem:
    event_type: str  # суффикс после On<Имя>, например "Click"
    handler_name: str  # имя метода формы, например "OnButton1Click"
    method: Callable[..., Any]  # связанный метод формы
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TBindStep / TBindStatus — шаги и исходы прохода связывания
# ----------------------------------------------------------------------------------------------------------------------
class TBindStep(str, Enum):
    CONFIG = "config"  # ENV-конфиг не собрался, проход идёт на умолчаниях
    INTROSPECT = "introspect"
    FORM = "form"
    COMPONENTS = "components"
    TAGS = "tags"
    APPLICATION = "application"
    CREATE = "create"


class TBindStatus(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"  # у цели нет сеттера SetOn<Тип>; это не ошибка
    FAILED = "failed"
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TBindResult — одна попытка связывания
# ----------------------------------------------------------------------------------------------------------------------
class TBindResult(BaseModel):
    step: TBindStep
    status: TBindStatus
    target: str = ""
    handler: str = ""
    event_type: str = ""
    reason: str = ""

    def __str__(self) -> str:
        text = f"{self.step.value}:{self.target}.{self.event_type} <- {self.handler} [{self.status.value}]"
        return f"{text} {self.reason}" if self.reason else text
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TBindReport — диагностический список одного прохода
# ----------------------------------------------------------------------------------------------------------------------
class TBindReport(BaseModel):
    form: str = ""
    results: List[TBindResult] = Field(default_factory=list)
    create_called: bool = False
    aborted: bool = False

    def add(self, step: TBindStep, status: TBindStatus, target: str = "", handler: str = "",
            event_type: str = "", reason: str = "") -> TBindResult:
        result = TBindResult(step=step, status=status, target=target, handler=handler,
                             event_type=event_type, reason=reason)
        self.results.append(result)
        return result

    def _by_status(self, status: TBindStatus, step: Optional[TBindStep] = None) -> List[TBindResult]:
        return [r for r in self.results if r.status == status and (step is None or r.step == step)]

    def ok(self, step: Optional[TBindStep] = None) -> List[TBindResult]:
        return self._by_status(TBindStatus.OK, step)

    def skipped(self, step: Optional[TBindStep] = None) -> List[TBindResult]:
        return self._by_status(TBindStatus.SKIPPED, step)

    def failed(self, step: Optional[TBindStep] = None) -> List[TBindResult]:
        return self._by_status(TBindStatus.FAILED, step)

    def for_target(self, name: str) -> List[TBindResult]:
        return [r for r in self.results if r.target == name]

    @property
    def has_failures(self) -> bool:
        return any(r.status == TBindStatus.FAILED for r in self.results)

    def summary(self) -> str:
        return (f"{self.form}: ok={len(self.ok())} skipped={len(self.skipped())} "
                f"failed={len(self.failed())} create={'yes' if self.create_called else 'no'}"
                f"{' ABORTED' if self.aborted else ''}")
