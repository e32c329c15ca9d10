# ======================================================================================================================
# 📁 file        : aw_application.py
# 🕒 created     : 14.10.2026 13:30
# 🎉 contains    : TApplication - Приложение (singleton), Application(), CreateForm()
# 🌅 project     : AutoWire Forms 2026 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from typing import Any, Dict
from aw_sys import *
from aw_logger import init_log_router
from aw_assoc import associate_events
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TApplication", "Application"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TApplication — управляющий объект
# ----------------------------------------------------------------------------------------------------------------------
class TApplication(TComponent):
    """
    Единственный на процесс объект приложения. Слоты событий у него такие же,
    как у компонентов (SetOn<Тип>), но каждый повторный вызов сеттера
    перезаписывает предыдущий обработчик: действует только последний.
    Поэтому обработчики OnApplication* лучше объявлять только в главной форме.
    """
    _instance = None

    def __init__(self):
        if TApplication._instance is not None:
            raise RuntimeError("TApplication is a singleton. Use TApplication.app() instead.")

        super().__init__(Owner=None, Name=APPLICATION_LABEL)
        TApplication._instance = self
        # --------------------------------------------------------------------------------------------------------------
        # Системные поля
        # --------------------------------------------------------------------------------------------------------------
        self.Forms: Dict[str, TComponent] = {}
        self.MainForm: TComponent | None = None
        # --- слоты событий (F-поля, как в Delphi) ---
        self.FOnException = None
        self.FOnActivate = None
        self.FOnDeactivate = None
        self.FOnIdle = None
        self.FOnHint = None
        self.FOnMinimize = None
        self.FOnRestore = None
        self.log("__init__", "application created")
    # --- Singleton access ---
    @staticmethod
    def app() -> "TApplication":
        if TApplication._instance is None:
            TApplication()
        return TApplication._instance
    # ---
    @staticmethod
    def reset():
        """Сбрасывает singleton (тесты, повторная инициализация процесса)."""
        TApplication._instance = None
    # ------------------------------------------------------------------------------------------------------------------
    # 📡 Слоты событий: последний вызов побеждает
    # ------------------------------------------------------------------------------------------------------------------
    def SetOnException(self, AEvent):
        self._check_event("Exception", AEvent)
        self.FOnException = AEvent

    def SetOnActivate(self, AEvent):
        self._check_event("Activate", AEvent)
        self.FOnActivate = AEvent

    def SetOnDeactivate(self, AEvent):
        self._check_event("Deactivate", AEvent)
        self.FOnDeactivate = AEvent

    def SetOnIdle(self, AEvent):
        self._check_event("Idle", AEvent)
        self.FOnIdle = AEvent

    def SetOnHint(self, AEvent):
        self._check_event("Hint", AEvent)
        self.FOnHint = AEvent

    def SetOnMinimize(self, AEvent):
        self._check_event("Minimize", AEvent)
        self.FOnMinimize = AEvent

    def SetOnRestore(self, AEvent):
        self._check_event("Restore", AEvent)
        self.FOnRestore = AEvent
    # ------------------------------------------------------------------------------------------------------------------
    # 🚀 Формы
    # ------------------------------------------------------------------------------------------------------------------
    def CreateForm(self, form_class: type, Name: str | None = None, sub_component_event: bool | None = None):
        """
        Создаёт форму (Owner = Application), регистрирует её в Forms,
        первую назначает MainForm и связывает её события.
        Отчёт связывания остаётся в form.EventReport.
        """
        form = form_class(self, Name)
        self.Forms[form.Name] = form
        if self.MainForm is None:
            self.MainForm = form
        form.EventReport = associate_events(form, sub_component_event=sub_component_event, application=self)
        self.log("CreateForm", f"🧭 Form '{form.Name}' created")
        return form
    # ---
    def remove(self, child: "TOwnerObject"):
        super().remove(child)
        self.Forms = {k: v for k, v in self.Forms.items() if v is not child}
        if self.MainForm is child:
            self.MainForm = None
    # ------------------------------------------------------------------------------------------------------------------
    # ⚠️ Исключения / служебные события
    # ------------------------------------------------------------------------------------------------------------------
    def HandleException(self, E: BaseException):
        """Отдаёт исключение в OnException, если он назначен, иначе пишет в лог."""
        if self.FOnException is not None:
            self.FOnException(self, E)
        else:
            self.log("HandleException", f"⚠️ {type(E).__name__}: {E}")

    def Activate(self):
        self._fire("Activate")

    def Deactivate(self):
        self._fire("Deactivate")

    def Idle(self):
        self._fire("Idle")

    def Hint(self, text: str):
        self._fire("Hint", text)

    def Minimize(self):
        self._fire("Minimize")

    def Restore(self):
        self._fire("Restore")
# ----------------------------------------------------------------------------------------------------------------------
# 🏛️👑 Application Facade
# ----------------------------------------------------------------------------------------------------------------------
def Application() -> TApplication:
    """
    Создаёт/возвращает singleton приложения.
    Поднимает лог-центр и отдаёт TApplication.app().
    Вызывай Application() вместо ручного создания TApplication.
    """
    init_log_router()
    return TApplication.app()
