# ======================================================================================================================
# 📁 file        : aw_sys.py — базовые классы AutoWire Forms
# 🕒 created     : 14.10.2026 10:40
# 🎉 contains    : ENV-хелперы, TAssocConfig, TOwnerObject, TComponent
# 🌅 project     : AutoWire Forms 2026 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import os
import traceback
from typing import Any, Callable, Dict, MutableMapping
from pydantic import BaseModel, field_validator
from aw_logger import console_write, format_line
# 💎 ... Переназначаемая ENV-мапа ...
_GLOBAL_AUTO_COUNTERS: Dict[str, int] = {}  # для объектов без Owner
_ENV: MutableMapping[str, str] = os.environ
# 🍍 ... global utilities ...
def set_env_mapping(mapping: MutableMapping[str, str] | None) -> None:
    global _ENV
    _ENV = os.environ if mapping is None else mapping
# ---
def _key(name: str | None, default: str = '') -> str | None:
    if not name:
        return None
    v = _ENV.get(name)
    if v is not None and v != '':
        return v
    _ENV[name] = str(default)
    return str(default)
# ---
def key_bool(name: str, default: bool = False) -> bool:
    """Возвращает параметр как bool: 1/true/yes/on → True."""
    v = _key(name, '1' if default else '0')
    return str(v).strip().lower() in ('1', 'true', 'yes', 'on')
# ---
def explode(delimiter: str, src: str) -> list[str]:
    if not src:
        return []
    parts = [x.strip() for x in src.replace(";", delimiter).replace(",", delimiter).split(delimiter)]
    return [x for x in parts if x]
# 💎 ... CONFIG / CONSTS ...
EVENT_PREFIX = "On"
SETTER_PREFIX = "SetOn"
DEFAULT_FORM_ALIASES = ("Form", "TForm")
DEFAULT_CREATE_HOOK = "OnFormCreate"
APPLICATION_LABEL = "Application"
# 💎🧩⚙️ ... __ALL__ ...
__all__ = [
    'TOwnerObject', 'TComponent', 'TAssocConfig',
    'set_env_mapping', '_key', 'key_bool', 'explode',
    'EVENT_PREFIX', 'SETTER_PREFIX', 'DEFAULT_FORM_ALIASES', 'DEFAULT_CREATE_HOOK', 'APPLICATION_LABEL',
]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TAssocConfig — настройки автосвязывания событий
# ----------------------------------------------------------------------------------------------------------------------
class TAssocConfig(BaseModel):
    sub_component_event: bool = True  # связывать ли события дочерних компонентов (и теги полей)
    form_aliases: tuple[str, ...] = DEFAULT_FORM_ALIASES  # имена, под которыми форма фигурирует в On<Имя><Событие>
    create_hook: str = DEFAULT_CREATE_HOOK  # хук жизненного цикла, вызывается последним

    @field_validator("form_aliases")
    @classmethod
    def _check_aliases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        aliases = tuple(dict.fromkeys(a.strip() for a in value if a and a.strip()))
        if not aliases:
            raise ValueError("form_aliases must contain at least one name")
        return aliases

    @classmethod
    def from_env(cls, **overrides: Any) -> "TAssocConfig":
        """
        Собирает конфиг из ENV-мапы:
          AW_SUB_COMPONENT_EVENT (1/0), AW_FORM_ALIASES ("Form,TForm"), AW_CREATE_HOOK ("OnFormCreate").
        Явные overrides (не None) перекрывают ENV.
        """
        values: dict[str, Any] = {
            "sub_component_event": key_bool("AW_SUB_COMPONENT_EVENT", True),
            "form_aliases": tuple(explode(",", _key("AW_FORM_ALIASES", ",".join(DEFAULT_FORM_ALIASES)))),
            "create_hook": _key("AW_CREATE_HOOK", DEFAULT_CREATE_HOOK),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TOwnerObject — иерархия владения, регистрация и логика родословной
# ----------------------------------------------------------------------------------------------------------------------
class TOwnerObject:
    # ⚡🛠️ ▸ __init__
    def __init__(self, Owner: "TOwnerObject | None" = None, Name: str | None = None):
        """
        Базовый узел дерева владения.
        💠 объект знает своего Owner, хранит детей в self.Components,
        получает человекопонятное имя вида Button1 / Edit2
        и автоматически регистрируется у Owner.
        """
        self.f_name = ""
        self.Owner: "TOwnerObject | None" = Owner
        if Name:
            self.f_name = Name
        # 👨‍👩‍👧‍👧 ... Дочерние компоненты ...
        self.Components: Dict[str, "TOwnerObject"] = {}
        # --- Регистрация в родителе ---
        self.register_in_owner()
        # ⚡🛠️ TOwnerObject ▸ End of __init__
    # ..................................................................................................................
    # 🏷️👨‍👩‍👧‍👧 Идентичность и родословная
    # ..................................................................................................................
    @property
    def Name(self) -> str:
        if not getattr(self, "f_name", ""):
            self.f_name = self._get_unique_name()
        return self.f_name
    # ---
    @Name.setter
    def Name(self, value: str | None):
        # ключ в Owner.Components не переименовывается: как и в Delphi, владелец держит ссылку, а не имя
        self.f_name = "" if value is None else str(value)
    # ---
    def _get_unique_name(self) -> str:
        """
        Имя = ИмяКласса без ведущей 'T' + порядковый номер.
        TButton → Button1, TEdit → Edit1
        """
        raw_class = self.__class__.__name__
        if raw_class.startswith("T") and len(raw_class) > 1:
            human_name = raw_class[1:]
        else:
            human_name = raw_class

        if self.Owner is not None:
            counters = getattr(self.Owner, "_auto_counters", None)
            if counters is None:
                counters = {}
                setattr(self.Owner, "_auto_counters", counters)
        else:
            counters = _GLOBAL_AUTO_COUNTERS

        n = counters.get(human_name, 0) + 1
        candidate = f"{human_name}{n}"

        # уникальность в пределах Owner
        if self.Owner is not None:
            while candidate in self.Owner.Components:
                n += 1
                candidate = f"{human_name}{n}"

        counters[human_name] = n
        return candidate
    # ---
    def id(self) -> str:
        """Полный путь владения через дефис, от корня до текущего узла."""
        path = [self.Name]
        p = self.Owner
        guard = 0
        while p is not None and guard < 1024:
            path.append(p.Name)
            p = getattr(p, "Owner", None)
            guard += 1
        if guard >= 1024:
            self.fail("id", "Ownership cycle detected", RuntimeError)
        return "-".join(reversed(path))
    # ..................................................................................................................
    # ⚙️ Register & Release
    # ..................................................................................................................
    def register_in_owner(self):
        """Регистрирует self у Owner.Components; дубликат имени → fail()."""
        if not self.Owner:
            return

        if self.Name in self.Owner.Components:
            self.fail("register_in_owner", f"Duplicate component: {self.Name}", ValueError)

        self.Owner.Components[self.Name] = self
    # ..................................................................................................................
    # 🔍 Поиск и служебные
    # ..................................................................................................................
    def find(self, name: str) -> "TOwnerObject | None":
        """Прямой ребёнок по имени или None."""
        return self.Components.get(name)
    # ---
    def list(self) -> list[str]:
        """Имена дочерних компонентов (плоский уровень, без рекурсии)."""
        return list(self.Components.keys())
    # ---
    def iter_tree(self):
        """Обход вниз по иерархии: self, затем рекурсивно все дети."""
        yield self
        for child in self.Components.values():
            yield from child.iter_tree()
    # ..................................................................................................................
    # 📡 Log / Debug / Fail
    # ..................................................................................................................
    def log(self, function: str, *parts, window: int = 1):
        """Базовый логгер для всех owner-компонентов: пишет в TLogRouter / rich-консоль."""
        console_write(format_line(self.Name, function, *parts), window)
    # ---
    def debug(self, func: str, *parts):
        """Отладочный вывод (иконка 🔍). Включается только при DEBUG_MODE == '1'."""
        if _key("DEBUG_MODE", "0") != "1":
            return
        msg = " ".join(str(p) for p in parts)
        console_write(f"🔍 [DEBUG][{self.__class__.__name__}.{func}] {msg}", window=2)
    # ---
    def fail(self, function: str, msg: str, exc_type: type = Exception):
        """
        Аварийный выход: логирует сообщение со стеком и бросает exc_type.
        Если задан FAIL_LOG — дописывает отчёт в этот файл.
        """
        stack = "".join(traceback.format_stack(limit=12))
        cls_name = self.__class__.__name__
        owner_name = getattr(getattr(self, "Owner", None), "Name", None)
        owner_part = f"\n📦 owner: {owner_name}" if owner_name else ""
        text = (
            f"\n💥 {cls_name}.{function}() FAILED{owner_part}\n⚙️ message: {msg}"
            f"\n\n🧩 Traceback (most recent calls):\n{stack}"
        )
        self.log("fail", msg)

        fail_log = _key("FAIL_LOG", "")
        if fail_log:
            try:
                os.makedirs(os.path.dirname(fail_log) or ".", exist_ok=True)
                with open(fail_log, "a", encoding="utf-8") as f:
                    f.write(f"{text}\n{'-' * 80}\n")
            except OSError as e:
                self.log("fail", f"⚠️ cannot write {fail_log}: {e}")

        raise exc_type(f"{cls_name}.{function}(): {msg}")
    # ..................................................................................................................
    # ♻️ Уничтожение
    # ..................................................................................................................
    def free(self):
        """Рекурсивно освобождает детей и исключает себя из Owner."""
        for child in list(self.Components.values()):
            child.free()
        self.Components.clear()
        if self.Owner:
            self.Owner.remove(self)
    # ---
    def remove(self, child: "TOwnerObject"):
        """Удаляет дочерний компонент по ссылке. Если такого ребёнка нет — fail()."""
        for key, value in list(self.Components.items()):
            if value is child:
                del self.Components[key]
                return
        self.fail("remove", f"Component not found: {child.Name}", KeyError)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TComponent — базовый компонент
# ----------------------------------------------------------------------------------------------------------------------
class TComponent(TOwnerObject):
    # ⚡🛠️ ▸ __init__
    def __init__(self, Owner: "TOwnerObject | None" = None, Name: str | None = None):
        """
        Базовый компонент. Живёт в дереве владения, знает своё имя и отдаёт
        слоты событий SetOn<Тип> через supports_event(). Name можно не передавать.
        """
        super().__init__(Owner, Name)
        self.debug("__init__", f"⚙️ component {self.Name} created")
    # ..................................................................................................................
    # 👨‍👩‍👧 Перечисление детей
    # ..................................................................................................................
    @property
    def ComponentCount(self) -> int:
        return len(self.Components)
    # ---
    def component(self, index: int) -> "TOwnerObject":
        """Ребёнок по индексу в порядке регистрации (как Components[i] в Delphi)."""
        return list(self.Components.values())[index]
    # ---
    def Equals(self, other: Any) -> bool:
        return self is other
    # ..................................................................................................................
    # 📡 Слоты событий
    # ..................................................................................................................
    def supports_event(self, event_type: str) -> Callable[[Any], Any] | None:
        """Возвращает сеттер SetOn<event_type>, если компонент такой слот поддерживает."""
        setter = getattr(self, f"{SETTER_PREFIX}{event_type}", None)
        return setter if callable(setter) else None
    # ---
    def _check_event(self, slot: str, handler: Any):
        """Слот принимает только callable или None."""
        if handler is not None and not callable(handler):
            raise TypeError(f"{self.__class__.__name__}.{SETTER_PREFIX}{slot}: handler must be callable, "
                            f"got {type(handler).__name__}")
    # ---
    def _fire(self, slot: str, *args):
        """Вызывает обработчик из F-поля слота, если он назначен."""
        handler = getattr(self, f"F{EVENT_PREFIX}{slot}", None)
        if handler is not None:
            return handler(self, *args)
        return None
