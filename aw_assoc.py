# ======================================================================================================================
# 📁 file        : aw_assoc.py — автосвязывание событий формы (associated events)
# 🕒 created     : 14.10.2026 12:03
# 🎉 contains    : TEventAssociator, associate_events(), declared_event_fields()
# 🌅 project     : AutoWire Forms 2026 🜂
# ======================================================================================================================
"""
Форма объявляет обработчики по правилу  On + ИмяКомпонента + Событие,
сама форма всегда зовётся Form (или алиасом из TAssocConfig.form_aliases):

    class TMainForm(TForm):
        def OnFormCreate(self, Sender): ...       # вызывается последним
        def OnButton1Click(self, Sender): ...     # → Button1.SetOnClick(...)
        def OnApplicationException(self, Sender, E): ...  # → Application.SetOnException(...)

Сначала собираются все методы формы, начинающиеся с On, затем по имени
компонента выделяется тип события, и у компонента ищется метод SetOn<Тип>.

Один обработчик на несколько компонентов — через тег поля:

    class TMainForm(TForm):
        Button2 = event_tag("OnButton1Click")
        Button3: Annotated[TButton, event_tag("OnButton1Click")]

Автоматически связан только Button1, а Button2/Button3 получают тот же
обработчик на тот же SetOnClick без отдельного OnButton2Click.
"""
# 🚢 ...imports...
from __future__ import annotations
import inspect
from typing import Any, Callable, Dict, List
from aw_logger import LoggableComponent
from aw_sys import TAssocConfig, EVENT_PREFIX, SETTER_PREFIX, APPLICATION_LABEL
from aw_events import TEventTag, TEventItem, TBindStep, TBindStatus, TBindReport
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TEventAssociator", "associate_events", "declared_event_fields"]
# ---
def _name_of(obj: Any) -> str:
    try:
        name = getattr(obj, "Name", None)
    except Exception:
        name = None
    return str(name) if name else type(obj).__name__
# ---
def _is_method(raw: Any) -> bool:
    return inspect.isfunction(raw) or isinstance(raw, (staticmethod, classmethod))
# ---
def _own_annotations(klass: type) -> dict:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # неразрешимые forward-ссылки: метаданные из них всё равно не прочитать
        return {}
# ---
def declared_event_fields(cls: type) -> Dict[str, TEventTag]:
    """
    Поля класса формы с тегом event_tag(...): имя поля → тег.
    Обход MRO от базовых к наследнику, поэтому переобъявление в потомке побеждает.
    """
    fields: Dict[str, TEventTag] = {}
    for klass in reversed(cls.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, TEventTag):
                fields[name] = value
        for name, ann in _own_annotations(klass).items():
            for meta in getattr(ann, "__metadata__", ()):
                if isinstance(meta, TEventTag):
                    fields[name] = meta
                    break
    return fields
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TEventAssociator — один проход связывания для одной формы
# ----------------------------------------------------------------------------------------------------------------------
class TEventAssociator(LoggableComponent):
    # ⚡🛠️ ▸ __init__
    def __init__(self, form: Any, application: Any = None, config: TAssocConfig | None = None,
                 sub_component_event: bool | None = None):
        """
        form                — форма, чьи On-методы связываем.
        application         — singleton Application (по умолчанию TApplication.app()).
        config              — TAssocConfig; по умолчанию собирается из ENV.
        sub_component_event — не None → перекрывает флаг из config.
        Таблица event_types живёт только в этом экземпляре: один проход — одна таблица.
        Конструктор не бросает: сбой ENV-конфига или Application попадает в лог и в report.
        """
        self.form = form
        self.report = TBindReport(form=_name_of(form))
        # --- результаты интроспекции ---
        self.form_create: Callable[..., Any] | None = None
        self.event_methods: Dict[str, Callable[..., Any]] = {}
        # --- имя обработчика → (тип события, метод), пополняется match() ---
        self.event_types: Dict[str, TEventItem] = {}
        # --- имя обработчика → самое длинное имя компонента, чей префикс он несёт ---
        self.label_owners: Dict[str, str] = {}
        self.config = config if config is not None else self._config_from_env()
        if sub_component_event is not None:
            self.config = self.config.model_copy(update={"sub_component_event": sub_component_event})
        self.application = application if application is not None else self._default_application()
        # ⚡🛠️ TEventAssociator ▸ End of __init__
    # ..................................................................................................................
    # ⚙️ Окружение прохода
    # ..................................................................................................................
    def _config_from_env(self) -> TAssocConfig:
        try:
            return TAssocConfig.from_env()
        except Exception as e:
            self.log("config", f"⚠️ bad ENV config, defaults used: {e}")
            self.report.add(TBindStep.CONFIG, TBindStatus.FAILED, self.report.form, reason=str(e))
            return TAssocConfig()
    # ---
    def _default_application(self) -> Any:
        try:
            from aw_application import TApplication
            return TApplication.app()
        except Exception as e:
            self.log("application", f"⚠️ error: {e}")
            self.report.add(TBindStep.APPLICATION, TBindStatus.FAILED, APPLICATION_LABEL, reason=str(e))
            return None
    # ..................................................................................................................
    # 🔍 Интроспекция
    # ..................................................................................................................
    def collect_methods(self):
        """Собирает хук создания и все прочие методы формы, чьё имя начинается с On."""
        cls = type(self.form)
        for name in sorted(dir(cls)):
            if not name.startswith(EVENT_PREFIX):
                continue
            if not _is_method(inspect.getattr_static(cls, name)):
                continue
            method = getattr(self.form, name)
            if name == self.config.create_hook:
                self.form_create = method
                continue
            self.event_methods[name] = method
    # ..................................................................................................................
    # 🏷️ Сопоставление имён
    # ..................................................................................................................
    def match(self, *labels: str) -> List[TEventItem]:
        """
        Все обработчики с префиксом On<label> для каждого из labels (алиасы сливаются).
        Каждое совпадение записывается в event_types, перезаписывая прежнюю запись.
        """
        items: Dict[str, TEventItem] = {}
        for label in labels:
            if not label:
                continue
            prefix = f"{EVENT_PREFIX}{label}"
            for name, method in self.event_methods.items():
                if not self._has_suffix(name, prefix):
                    continue
                # OnButton10Click принадлежит Button10, а не Button1
                if len(self.label_owners.get(name, "")) > len(label):
                    continue
                item = TEventItem(name[len(prefix):], name, method)
                self.event_types[name] = item
                items.setdefault(name, item)
        return list(items.values())
    # ---
    @staticmethod
    def _has_suffix(name: str, prefix: str) -> bool:
        return name.startswith(prefix) and len(name) > len(prefix)
    # ---
    def rank_labels(self, labels):
        """Каждому обработчику — самое длинное из labels, чей префикс On<label> он несёт."""
        for label in sorted(set(labels), key=len, reverse=True):
            prefix = f"{EVENT_PREFIX}{label}"
            for name in self.event_methods:
                if name not in self.label_owners and self._has_suffix(name, prefix):
                    self.label_owners[name] = label
    # ..................................................................................................................
    # 🔌 Установка слотов
    # ..................................................................................................................
    def find_and_set_event(self, target: Any, item: TEventItem, step: TBindStep) -> bool:
        """
        Ищет у target сеттер SetOn<item.event_type> и отдаёт ему обработчик.
        Нет сеттера → skipped. Любая ошибка поиска/вызова → failed + лог, наружу не идёт.
        """
        target_name = _name_of(target)
        try:
            finder = getattr(target, "supports_event", None)
            if callable(finder):
                setter = finder(item.event_type)
            else:
                setter = getattr(target, f"{SETTER_PREFIX}{item.event_type}", None)
            if setter is None or not callable(setter):
                self.report.add(step, TBindStatus.SKIPPED, target_name, item.handler_name, item.event_type,
                                f"no {SETTER_PREFIX}{item.event_type}")
                return False
            setter(item.method)
        except Exception as e:
            self.log("find_and_set_event", f"⚠️ error: {e}, eventType: {item.event_type}")
            self.report.add(step, TBindStatus.FAILED, target_name, item.handler_name, item.event_type, str(e))
            return False
        self.report.add(step, TBindStatus.OK, target_name, item.handler_name, item.event_type)
        return True
    # ---
    def set_event(self, target: Any, labels: tuple[str, ...], step: TBindStep):
        """Сопоставляет labels и связывает найденное с target (Application — через свой путь)."""
        for item in self.match(*labels):
            if self._is_application(target):
                self.find_and_set_event(self.application, item, TBindStep.APPLICATION)
            else:
                self.find_and_set_event(target, item, step)
    # ---
    def _is_application(self, obj: Any) -> bool:
        return self.application is not None and obj is self.application
    # ..................................................................................................................
    # 🪜 Шаги прохода
    # ..................................................................................................................
    def bind_form(self):
        self.set_event(self.form, self.config.form_aliases, TBindStep.FORM)
    # ---
    def bind_components(self):
        """Компоненты в порядке владения; обработчик достаётся компоненту с самым длинным именем-префиксом."""
        form = self.form
        components = []
        for i in range(form.ComponentCount):
            try:
                component = form.component(i)
                components.append((i, component, str(component.Name)))
            except Exception as e:
                self._component_failed(i, e)
        self.rank_labels(label for _, _, label in components if label)
        for i, component, label in components:
            try:
                self.set_event(component, (label,), TBindStep.COMPONENTS)
            except Exception as e:
                self._component_failed(i, e)
    # ---
    def _component_failed(self, index: int, e: Exception):
        self.log("bind_components", f"⚠️ component #{index} error: {e}")
        self.report.add(TBindStep.COMPONENTS, TBindStatus.FAILED, f"#{index}", reason=str(e))
    # ---
    def apply_tags(self):
        """Поля с event_tag получают уже найденный обработчик на тот же тип события."""
        for field_name, tag in declared_event_fields(type(self.form)).items():
            item = self.event_types.get(tag.name)
            if item is None:
                continue
            value = getattr(self.form, field_name, None)
            if value is None or isinstance(value, TEventTag):
                continue
            self.find_and_set_event(value, item, TBindStep.TAGS)
    # ---
    def bind_application(self):
        items = self.match(APPLICATION_LABEL)
        if self.application is None:
            for item in items:
                self.report.add(TBindStep.APPLICATION, TBindStatus.SKIPPED, APPLICATION_LABEL,
                                item.handler_name, item.event_type, "no application")
            return
        for item in items:
            self.find_and_set_event(self.application, item, TBindStep.APPLICATION)
    # ---
    def call_create(self) -> bool:
        """Вызывает хук создания формы с самой формой в качестве аргумента."""
        if self.form_create is None:
            return False
        self.report.create_called = True
        try:
            self.form_create(self.form)
        except Exception as e:
            self.log("call_event", f"⚠️ error: {e}")
            self.report.add(TBindStep.CREATE, TBindStatus.FAILED, self.report.form, self.config.create_hook,
                            reason=str(e))
            return False
        self.report.add(TBindStep.CREATE, TBindStatus.OK, self.report.form, self.config.create_hook)
        return True
    # ---
    def _run_step(self, step: TBindStep, fn: Callable[[], None]):
        try:
            fn()
        except Exception as e:
            self.log("associated_events", f"⚠️ {step.value} step error: {e}")
            self.report.add(step, TBindStatus.FAILED, self.report.form, reason=str(e))
    # ..................................................................................................................
    # 🚀 Проход целиком
    # ..................................................................................................................
    def execute(self) -> TBindReport:
        """
        Порядок: Form → компоненты → теги полей → Application → OnFormCreate.
        Ошибка интроспекции прерывает весь проход; ошибка любого шага дальше только логируется.
        """
        try:
            self.collect_methods()
        except Exception as e:
            self.log("associated_events", f"⚠️ error: {e}")
            self.report.aborted = True
            self.report.add(TBindStep.INTROSPECT, TBindStatus.FAILED, self.report.form, reason=str(e))
            return self.report

        self._run_step(TBindStep.FORM, self.bind_form)
        if self.config.sub_component_event:
            self._run_step(TBindStep.COMPONENTS, self.bind_components)
            self._run_step(TBindStep.TAGS, self.apply_tags)
        self._run_step(TBindStep.APPLICATION, self.bind_application)
        self.call_create()
        self.log("associated_events", self.report.summary())
        return self.report
# ----------------------------------------------------------------------------------------------------------------------
# 🏛️ Фасад
# ----------------------------------------------------------------------------------------------------------------------
def associate_events(form: Any, sub_component_event: bool | None = None, application: Any = None,
                     config: TAssocConfig | None = None) -> TBindReport:
    """
    Связывает On-обработчики формы со слотами её компонентов и Application.
    sub_component_event=None → берётся из config / ENV (AW_SUB_COMPONENT_EVENT).
    Никогда не бросает: все сбои — в логе и в возвращаемом TBindReport.
    """
    associator = TEventAssociator(form, application=application, config=config,
                                  sub_component_event=sub_component_event)
    return associator.execute()
