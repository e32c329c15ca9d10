# ======================================================================================================================
# 📁 file        : aw_controls.py — минимальные контролы и форма AutoWire Forms
# 🕒 created     : 14.10.2026 14:10
# 🎉 contains    : TControl, TButton, TLabel, TEdit, TCheckBox, TTimer, TForm
# 🌅 project     : AutoWire Forms 2026 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from typing import Any
from aw_sys import *
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TControl", "TButton", "TLabel", "TEdit", "TCheckBox", "TTimer", "TForm"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TControl — базовый визуальный компонент
# ----------------------------------------------------------------------------------------------------------------------
class TControl(TComponent):
    # ⚡🛠️ ▸ __init__
    def __init__(self, Owner: "TOwnerObject | None" = None, Name: str | None = None):
        """
        Визуальный компонент: Caption/Enabled/Visible и общие слоты OnClick/OnDblClick/OnEnter/OnExit.
        Обработчики лежат в F-полях (FOnClick), чтобы не путаться с On-методами формы.
        Потомки не переопределяют __init__, а дописывают do_init().
        """
        super().__init__(Owner, Name)
        self.Caption: str = ""
        self.Enabled: bool = True
        self.Visible: bool = True
        self.FOnClick = None
        self.FOnDblClick = None
        self.FOnEnter = None
        self.FOnExit = None
        self.do_init()
        # ⚡🛠️ TControl ▸ End of __init__

    def __init_subclass__(cls, **kwargs):
        # __init__() запрещён для всех, кроме базовых
        super().__init_subclass__(**kwargs)
        base_init_whitelist = {"TControl", "TForm"}
        if "__init__" in cls.__dict__ and cls.__name__ not in base_init_whitelist:
            raise TypeError(
                f"❌ {cls.__name__} не должен переопределять __init__(). "
                f"Используй do_init() для дополнительной инициализации."
            )

    def do_init(self):
        pass
    # ..................................................................................................................
    # 📡 Слоты
    # ..................................................................................................................
    def SetOnClick(self, AEvent):
        self._check_event("Click", AEvent)
        self.FOnClick = AEvent

    def SetOnDblClick(self, AEvent):
        self._check_event("DblClick", AEvent)
        self.FOnDblClick = AEvent

    def SetOnEnter(self, AEvent):
        self._check_event("Enter", AEvent)
        self.FOnEnter = AEvent

    def SetOnExit(self, AEvent):
        self._check_event("Exit", AEvent)
        self.FOnExit = AEvent
    # ..................................................................................................................
    # ▶️ Генерация событий
    # ..................................................................................................................
    def Click(self):
        if self.Enabled:
            return self._fire("Click")
        return None

    def DblClick(self):
        if self.Enabled:
            return self._fire("DblClick")
        return None

    def SetFocus(self):
        self._fire("Enter")

    def KillFocus(self):
        self._fire("Exit")
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 Атомы
# ----------------------------------------------------------------------------------------------------------------------
class TButton(TControl):
    def do_init(self):
        self.Caption = self.Name


class TLabel(TControl):
    def do_init(self):
        self.Caption = self.Name


class TEdit(TControl):
    def do_init(self):
        self.FText: str = ""
        self.FOnChange = None

    def SetOnChange(self, AEvent):
        self._check_event("Change", AEvent)
        self.FOnChange = AEvent

    @property
    def Text(self) -> str:
        return self.FText

    @Text.setter
    def Text(self, value: str):
        value = "" if value is None else str(value)
        if value != self.FText:
            self.FText = value
            self._fire("Change")


class TCheckBox(TControl):
    def do_init(self):
        self.Caption = self.Name
        self.FChecked: bool = False
        self.FOnChange = None

    def SetOnChange(self, AEvent):
        self._check_event("Change", AEvent)
        self.FOnChange = AEvent

    @property
    def Checked(self) -> bool:
        return self.FChecked

    @Checked.setter
    def Checked(self, value: bool):
        value = bool(value)
        if value != self.FChecked:
            self.FChecked = value
            self._fire("Change")

    def Click(self):
        if self.Enabled:
            self.Checked = not self.Checked
        return super().Click()
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TTimer — невизуальный компонент
# ----------------------------------------------------------------------------------------------------------------------
class TTimer(TComponent):
    def __init__(self, Owner: "TOwnerObject | None" = None, Name: str | None = None):
        super().__init__(Owner, Name)
        self.Interval: int = 1000
        self.Enabled: bool = True
        self.FOnTimer = None

    def SetOnTimer(self, AEvent):
        self._check_event("Timer", AEvent)
        self.FOnTimer = AEvent

    def Tick(self):
        """Один такт таймера: вызывает OnTimer, если таймер включён."""
        if self.Enabled:
            return self._fire("Timer")
        return None
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TForm — форма-владелец компонентов
# ----------------------------------------------------------------------------------------------------------------------
class TForm(TControl):
    """
    Форма. Компоненты создаются в do_init() с Owner=self и кладутся в поля:

        class TMainForm(TForm):
            def do_init(self):
                self.Button1 = TButton(self, "Button1")

            def OnButton1Click(self, Sender): ...

    Связывание On-методов делает TApplication.CreateForm() (или associate_events()).
    """
    def __init__(self, Owner: "TOwnerObject | None" = None, Name: str | None = None):
        # слоты формы должны существовать до do_init(), который вызывает TControl.__init__
        self.FOnShow = None
        self.FOnClose = None
        self.FOnResize = None
        self.FOnActivate = None
        self.FOnDestroy = None
        self.Showing: bool = False
        self.EventReport = None
        super().__init__(Owner, Name)
        if not self.Caption:
            self.Caption = self.Name

    def SetOnShow(self, AEvent):
        self._check_event("Show", AEvent)
        self.FOnShow = AEvent

    def SetOnClose(self, AEvent):
        self._check_event("Close", AEvent)
        self.FOnClose = AEvent

    def SetOnResize(self, AEvent):
        self._check_event("Resize", AEvent)
        self.FOnResize = AEvent

    def SetOnActivate(self, AEvent):
        self._check_event("Activate", AEvent)
        self.FOnActivate = AEvent

    def SetOnDestroy(self, AEvent):
        self._check_event("Destroy", AEvent)
        self.FOnDestroy = AEvent
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def Show(self):
        self.Showing = True
        self._fire("Show")
        self._fire("Activate")

    def Close(self):
        self._fire("Close")
        self.Showing = False

    def Resize(self):
        self._fire("Resize")

    def free(self):
        try:
            self._fire("Destroy")
        except Exception as e:
            self.log("free", f"⚠️ OnDestroy error: {e}")
        super().free()
