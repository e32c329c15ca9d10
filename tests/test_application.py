"""Tests for the Application singleton and form creation."""

import pytest

from aw_application import Application, TApplication
from aw_controls import TButton, TForm
from aw_events import TBindStep
from aw_logger import get_log_router


class TMainForm(TForm):
    def do_init(self):
        self.Button1 = TButton(self, "Button1")
        self.created = 0

    def OnFormCreate(self, Sender):
        self.created += 1

    def OnButton1Click(self, Sender):
        pass

    def OnApplicationMinimize(self, Sender):
        pass


def test_application_is_singleton(app):
    assert TApplication.app() is app
    assert app.Name == "Application"
    with pytest.raises(RuntimeError, match="singleton"):
        TApplication()


def test_application_facade(app):
    assert Application() is app
    assert get_log_router() is not None


def test_create_form_wires_events(app):
    form = app.CreateForm(TMainForm, "MainForm")

    assert form.Owner is app
    assert app.Forms["MainForm"] is form
    assert app.MainForm is form
    assert form.created == 1
    assert form.Button1.FOnClick == form.OnButton1Click
    assert app.FOnMinimize == form.OnApplicationMinimize
    assert form.EventReport.create_called
    assert [r.target for r in form.EventReport.ok(TBindStep.COMPONENTS)] == ["Button1"]


def test_first_form_stays_main(app):
    first = app.CreateForm(TMainForm, "MainForm")
    second = app.CreateForm(TMainForm, "SecondForm")

    assert app.MainForm is first
    assert set(app.Forms) == {"MainForm", "SecondForm"}
    assert app.FOnMinimize == second.OnApplicationMinimize


def test_create_form_survives_bad_env_config(app, env):
    env["AW_FORM_ALIASES"] = ";"
    form = app.CreateForm(TMainForm, "MainForm")

    assert app.Forms["MainForm"] is form
    assert form.created == 1
    assert form.EventReport.failed(TBindStep.CONFIG)
    assert form.Button1.FOnClick == form.OnButton1Click


def test_create_form_without_component_events(app):
    form = app.CreateForm(TMainForm, "MainForm", sub_component_event=False)

    assert form.Button1.FOnClick is None
    assert app.FOnMinimize == form.OnApplicationMinimize


def test_free_form_unregisters(app):
    form = app.CreateForm(TMainForm, "MainForm")
    form.free()

    assert app.Forms == {}
    assert app.MainForm is None
    assert "MainForm" not in app.Components


def test_handle_exception_without_handler_logs(app, log_lines):
    app.HandleException(ValueError("oops"))

    assert any("ValueError: oops" in line for line in log_lines)


def test_handle_exception_with_handler(app):
    seen = []
    app.SetOnException(lambda Sender, E: seen.append((Sender, E.args[0])))
    app.HandleException(KeyError("k"))

    assert seen == [(app, "k")]


def test_service_events_fire(app):
    seen = []
    app.SetOnIdle(lambda Sender: seen.append("idle"))
    app.SetOnHint(lambda Sender, text: seen.append(text))
    app.Idle()
    app.Hint("tip")
    app.Activate()

    assert seen == ["idle", "tip"]


def test_setter_overwrites(app):
    app.SetOnRestore(lambda Sender: "first")
    app.SetOnRestore(lambda Sender: "second")

    assert app.FOnRestore(app) == "second"
