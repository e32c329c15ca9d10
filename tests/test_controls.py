"""Tests for the component model."""

import pytest

from aw_controls import TButton, TCheckBox, TEdit, TForm, TLabel, TTimer


@pytest.fixture
def form():
    return TForm(None, "Form1")


def test_auto_names(form):
    b1 = TButton(form)
    b2 = TButton(form)
    label = TLabel(form)

    assert (b1.Name, b2.Name, label.Name) == ("Button1", "Button2", "Label1")
    assert b1.Caption == "Button1"
    assert form.list() == ["Button1", "Button2", "Label1"]


def test_duplicate_name_fails(form):
    TButton(form, "Ok")
    with pytest.raises(ValueError, match="Duplicate component: Ok"):
        TButton(form, "Ok")


def test_component_enumeration(form):
    b = TButton(form, "Ok")
    e = TEdit(form, "Edit1")

    assert form.ComponentCount == 2
    assert form.component(0) is b
    assert form.component(1) is e
    assert form.find("Edit1") is e
    assert e.Equals(e) and not e.Equals(b)


def test_supports_event(form):
    e = TEdit(form, "Edit1")

    assert e.supports_event("Change") == e.SetOnChange
    assert e.supports_event("Timer") is None


def test_setter_rejects_non_callable(form):
    b = TButton(form, "Ok")
    with pytest.raises(TypeError, match="must be callable"):
        b.SetOnClick(42)
    b.SetOnClick(None)
    assert b.FOnClick is None


def test_disabled_click_does_not_fire(form):
    b = TButton(form, "Ok")
    seen = []
    b.SetOnClick(lambda Sender: seen.append(Sender))
    b.Enabled = False
    b.Click()
    b.Enabled = True
    b.Click()

    assert seen == [b]


def test_focus_events(form):
    e = TEdit(form, "Edit1")
    seen = []
    e.SetOnEnter(lambda Sender: seen.append("enter"))
    e.SetOnExit(lambda Sender: seen.append("exit"))
    e.SetFocus()
    e.KillFocus()

    assert seen == ["enter", "exit"]


def test_edit_change_fires_once_per_change(form):
    e = TEdit(form, "Edit1")
    seen = []
    e.SetOnChange(lambda Sender: seen.append(Sender.Text))
    e.Text = "a"
    e.Text = "a"
    e.Text = None

    assert seen == ["a", ""]


def test_checkbox_click_toggles(form):
    c = TCheckBox(form, "Check1")
    seen = []
    c.SetOnChange(lambda Sender: seen.append(("change", Sender.Checked)))
    c.SetOnClick(lambda Sender: seen.append(("click", Sender.Checked)))
    c.Click()

    assert seen == [("change", True), ("click", True)]


def test_timer_tick(form):
    t = TTimer(form)
    seen = []
    t.SetOnTimer(lambda Sender: seen.append(Sender.Name))
    t.Tick()
    t.Enabled = False
    t.Tick()

    assert seen == ["Timer1"]


def test_form_lifecycle_events(form):
    seen = []
    form.SetOnShow(lambda Sender: seen.append("show"))
    form.SetOnActivate(lambda Sender: seen.append("activate"))
    form.SetOnResize(lambda Sender: seen.append("resize"))
    form.SetOnClose(lambda Sender: seen.append("close"))
    form.Show()
    form.Resize()
    form.Close()

    assert seen == ["show", "activate", "resize", "close"]
    assert form.Showing is False


def test_form_free_fires_destroy(form):
    child = TButton(form, "Ok")
    seen = []
    form.SetOnDestroy(lambda Sender: seen.append(Sender.Name))
    form.free()

    assert seen == ["Form1"]
    assert form.Components == {}
    assert child.Components == {}


def test_destroy_handler_error_is_logged(form, log_lines):
    form.SetOnDestroy(lambda Sender: 1 / 0)
    form.free()

    assert any("OnDestroy error" in line for line in log_lines)


def test_subclass_init_is_forbidden():
    with pytest.raises(TypeError, match="do_init"):
        class TBadButton(TButton):
            def __init__(self, Owner=None, Name=None):
                super().__init__(Owner, Name)


def test_id_path(app):
    form = TForm(app, "MainForm")
    b = TButton(form, "Ok")

    assert b.id() == "Application-MainForm-Ok"
    assert [c.Name for c in form.iter_tree()] == ["MainForm", "Ok"]
