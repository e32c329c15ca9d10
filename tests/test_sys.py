"""Tests for ENV helpers, configuration and the ownership tree."""

import pytest
from pydantic import ValidationError

from aw_sys import TAssocConfig, TComponent, _key, explode, key_bool


def test_key_stores_default(env):
    assert _key("SOME_KEY", "abc") == "abc"
    assert env["SOME_KEY"] == "abc"
    env["SOME_KEY"] = "xyz"
    assert _key("SOME_KEY", "abc") == "xyz"
    assert _key("", "abc") is None


@pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("On", True), ("0", False), ("no", False)])
def test_key_bool(env, raw, expected):
    env["FLAG"] = raw
    assert key_bool("FLAG") is expected


def test_explode():
    assert explode(",", "Form; TForm ,Frm,,") == ["Form", "TForm", "Frm"]
    assert explode(",", "") == []


class TestAssocConfig:
    def test_defaults_from_env(self, env):
        config = TAssocConfig.from_env()

        assert config.sub_component_event is True
        assert config.form_aliases == ("Form", "TForm")
        assert config.create_hook == "OnFormCreate"
        assert env["AW_FORM_ALIASES"] == "Form,TForm"

    def test_env_values(self, env):
        env["AW_SUB_COMPONENT_EVENT"] = "0"
        env["AW_FORM_ALIASES"] = "Form; Frm"
        env["AW_CREATE_HOOK"] = "OnFormReady"
        config = TAssocConfig.from_env()

        assert config.sub_component_event is False
        assert config.form_aliases == ("Form", "Frm")
        assert config.create_hook == "OnFormReady"

    def test_overrides_beat_env(self, env):
        env["AW_SUB_COMPONENT_EVENT"] = "0"
        config = TAssocConfig.from_env(sub_component_event=True, form_aliases=None)

        assert config.sub_component_event is True
        assert config.form_aliases == ("Form", "TForm")

    def test_aliases_are_cleaned(self):
        assert TAssocConfig(form_aliases=(" Form", "Form", "", "TForm")).form_aliases == ("Form", "TForm")

    def test_empty_aliases_rejected(self):
        with pytest.raises(ValidationError):
            TAssocConfig(form_aliases=())


class TestOwnerTree:
    def test_fail_raises_and_logs(self, log_lines):
        comp = TComponent(None, "Lonely")
        with pytest.raises(KeyError, match="boom"):
            comp.fail("probe", "boom", KeyError)

        assert any("[Lonely]fail(): boom" in line for line in log_lines)

    def test_fail_writes_fail_log(self, env, tmp_path):
        path = tmp_path / "log" / "fail.log"
        env["FAIL_LOG"] = str(path)
        comp = TComponent(None, "Lonely")
        with pytest.raises(RuntimeError):
            comp.fail("probe", "disk boom", RuntimeError)

        assert "disk boom" in path.read_text(encoding="utf-8")

    def test_remove_unknown_child(self):
        owner = TComponent(None, "Owner")
        stranger = TComponent(None, "Stranger")
        with pytest.raises(KeyError, match="Component not found"):
            owner.remove(stranger)

    def test_rename_keeps_owner_key(self):
        owner = TComponent(None, "Owner")
        child = TComponent(owner, "Child")
        child.Name = "Renamed"

        assert owner.find("Child") is child
        assert owner.component(0).Name == "Renamed"

    def test_debug_gated_by_env(self, env, log_lines):
        comp = TComponent(None, "Quiet")
        comp.debug("probe", "hidden")
        env["DEBUG_MODE"] = "1"
        comp.debug("probe", "shown")

        assert not any("hidden" in line for line in log_lines)
        assert any("[TComponent.probe] shown" in line for line in log_lines)
