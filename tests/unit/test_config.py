from __future__ import annotations

import pytest
from pydantic import ValidationError

from dotnet_action.config import ActionSettings
from dotnet_action.models import ActionKind


def test_settings_defaults(make_env) -> None:
    settings = ActionSettings.from_environment(make_env())
    assert settings.action is None
    assert settings.working_directory == ""
    assert settings.step_summary is True


def test_settings_normalizes_action(make_env) -> None:
    settings = ActionSettings.from_environment(make_env(INPUT_ACTION="  Publish "))
    assert settings.action == ActionKind.PUBLISH


def test_settings_parses_booleans(make_env) -> None:
    env = make_env(INPUT_STEP_SUMMARY="false", INPUT_WORKING_DIRECTORY="src")
    settings = ActionSettings.from_environment(env)
    assert settings.step_summary is False
    assert settings.working_directory == "src"


def test_empty_inputs_use_defaults(make_env) -> None:
    settings = ActionSettings.from_environment(make_env(INPUT_STEP_SUMMARY="", INPUT_ACTION=""))
    assert settings.step_summary is True
    assert settings.action is None


def test_settings_read_only_the_snapshot(monkeypatch: pytest.MonkeyPatch, make_env) -> None:
    monkeypatch.setenv("INPUT_ACTION", "clean")
    monkeypatch.setenv("INPUT_STEP_SUMMARY", "false")
    settings = ActionSettings.from_environment(make_env())
    assert settings.action is None
    assert settings.step_summary is True


def test_unknown_action_raises(make_env) -> None:
    with pytest.raises(ValidationError):
        ActionSettings.from_environment(make_env(INPUT_ACTION="deploy"))


def test_settings_are_frozen(make_env) -> None:
    settings = ActionSettings.from_environment(make_env())
    with pytest.raises((TypeError, ValidationError)):
        settings.step_summary = False
