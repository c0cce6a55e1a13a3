"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from typesalad.config import FilesSettings, SystemSettings


def test_system_defaults(monkeypatch):
    monkeypatch.delenv("TYPESALAD_WARN_ON_NEW_KEY", raising=False)
    monkeypatch.delenv("TYPESALAD_ALLOW_UNTYPED_STORAGE", raising=False)

    settings = SystemSettings(_env_file=None)

    assert settings.warn_on_new_key is True
    assert settings.allow_untyped_storage is True


def test_system_settings_from_env(monkeypatch):
    monkeypatch.setenv("TYPESALAD_WARN_ON_NEW_KEY", "false")

    assert SystemSettings(_env_file=None).warn_on_new_key is False


def test_files_settings_from_env(monkeypatch):
    monkeypatch.setenv("SALADFILES_JSON_INDENT", "4")
    monkeypatch.setenv("SALADFILES_TYPE_SCALARS", "true")

    settings = FilesSettings(_env_file=None)

    assert settings.json_indent == 4
    assert settings.type_scalars is True
    assert settings.encoding == "utf-8"


def test_explicit_values_override_env(monkeypatch):
    monkeypatch.setenv("SALADFILES_JSON_INDENT", "4")

    assert FilesSettings(_env_file=None, json_indent=0).json_indent == 0


@pytest.mark.parametrize("overrides", [{"json_indent": -1}, {"encoding": ""}])
def test_files_settings_reject_invalid_values(overrides):
    with pytest.raises(ValidationError):
        FilesSettings(_env_file=None, **overrides)
