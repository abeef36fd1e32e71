"""Unit tests for user settings."""

import json
import logging
from pathlib import Path

import pytest

from glance.settings import SettingsStore, ViewerSettings, load_settings, validate_setting


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "settings.json"


def write_settings(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_defaults_when_file_missing(settings_file):
    assert load_settings(settings_file) == ViewerSettings()
    assert ViewerSettings().filler_marker == "~"
    assert ViewerSettings().goodbye_message == "Goodbye."
    assert ViewerSettings().status_bar is True


def test_loads_valid_settings(settings_file):
    write_settings(settings_file, {
        "filler_marker": "·",
        "goodbye_message": "Bye!",
        "status_bar": False,
    })

    settings = load_settings(settings_file)

    assert settings == ViewerSettings(filler_marker="·", goodbye_message="Bye!", status_bar=False)


def test_invalid_values_fall_back_to_defaults(settings_file, caplog):
    write_settings(settings_file, {"filler_marker": "", "status_bar": "yes", "goodbye_message": "Ciao"})

    with caplog.at_level(logging.WARNING, logger="glance.settings"):
        settings = load_settings(settings_file)

    assert settings.filler_marker == "~"
    assert settings.status_bar is True
    assert settings.goodbye_message == "Ciao"
    assert "filler_marker" in caplog.text
    assert "status_bar" in caplog.text


def test_unknown_keys_are_ignored(settings_file):
    write_settings(settings_file, {"theme": "dark", "status_bar": False})

    assert load_settings(settings_file) == ViewerSettings(status_bar=False)


def test_malformed_json_is_logged_and_ignored(settings_file, caplog):
    settings_file.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="glance.settings"):
        settings = load_settings(settings_file)

    assert settings == ViewerSettings()
    assert "Could not load settings" in caplog.text


def test_non_object_json_is_ignored(settings_file, caplog):
    write_settings(settings_file, ["status_bar", False])

    with caplog.at_level(logging.WARNING, logger="glance.settings"):
        settings = load_settings(settings_file)

    assert settings == ViewerSettings()
    assert "not a dict" in caplog.text


def test_default_location_is_user_config_dir(monkeypatch, tmp_path):
    monkeypatch.setattr("glance.settings.platformdirs.user_config_dir", lambda app: str(tmp_path / app))

    store = SettingsStore()

    assert store.settings_file == Path(tmp_path / "glance" / "settings.json")


@pytest.mark.parametrize("key, value, valid", [
    ("filler_marker", "~", True),
    ("filler_marker", "", False),
    ("filler_marker", "a\nb", False),
    ("filler_marker", 1, False),
    ("goodbye_message", "", True),
    ("goodbye_message", None, False),
    ("status_bar", False, True),
    ("status_bar", 0, False),
    ("something_else", object(), True),
])
def test_validate_setting(key, value, valid):
    assert validate_setting(key, value) is valid
