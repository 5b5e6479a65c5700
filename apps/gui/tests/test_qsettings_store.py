from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings

from prefkit_core import PreferenceEngine, PreferenceState
from settings_store import QSettingsStore


def _settings(tmp_path: Path) -> QSettings:
    return QSettings(str(tmp_path / "prefkit.ini"), QSettings.IniFormat)


def test_missing_key_reads_as_none(tmp_path: Path) -> None:
    store = QSettingsStore(_settings(tmp_path))
    assert store.get("theme") is None


def test_values_live_under_preferences_group(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    store = QSettingsStore(settings)
    store.set("theme", "dark")
    assert store.get("theme") == "dark"
    assert settings.value("preferences/theme") == "dark"
    assert settings.value("theme") is None


def test_values_survive_a_new_settings_object(tmp_path: Path) -> None:
    store = QSettingsStore(_settings(tmp_path))
    store.set("theme", "dark")
    store.set("fontSize", "20")
    reopened = QSettingsStore(_settings(tmp_path))
    assert reopened.get("theme") == "dark"
    assert reopened.get("fontSize") == "20"


def test_custom_group(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    store = QSettingsStore(settings, group="/ui/")
    store.set("language", "es")
    assert settings.value("ui/language") == "es"


def test_engine_round_trip_through_qsettings(tmp_path: Path) -> None:
    store = QSettingsStore(_settings(tmp_path))
    engine = PreferenceEngine(store)
    engine.initialize()
    engine.set_theme("dark")
    engine.set_font_size(20)
    engine.save_profile("work")

    restored = PreferenceEngine(store)
    state = restored.initialize()
    assert state == engine.state
    assert restored.profile_names() == ("work",)
    assert state != PreferenceState()
