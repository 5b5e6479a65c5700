from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from prefkit_core import MemoryStore, log_prefs, set_log_handler
from state import PreferencesState


def _app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def _recorder(prefs: PreferencesState) -> dict[str, list]:
    received: dict[str, list] = {
        "state": [],
        "profiles": [],
        "language": [],
        "message": [],
        "failed": [],
    }
    prefs.stateChanged.connect(received["state"].append)
    prefs.profilesChanged.connect(received["profiles"].append)
    prefs.languageChanged.connect(received["language"].append)
    prefs.messageRaised.connect(received["message"].append)
    prefs.persistenceFailed.connect(received["failed"].append)
    return received


def test_load_emits_initial_state() -> None:
    _app()
    prefs = PreferencesState(MemoryStore({"language": "es", "theme": "dark"}))
    received = _recorder(prefs)
    state = prefs.load()
    assert state.theme == "dark"
    assert received["language"] == ["es"]
    assert received["profiles"] == [()]
    assert len(received["state"]) == 1


def test_theme_change_emits_state_only() -> None:
    _app()
    prefs = PreferencesState(MemoryStore())
    prefs.load()
    received = _recorder(prefs)
    assert prefs.toggle_theme() is True
    assert received["state"][-1].theme == "dark"
    assert received["language"] == []
    assert received["profiles"] == []


def test_language_change_emits_language_signal() -> None:
    _app()
    prefs = PreferencesState(MemoryStore())
    prefs.load()
    received = _recorder(prefs)
    prefs.set_language("es")
    prefs.set_language("es")
    assert received["language"] == ["es"]
    assert len(received["state"]) == 2


def test_save_and_load_profile_emit_messages() -> None:
    _app()
    prefs = PreferencesState(MemoryStore())
    prefs.load()
    received = _recorder(prefs)
    assert prefs.save_profile("work") is True
    assert received["profiles"] == [("work",)]
    prefs.set_font_size(24)
    assert prefs.load_profile("work") is True
    assert prefs.state.font_size == 16
    assert received["message"] == ["Profile saved successfully!", "Profile loaded successfully!"]


def test_rejected_profile_names_emit_nothing() -> None:
    _app()
    prefs = PreferencesState(MemoryStore())
    prefs.load()
    received = _recorder(prefs)
    assert prefs.save_profile("   ") is False
    assert prefs.load_profile("missing") is False
    assert all(values == [] for values in received.values())


def test_persistence_failure_is_reported_and_rolled_back() -> None:
    _app()
    prefs = PreferencesState(MemoryStore(fail_on=("theme",)))
    prefs.load()
    received = _recorder(prefs)
    assert prefs.set_theme("dark") is False
    assert prefs.save_profile("work") is False
    assert len(received["failed"]) == 2
    assert received["state"] == []
    assert prefs.state.theme == "light"
    assert prefs.engine.profile_names() == ()


def test_export_prompt_and_completion() -> None:
    _app()
    prefs = PreferencesState(MemoryStore({"language": "es"}))
    prefs.load()
    assert prefs.export_prompt() == "¿Desea exportar el perfil actual?"
    assert prefs.complete_export(False) is None
    artifact = prefs.complete_export(True)
    assert artifact is not None
    assert b'"language": "es"' in artifact.content


def test_log_forwarding_emits_log_messages() -> None:
    _app()
    prefs = PreferencesState(MemoryStore())
    lines: list[str] = []
    prefs.logMessage.connect(lines.append)
    prefs.install_log_forwarding()
    try:
        prefs.load()
        log_prefs("[gui] hello")
    finally:
        set_log_handler(None)
    assert any(line.startswith("[engine] Hydrated") for line in lines)
    assert "[gui] hello" in lines
