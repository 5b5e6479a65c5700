from __future__ import annotations

import json
import os
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication, QMessageBox

import dialogs_export
from prefkit_core import MemoryStore
from state import PreferencesState


def _app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def _prefs() -> PreferencesState:
    prefs = PreferencesState(MemoryStore())
    prefs.load()
    prefs.set_theme("dark")
    return prefs


def _answer(monkeypatch, button) -> list[tuple]:
    calls: list[tuple] = []

    def _question(*args):
        calls.append(args)
        return button

    monkeypatch.setattr(dialogs_export.QMessageBox, "question", _question)
    return calls


def _save_to(monkeypatch, path: str) -> list[tuple]:
    calls: list[tuple] = []

    def _get_save_file_name(*args):
        calls.append(args)
        return path, "JSON Files (*.json)"

    monkeypatch.setattr(dialogs_export.QFileDialog, "getSaveFileName", _get_save_file_name)
    return calls


def test_declined_export_writes_nothing(monkeypatch, tmp_path: Path) -> None:
    _app()
    question_calls = _answer(monkeypatch, QMessageBox.No)
    dialog_calls = _save_to(monkeypatch, str(tmp_path / "user_preferences.json"))
    assert dialogs_export.run_export(None, _prefs(), tmp_path) is None
    assert question_calls[0][2] == "Do you want to export the current profile?"
    assert dialog_calls == []
    assert list(tmp_path.iterdir()) == []


def test_confirmed_export_writes_chosen_file(monkeypatch, tmp_path: Path) -> None:
    _app()
    _answer(monkeypatch, QMessageBox.Yes)
    dialog_calls = _save_to(monkeypatch, str(tmp_path / "out" / "user_preferences.json"))
    target = dialogs_export.run_export(None, _prefs(), tmp_path)
    assert target == tmp_path / "out" / "user_preferences.json"
    assert dialog_calls[0][2] == str(tmp_path / "user_preferences.json")
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data == {"theme": "dark", "fontSize": 16, "fontUnit": "px", "language": "en"}


def test_export_to_renamed_file(monkeypatch, tmp_path: Path) -> None:
    _app()
    _answer(monkeypatch, QMessageBox.Yes)
    _save_to(monkeypatch, str(tmp_path / "mine.json"))
    target = dialogs_export.run_export(None, _prefs(), tmp_path)
    assert target == tmp_path / "mine.json"
    assert json.loads(target.read_text(encoding="utf-8"))["theme"] == "dark"


def test_cancelled_file_dialog_returns_none(monkeypatch, tmp_path: Path) -> None:
    _app()
    _answer(monkeypatch, QMessageBox.Yes)
    _save_to(monkeypatch, "")
    assert dialogs_export.run_export(None, _prefs(), tmp_path) is None
    assert list(tmp_path.iterdir()) == []
