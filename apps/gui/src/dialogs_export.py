from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QFileDialog, QMessageBox

from prefkit_core import ExportArtifact, write_export_artifact


def confirm_export(parent, prompt: str, *, title: str = "") -> bool:
    answer = QMessageBox.question(
        parent,
        title,
        prompt,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return answer == QMessageBox.Yes


def choose_export_path(parent, artifact: ExportArtifact, default_dir: Path, *, title: str = "") -> Optional[Path]:
    path, _ = QFileDialog.getSaveFileName(
        parent,
        title,
        str(default_dir / artifact.filename),
        "JSON Files (*.json)",
    )
    if not path:
        return None
    return Path(path)


def save_export(parent, artifact: ExportArtifact, default_dir: Path, *, title: str = "") -> Optional[Path]:
    target = choose_export_path(parent, artifact, default_dir, title=title)
    if target is None:
        return None
    if target.name == artifact.filename:
        return write_export_artifact(artifact, target.parent)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(artifact.content)
    return target


def show_profile_message(parent, message: str, *, title: str = "") -> None:
    QMessageBox.information(parent, title, message)


def run_export(parent, prefs, default_dir: Path) -> Optional[Path]:
    title = prefs.view().bundle.text("export_profile")
    artifact = prefs.complete_export(confirm_export(parent, prefs.export_prompt(), title=title))
    if artifact is None:
        return None
    return save_export(parent, artifact, default_dir, title=title)
