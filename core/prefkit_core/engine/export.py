from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any, Container

from prefkit_core.model import (
    KEY_FONT_SIZE,
    KEY_FONT_UNIT,
    KEY_LANGUAGE,
    KEY_THEME,
    SCALAR_KEYS,
    ProfileSnapshot,
    snapshot_to_dict,
)
from prefkit_core.persistence import parse_snapshot

EXPORT_FILENAME = "user_preferences.json"
EXPORT_MEDIA_TYPE = "application/json"


class InvalidPreferencesError(ValueError):
    pass


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: bytes
    media_type: str = EXPORT_MEDIA_TYPE

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


def export_preferences_json(snapshot: ProfileSnapshot, *, indent: int = 2) -> str:
    return json.dumps(snapshot_to_dict(snapshot), indent=indent, ensure_ascii=False)


def build_export_artifact(snapshot: ProfileSnapshot) -> ExportArtifact:
    payload = export_preferences_json(snapshot)
    return ExportArtifact(filename=EXPORT_FILENAME, content=payload.encode("utf-8"))


def write_export_artifact(artifact: ExportArtifact, directory: str | Path) -> Path:
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / artifact.filename
    target.write_bytes(artifact.content)
    return target


def import_preferences_json(payload: str | bytes, *, languages: Container[str]) -> ProfileSnapshot:
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidPreferencesError("Preferences file is not valid UTF-8.") from exc
    try:
        data: Any = json.loads(payload)
    except ValueError as exc:
        raise InvalidPreferencesError(f"Preferences file is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidPreferencesError("Expected a JSON object with theme, fontSize, fontUnit and language.")
    missing = [key for key in SCALAR_KEYS if key not in data]
    if missing:
        raise InvalidPreferencesError(f"Missing fields: {', '.join(missing)}")
    snapshot = parse_snapshot(data, languages=languages)
    if snapshot is None:
        raise InvalidPreferencesError(
            "Invalid preference values: "
            f"{KEY_THEME}={data.get(KEY_THEME)!r}, {KEY_FONT_SIZE}={data.get(KEY_FONT_SIZE)!r}, "
            f"{KEY_FONT_UNIT}={data.get(KEY_FONT_UNIT)!r}, {KEY_LANGUAGE}={data.get(KEY_LANGUAGE)!r}"
        )
    return snapshot
