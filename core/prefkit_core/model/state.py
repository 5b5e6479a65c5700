from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, MutableMapping

THEME_LIGHT = "light"
THEME_DARK = "dark"
THEMES = (THEME_LIGHT, THEME_DARK)

DEFAULT_THEME = THEME_LIGHT
DEFAULT_FONT_SIZE = 16
DEFAULT_FONT_UNIT = "px"
DEFAULT_LANGUAGE = "en"

# Wire names shared by the persisted store and the export artifact.
KEY_THEME = "theme"
KEY_FONT_SIZE = "fontSize"
KEY_FONT_UNIT = "fontUnit"
KEY_LANGUAGE = "language"
KEY_PROFILES = "profiles"
SCALAR_KEYS = (KEY_THEME, KEY_FONT_SIZE, KEY_FONT_UNIT, KEY_LANGUAGE)


@dataclass(frozen=True)
class ProfileSnapshot:
    theme: str = DEFAULT_THEME
    font_size: int = DEFAULT_FONT_SIZE
    font_unit: str = DEFAULT_FONT_UNIT
    language: str = DEFAULT_LANGUAGE


@dataclass
class PreferenceState:
    theme: str = DEFAULT_THEME
    font_size: int = DEFAULT_FONT_SIZE
    font_unit: str = DEFAULT_FONT_UNIT
    language: str = DEFAULT_LANGUAGE
    profiles: MutableMapping[str, ProfileSnapshot] = field(default_factory=dict)

    def copy(self) -> "PreferenceState":
        # Snapshots are frozen, so a shallow copy of the mapping is enough.
        return replace(self, profiles=dict(self.profiles))

    def snapshot(self) -> ProfileSnapshot:
        return ProfileSnapshot(
            theme=self.theme,
            font_size=self.font_size,
            font_unit=self.font_unit,
            language=self.language,
        )

    def apply_snapshot(self, snapshot: ProfileSnapshot) -> None:
        self.theme = snapshot.theme
        self.font_size = snapshot.font_size
        self.font_unit = snapshot.font_unit
        self.language = snapshot.language


def snapshot_to_dict(snapshot: ProfileSnapshot) -> dict[str, Any]:
    return {
        KEY_THEME: snapshot.theme,
        KEY_FONT_SIZE: snapshot.font_size,
        KEY_FONT_UNIT: snapshot.font_unit,
        KEY_LANGUAGE: snapshot.language,
    }


def profiles_to_dict(profiles: Mapping[str, ProfileSnapshot]) -> dict[str, dict[str, Any]]:
    return {name: snapshot_to_dict(snapshot) for name, snapshot in profiles.items()}
