"""Conversion between PreferenceState and the string-keyed store.

Five keys are written on every persist: ``theme``, ``fontSize``, ``fontUnit``,
``language`` and ``profiles`` (compact JSON). Hydration is fail-safe: a value
that is missing, empty or malformed leaves the corresponding default alone.
"""
from __future__ import annotations

import json
import re
from typing import Any, Container, Mapping, Optional

from prefkit_core.diagnostics import log_prefs
from prefkit_core.model import (
    KEY_FONT_SIZE,
    KEY_FONT_UNIT,
    KEY_LANGUAGE,
    KEY_PROFILES,
    KEY_THEME,
    THEMES,
    PreferenceState,
    ProfileSnapshot,
    profiles_to_dict,
)
from prefkit_core.persistence.store import PreferenceStore

PERSISTED_KEYS = (KEY_THEME, KEY_FONT_SIZE, KEY_FONT_UNIT, KEY_LANGUAGE, KEY_PROFILES)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def encode_profiles(profiles: Mapping[str, ProfileSnapshot]) -> str:
    return json.dumps(profiles_to_dict(profiles), separators=(",", ":"), ensure_ascii=False)


def encode_state(state: PreferenceState) -> dict[str, str]:
    return {
        KEY_THEME: state.theme,
        KEY_FONT_SIZE: str(state.font_size),
        KEY_FONT_UNIT: state.font_unit,
        KEY_LANGUAGE: state.language,
        KEY_PROFILES: encode_profiles(state.profiles),
    }


def parse_font_size(value: Any) -> Optional[int]:
    """Read a font size from a stored value or a profile entry.

    Strings contribute their leading ASCII integer (``"12.5"`` -> 12,
    ``"20px"`` -> 20); anything without one is malformed.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return None
        return int(match.group(1))
    return None


def parse_snapshot(data: Any, *, languages: Container[str]) -> Optional[ProfileSnapshot]:
    if not isinstance(data, dict):
        return None
    theme = data.get(KEY_THEME)
    font_size = parse_font_size(data.get(KEY_FONT_SIZE))
    font_unit = data.get(KEY_FONT_UNIT)
    language = data.get(KEY_LANGUAGE)
    if theme not in THEMES or language not in languages:
        return None
    if font_size is None or not isinstance(font_unit, str) or not font_unit:
        return None
    return ProfileSnapshot(theme=theme, font_size=font_size, font_unit=font_unit, language=language)


def decode_profiles(raw: str, *, languages: Container[str]) -> dict[str, ProfileSnapshot]:
    try:
        data = json.loads(raw)
    except ValueError as exc:
        log_prefs(f"[codec] Discarding unparsable profiles: {exc}")
        return {}
    if not isinstance(data, dict):
        log_prefs("[codec] Discarding profiles: expected a JSON object.")
        return {}
    profiles: dict[str, ProfileSnapshot] = {}
    for name, item in data.items():
        if not isinstance(name, str) or not name.strip():
            log_prefs(f"[codec] Dropping profile with empty name: {name!r}")
            continue
        snapshot = parse_snapshot(item, languages=languages)
        if snapshot is None:
            log_prefs(f"[codec] Dropping malformed profile {name!r}")
            continue
        profiles[name] = snapshot
    return profiles


def hydrate_state(
    store: PreferenceStore,
    *,
    languages: Container[str],
    base: Optional[PreferenceState] = None,
) -> PreferenceState:
    state = base.copy() if base is not None else PreferenceState()

    theme = store.get(KEY_THEME)
    if theme:
        if theme in THEMES:
            state.theme = theme
        else:
            log_prefs(f"[codec] Ignoring unknown stored theme {theme!r}")

    font_size = store.get(KEY_FONT_SIZE)
    if font_size:
        parsed = parse_font_size(font_size)
        if parsed is None:
            log_prefs(f"[codec] Ignoring malformed stored fontSize {font_size!r}")
        else:
            state.font_size = parsed

    font_unit = store.get(KEY_FONT_UNIT)
    if font_unit:
        state.font_unit = font_unit

    language = store.get(KEY_LANGUAGE)
    if language:
        if language in languages:
            state.language = language
        else:
            log_prefs(f"[codec] Ignoring unknown stored language {language!r}")

    profiles = store.get(KEY_PROFILES)
    if profiles:
        state.profiles = decode_profiles(profiles, languages=languages)

    return state


def write_state(store: PreferenceStore, state: PreferenceState) -> None:
    for key, value in encode_state(state).items():
        store.set(key, value)
