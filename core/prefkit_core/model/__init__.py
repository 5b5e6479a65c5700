from .state import (
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_UNIT,
    DEFAULT_LANGUAGE,
    DEFAULT_THEME,
    KEY_FONT_SIZE,
    KEY_FONT_UNIT,
    KEY_LANGUAGE,
    KEY_PROFILES,
    KEY_THEME,
    SCALAR_KEYS,
    THEME_DARK,
    THEME_LIGHT,
    THEMES,
    PreferenceState,
    ProfileSnapshot,
    profiles_to_dict,
    snapshot_to_dict,
)

__all__ = [
    "DEFAULT_FONT_SIZE",
    "DEFAULT_FONT_UNIT",
    "DEFAULT_LANGUAGE",
    "DEFAULT_THEME",
    "KEY_FONT_SIZE",
    "KEY_FONT_UNIT",
    "KEY_LANGUAGE",
    "KEY_PROFILES",
    "KEY_THEME",
    "SCALAR_KEYS",
    "THEME_DARK",
    "THEME_LIGHT",
    "THEMES",
    "PreferenceState",
    "ProfileSnapshot",
    "profiles_to_dict",
    "snapshot_to_dict",
]
