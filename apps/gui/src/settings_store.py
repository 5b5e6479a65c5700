from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSettings

PREFERENCES_GROUP = "preferences"


class QSettingsStore:
    """PreferenceStore backed by QSettings, under the ``preferences/`` group."""

    def __init__(self, settings: Optional[QSettings] = None, *, group: str = PREFERENCES_GROUP) -> None:
        self._settings = settings or QSettings()
        self._group = group.strip("/")

    @property
    def settings(self) -> QSettings:
        return self._settings

    def _key(self, key: str) -> str:
        return f"{self._group}/{key}" if self._group else key

    def get(self, key: str) -> Optional[str]:
        value = self._settings.value(self._key(key))
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(self._key(key), value)
        self._settings.sync()
