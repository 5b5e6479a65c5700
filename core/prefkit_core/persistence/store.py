from __future__ import annotations

import json
import os
from pathlib import Path
import tempfile
from typing import Iterable, Optional, Protocol

from prefkit_core.diagnostics import log_prefs


class StoreError(OSError):
    pass


class PreferenceStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    def __init__(self, values: Optional[dict[str, str]] = None, *, fail_on: Iterable[str] = ()) -> None:
        self.values: dict[str, str] = dict(values or {})
        self.fail_on = set(fail_on)
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        if key in self.fail_on:
            raise StoreError(f"Refusing to write key {key!r}.")
        self.values[key] = value
        self.writes.append((key, value))


class JsonFileStore:
    """String key/value store kept in a single JSON object file.

    Every write rewrites the whole file through a temporary file so a crash
    never leaves a truncated document behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._values: Optional[dict[str, str]] = None

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        values = dict(self._load())
        values[key] = value
        self._write(values)
        self._values = values

    def reload(self) -> None:
        self._values = None

    def _load(self) -> dict[str, str]:
        if self._values is not None:
            return self._values
        self._values = {}
        if not self._path.exists():
            return self._values
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log_prefs(f"[store] Ignoring unreadable store {self._path}: {exc}")
            return self._values
        if not isinstance(data, dict):
            log_prefs(f"[store] Ignoring store {self._path}: expected a JSON object.")
            return self._values
        self._values = {str(key): str(value) for key, value in data.items() if isinstance(value, str)}
        return self._values

    def _write(self, values: dict[str, str]) -> None:
        payload = json.dumps(values, indent=2, ensure_ascii=False)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=str(self._path.parent),
            )
            try:
                with os.fdopen(handle, "w", encoding="utf-8") as temp_file:
                    temp_file.write(payload + "\n")
                os.replace(temp_name, self._path)
            except BaseException:
                if os.path.exists(temp_name):
                    os.unlink(temp_name)
                raise
        except OSError as exc:
            raise StoreError(f"Could not write {self._path}: {exc}") from exc
