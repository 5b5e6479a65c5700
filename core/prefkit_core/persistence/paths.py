from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import sys

DATA_DIR_ENV = "PREFKIT_DATA_DIR"
STORE_FILENAME = "preferences.json"


def _platform_data_root() -> Path:
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "Prefkit"
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or str(home / "AppData" / "Roaming")
        return Path(base) / "Prefkit"
    return home / ".local" / "share" / "Prefkit"


def resolve_data_root() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    root = Path(override).expanduser() if override else _platform_data_root()
    root.mkdir(parents=True, exist_ok=True)
    return root


@dataclass(frozen=True)
class PrefkitPaths:
    data_root: Path
    store_path: Path
    export_dir: Path


def build_paths(root: Path | None = None) -> PrefkitPaths:
    data_root = Path(root) if root is not None else resolve_data_root()
    data_root.mkdir(parents=True, exist_ok=True)
    return PrefkitPaths(
        data_root=data_root,
        store_path=data_root / STORE_FILENAME,
        export_dir=data_root / "exports",
    )
