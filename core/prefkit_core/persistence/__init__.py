from .codec import (
    PERSISTED_KEYS,
    decode_profiles,
    encode_profiles,
    encode_state,
    hydrate_state,
    parse_font_size,
    parse_snapshot,
    write_state,
)
from .paths import DATA_DIR_ENV, PrefkitPaths, build_paths, resolve_data_root
from .store import JsonFileStore, MemoryStore, PreferenceStore, StoreError

__all__ = [
    "DATA_DIR_ENV",
    "JsonFileStore",
    "MemoryStore",
    "PERSISTED_KEYS",
    "PreferenceStore",
    "PrefkitPaths",
    "StoreError",
    "build_paths",
    "decode_profiles",
    "encode_profiles",
    "encode_state",
    "hydrate_state",
    "parse_font_size",
    "parse_snapshot",
    "resolve_data_root",
    "write_state",
]
