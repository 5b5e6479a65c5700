from .diagnostics import log_prefs, set_log_handler
from .engine import (
    EXPORT_FILENAME,
    ExportArtifact,
    InvalidPreferencesError,
    PersistenceError,
    PreferenceEngine,
    PreferenceView,
    ProfileResult,
    build_export_artifact,
    export_preferences_json,
    import_preferences_json,
    write_export_artifact,
)
from .i18n import (
    TranslationBundle,
    TranslationTable,
    UnknownLanguageError,
    default_translation_table,
    load_translation_table,
)
from .model import (
    THEME_DARK,
    THEME_LIGHT,
    THEMES,
    PreferenceState,
    ProfileSnapshot,
)
from .persistence import (
    JsonFileStore,
    MemoryStore,
    PreferenceStore,
    PrefkitPaths,
    StoreError,
    build_paths,
    encode_state,
    hydrate_state,
)

__all__ = [
    "EXPORT_FILENAME",
    "ExportArtifact",
    "InvalidPreferencesError",
    "JsonFileStore",
    "MemoryStore",
    "PersistenceError",
    "PreferenceEngine",
    "PreferenceState",
    "PreferenceStore",
    "PreferenceView",
    "PrefkitPaths",
    "ProfileResult",
    "ProfileSnapshot",
    "StoreError",
    "THEME_DARK",
    "THEME_LIGHT",
    "THEMES",
    "TranslationBundle",
    "TranslationTable",
    "UnknownLanguageError",
    "build_export_artifact",
    "build_paths",
    "default_translation_table",
    "encode_state",
    "export_preferences_json",
    "hydrate_state",
    "import_preferences_json",
    "load_translation_table",
    "log_prefs",
    "set_log_handler",
    "write_export_artifact",
]
