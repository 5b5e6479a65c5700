from .export import (
    EXPORT_FILENAME,
    ExportArtifact,
    InvalidPreferencesError,
    build_export_artifact,
    export_preferences_json,
    import_preferences_json,
    write_export_artifact,
)
from .preferences import PersistenceError, PreferenceEngine, PreferenceView, ProfileResult

__all__ = [
    "EXPORT_FILENAME",
    "ExportArtifact",
    "InvalidPreferencesError",
    "PersistenceError",
    "PreferenceEngine",
    "PreferenceView",
    "ProfileResult",
    "build_export_artifact",
    "export_preferences_json",
    "import_preferences_json",
    "write_export_artifact",
]
