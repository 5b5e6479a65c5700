from .table import (
    REQUIRED_KEYS,
    TranslationBundle,
    TranslationTable,
    UnknownLanguageError,
    default_translation_table,
    load_translation_table,
)

__all__ = [
    "REQUIRED_KEYS",
    "TranslationBundle",
    "TranslationTable",
    "UnknownLanguageError",
    "default_translation_table",
    "load_translation_table",
]
