from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any, Mapping, Optional

DEFAULT_LANGUAGE = "en"
CATALOG_DIR = Path(__file__).resolve().parent / "catalogs"

REQUIRED_KEYS = (
    "title",
    "theme_title",
    "theme_button",
    "current_theme",
    "font_title",
    "language_title",
    "language_button",
    "profile_title",
    "profile_placeholder",
    "save_profile",
    "load_profile",
    "export_profile",
    "themes.light",
    "themes.dark",
    "prompts.export_confirmation",
    "prompts.profile_saved",
    "prompts.profile_loaded",
)


class UnknownLanguageError(KeyError):
    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown language code: {self.code!r}"


class _SafeDict(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _lookup(catalog: Mapping[str, Any], key: str) -> str | None:
    if not key:
        return None
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, str) else None


@dataclass(frozen=True)
class TranslationBundle:
    language: str
    catalog: Mapping[str, Any]
    fallback: Mapping[str, Any] = field(default_factory=dict)

    def text(self, key: str, **kwargs: Any) -> str:
        value = _lookup(self.catalog, key) or _lookup(self.fallback, key) or key
        if kwargs:
            return value.format_map(_SafeDict(kwargs))
        return value

    def __getitem__(self, key: str) -> str:
        value = _lookup(self.catalog, key)
        if value is None:
            raise KeyError(key)
        return value

    def theme_name(self, theme: str) -> str:
        return self.text(f"themes.{theme}")

    def current_theme_label(self, theme: str) -> str:
        return self.text("current_theme") + self.theme_name(theme)


class TranslationTable:
    """Read-only language code -> string bundle mapping.

    Catalog order is preserved; it drives language toggling.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, Any]],
        *,
        display_names: Optional[Mapping[str, str]] = None,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        if not catalogs:
            raise ValueError("At least one language catalog is required.")
        if default_language not in catalogs:
            raise ValueError(f"Default language {default_language!r} has no catalog.")
        self._catalogs = {str(code): dict(catalog) for code, catalog in catalogs.items()}
        self._display_names = {
            code: str((display_names or {}).get(code, code)) for code in self._catalogs
        }
        self._default_language = default_language

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._catalogs)

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def display_names(self) -> Mapping[str, str]:
        return dict(self._display_names)

    def __contains__(self, code: object) -> bool:
        return code in self._catalogs

    def bundle(self, code: str) -> TranslationBundle:
        catalog = self._catalogs.get(code)
        if catalog is None:
            raise UnknownLanguageError(code)
        return TranslationBundle(
            language=code,
            catalog=catalog,
            fallback=self._catalogs[self._default_language],
        )

    def next_language(self, code: str) -> str:
        languages = self.languages
        if code not in self._catalogs:
            raise UnknownLanguageError(code)
        index = languages.index(code)
        return languages[(index + 1) % len(languages)]

    def missing_keys(self, code: str) -> list[str]:
        catalog = self.bundle(code).catalog
        return [key for key in REQUIRED_KEYS if _lookup(catalog, key) is None]


def _load_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    return data if isinstance(data, dict) else {}


def load_translation_table(catalog_dir: Path | None = None) -> TranslationTable:
    directory = Path(catalog_dir) if catalog_dir is not None else CATALOG_DIR
    display_names = _load_json(directory / "locales.json")
    if not display_names:
        display_names = {DEFAULT_LANGUAGE: "English"}
    catalogs: dict[str, dict[str, Any]] = {}
    for code in display_names:
        catalog = _load_json(directory / f"{code}.json")
        if not catalog:
            raise ValueError(f"Missing or empty catalog for language {code!r} in {directory}.")
        catalogs[str(code)] = catalog
    table = TranslationTable(
        catalogs,
        display_names={str(key): str(value) for key, value in display_names.items()},
    )
    for code in table.languages:
        missing = table.missing_keys(code)
        if missing:
            raise ValueError(f"Catalog {code!r} is missing keys: {', '.join(missing)}")
    return table


_DEFAULT_TABLE: Optional[TranslationTable] = None


def default_translation_table() -> TranslationTable:
    global _DEFAULT_TABLE
    if _DEFAULT_TABLE is None:
        _DEFAULT_TABLE = load_translation_table()
    return _DEFAULT_TABLE
