from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from prefkit_core.diagnostics import log_prefs
from prefkit_core.engine.export import (
    ExportArtifact,
    build_export_artifact,
    import_preferences_json,
)
from prefkit_core.i18n import TranslationBundle, TranslationTable, default_translation_table
from prefkit_core.model import THEME_DARK, THEME_LIGHT, THEMES, PreferenceState
from prefkit_core.persistence import PreferenceStore, hydrate_state, write_state


class PersistenceError(RuntimeError):
    pass


@dataclass(frozen=True)
class ProfileResult:
    applied: bool
    state: PreferenceState
    name: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class PreferenceView:
    state: PreferenceState
    bundle: TranslationBundle
    profile_names: tuple[str, ...]

    @property
    def font_value(self) -> str:
        return f"{self.state.font_size}{self.state.font_unit}"

    @property
    def current_theme_text(self) -> str:
        return self.bundle.current_theme_label(self.state.theme)


class PreferenceEngine:
    """Owns one PreferenceState and writes it through to a store.

    Every mutating operation persists the whole state before returning. If the
    store rejects the write, the in-memory state is rolled back to what it was
    before the operation and PersistenceError is raised.
    """

    def __init__(
        self,
        store: PreferenceStore,
        *,
        translations: Optional[TranslationTable] = None,
        state: Optional[PreferenceState] = None,
    ) -> None:
        self._store = store
        self._translations = translations or default_translation_table()
        if state is None:
            state = PreferenceState(language=self._translations.default_language)
        self._check_theme(state.theme)
        self._check_font_size(state.font_size)
        self._check_font_unit(state.font_unit)
        self._check_language(state.language)
        self._state = state.copy()

    @property
    def state(self) -> PreferenceState:
        return self._state.copy()

    @property
    def translations(self) -> TranslationTable:
        return self._translations

    @property
    def bundle(self) -> TranslationBundle:
        return self._translations.bundle(self._state.language)

    def profile_names(self) -> tuple[str, ...]:
        return tuple(self._state.profiles)

    def view(self) -> PreferenceView:
        return PreferenceView(state=self.state, bundle=self.bundle, profile_names=self.profile_names())

    def initialize(self) -> PreferenceState:
        self._state = hydrate_state(self._store, languages=self._translations, base=self._state)
        log_prefs(
            f"[engine] Hydrated theme={self._state.theme} font={self._state.font_size}{self._state.font_unit} "
            f"language={self._state.language} profiles={len(self._state.profiles)}"
        )
        return self.state

    def persist(self) -> None:
        try:
            write_state(self._store, self._state)
        except Exception as exc:  # noqa: BLE001
            log_prefs(f"[engine] Persist failed: {exc}")
            raise PersistenceError(f"Could not persist preferences: {exc}") from exc

    def set_theme(self, theme: str) -> PreferenceState:
        self._check_theme(theme)
        return self._commit(lambda state: setattr(state, "theme", theme))

    def toggle_theme(self) -> PreferenceState:
        return self.set_theme(THEME_DARK if self._state.theme == THEME_LIGHT else THEME_LIGHT)

    def set_font_size(self, size: int) -> PreferenceState:
        self._check_font_size(size)
        return self._commit(lambda state: setattr(state, "font_size", size))

    def set_font_unit(self, unit: str) -> PreferenceState:
        self._check_font_unit(unit)
        return self._commit(lambda state: setattr(state, "font_unit", unit))

    def set_language(self, language: str) -> PreferenceState:
        self._check_language(language)
        return self._commit(lambda state: setattr(state, "language", language))

    def toggle_language(self) -> PreferenceState:
        return self.set_language(self._translations.next_language(self._state.language))

    def save_profile(self, name: str) -> ProfileResult:
        profile_name = str(name or "").strip()
        if not profile_name:
            return ProfileResult(applied=False, state=self.state)
        snapshot = self._state.snapshot()

        def _store_snapshot(state: PreferenceState) -> None:
            state.profiles[profile_name] = snapshot

        state = self._commit(_store_snapshot)
        log_prefs(f"[engine] Saved profile {profile_name!r}")
        return ProfileResult(
            applied=True,
            state=state,
            name=profile_name,
            message=self.bundle.text("prompts.profile_saved"),
        )

    def load_profile(self, name: str) -> ProfileResult:
        snapshot = self._state.profiles.get(name) if name else None
        if snapshot is None:
            return ProfileResult(applied=False, state=self.state)
        state = self._commit(lambda current: current.apply_snapshot(snapshot))
        log_prefs(f"[engine] Loaded profile {name!r}")
        # The loaded profile may have switched languages; report in the new one.
        return ProfileResult(
            applied=True,
            state=state,
            name=name,
            message=self.bundle.text("prompts.profile_loaded"),
        )

    def prepare_export(self) -> str:
        return self.bundle.text("prompts.export_confirmation")

    def complete_export(self, confirmed: bool) -> Optional[ExportArtifact]:
        if not confirmed:
            log_prefs("[engine] Export declined")
            return None
        artifact = build_export_artifact(self._state.snapshot())
        log_prefs(f"[engine] Export prepared ({len(artifact.content)} bytes)")
        return artifact

    def export_profile(self, confirm: Callable[[str], bool]) -> Optional[ExportArtifact]:
        prompt = self.prepare_export()
        return self.complete_export(bool(confirm(prompt)))

    def import_preferences(self, payload: str | bytes) -> PreferenceState:
        snapshot = import_preferences_json(payload, languages=self._translations)
        return self._commit(lambda state: state.apply_snapshot(snapshot))

    def _commit(self, mutate: Callable[[PreferenceState], None]) -> PreferenceState:
        previous = self._state.copy()
        mutate(self._state)
        try:
            self.persist()
        except PersistenceError:
            self._state = previous
            self._restore_store()
            raise
        return self.state

    def _restore_store(self) -> None:
        try:
            write_state(self._store, self._state)
        except Exception as exc:  # noqa: BLE001
            log_prefs(f"[engine] Could not restore stored preferences: {exc}")

    @staticmethod
    def _check_theme(theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unsupported theme: {theme!r}")

    @staticmethod
    def _check_font_size(size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"Font size must be an integer, got {size!r}")

    @staticmethod
    def _check_font_unit(unit: str) -> None:
        if not isinstance(unit, str) or not unit.strip():
            raise ValueError(f"Font unit must be a non-empty string, got {unit!r}")

    def _check_language(self, language: str) -> None:
        if language not in self._translations:
            raise ValueError(f"Unsupported language: {language!r}")
