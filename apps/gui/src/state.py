from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from prefkit_core import (
    ExportArtifact,
    PersistenceError,
    PreferenceEngine,
    PreferenceState,
    PreferenceStore,
    PreferenceView,
    ProfileResult,
    TranslationTable,
    set_log_handler,
)


class PreferencesState(QObject):
    stateChanged = Signal(object)
    profilesChanged = Signal(object)
    languageChanged = Signal(str)
    messageRaised = Signal(str)
    persistenceFailed = Signal(str)
    logMessage = Signal(str)

    def __init__(
        self,
        store: PreferenceStore,
        *,
        translations: Optional[TranslationTable] = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._engine = PreferenceEngine(store, translations=translations)

    @property
    def engine(self) -> PreferenceEngine:
        return self._engine

    @property
    def state(self) -> PreferenceState:
        return self._engine.state

    def view(self) -> PreferenceView:
        return self._engine.view()

    def install_log_forwarding(self) -> None:
        set_log_handler(self.logMessage.emit)

    def load(self) -> PreferenceState:
        state = self._engine.initialize()
        self.profilesChanged.emit(self._engine.profile_names())
        self.languageChanged.emit(state.language)
        self.stateChanged.emit(state)
        return state

    def set_theme(self, theme: str) -> bool:
        return self._apply(lambda: self._engine.set_theme(theme))

    def toggle_theme(self) -> bool:
        return self._apply(self._engine.toggle_theme)

    def set_font_size(self, size: int) -> bool:
        return self._apply(lambda: self._engine.set_font_size(int(size)))

    def set_font_unit(self, unit: str) -> bool:
        return self._apply(lambda: self._engine.set_font_unit(unit))

    def set_language(self, language: str) -> bool:
        return self._apply(lambda: self._engine.set_language(language))

    def toggle_language(self) -> bool:
        return self._apply(self._engine.toggle_language)

    def save_profile(self, name: str) -> bool:
        return self._apply_profile(lambda: self._engine.save_profile(name))

    def load_profile(self, name: str) -> bool:
        return self._apply_profile(lambda: self._engine.load_profile(name))

    def export_prompt(self) -> str:
        return self._engine.prepare_export()

    def complete_export(self, confirmed: bool) -> Optional[ExportArtifact]:
        return self._engine.complete_export(confirmed)

    def _apply(self, operation) -> bool:
        previous_language = self._engine.state.language
        try:
            state = operation()
        except PersistenceError as exc:
            self.persistenceFailed.emit(str(exc))
            return False
        if state.language != previous_language:
            self.languageChanged.emit(state.language)
        self.stateChanged.emit(state)
        return True

    def _apply_profile(self, operation) -> bool:
        previous = self._engine.state
        try:
            result: ProfileResult = operation()
        except PersistenceError as exc:
            self.persistenceFailed.emit(str(exc))
            return False
        if not result.applied:
            return False
        if tuple(result.state.profiles) != tuple(previous.profiles):
            self.profilesChanged.emit(tuple(result.state.profiles))
        if result.state.language != previous.language:
            self.languageChanged.emit(result.state.language)
        self.stateChanged.emit(result.state)
        if result.message:
            self.messageRaised.emit(result.message)
        return True
