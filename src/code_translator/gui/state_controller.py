"""App state load/save helper."""
from __future__ import annotations

from contextlib import suppress
from typing import Callable

from PySide6.QtCore import QByteArray, QTimer
from PySide6.QtWidgets import QMainWindow, QMessageBox

from ..state_store import AppState, load_state, save_state
from ..storage_warnings import StorageWarning, consume_storage_warnings
from .lookup_controls import LookupControlsPanel

Translator = Callable[[str], str]


class StateController:
    def __init__(self, translator: Translator, max_input_length: int) -> None:
        self._translator = translator
        self._max_input_length = max_input_length
        self._app_state = AppState()
        self._disable_persistence = False

    @property
    def app_state(self) -> AppState:
        return self._app_state

    def initialize(self, provided: AppState | None) -> AppState:
        if provided:
            self._app_state = provided
            return self._app_state
        state = load_state(max_input_length=self._max_input_length)
        if state:
            self._app_state = state
        return self._app_state

    def apply(self, *, window: QMainWindow, controls: LookupControlsPanel) -> None:
        state = self._app_state
        controls.set_input_text(state.last_input)
        if state.window_geometry:
            with suppress(TypeError):
                window.restoreGeometry(QByteArray(state.window_geometry))

    def remember_input(self, window: QMainWindow, raw_input: str) -> bool:
        """Persist an input that parsed successfully."""

        snapshot = AppState(
            last_input=raw_input,
            window_geometry=self._app_state.window_geometry,
        )
        return self._persist(window, snapshot)

    def remember_geometry(self, window: QMainWindow) -> bool:
        snapshot = AppState(
            last_input=self._app_state.last_input,
            window_geometry=bytes(window.saveGeometry()),
        )
        return self._persist(window, snapshot, on_close=True)

    def prompt_storage_warnings(self, window: QMainWindow) -> bool:
        return self._prompt_storage_warnings(window)

    def _persist(self, window: QMainWindow, snapshot: AppState, on_close: bool = False) -> bool:
        if self._disable_persistence:
            self._app_state = snapshot
            return True
        if save_state(snapshot):
            self._app_state = snapshot
            return True
        self._disable_persistence = True
        self._app_state = snapshot
        if on_close:
            consume_storage_warnings()
            return False
        if not self._prompt_storage_warnings(window):
            QTimer.singleShot(0, window.close)
        return False

    def _prompt_storage_warnings(self, window: QMainWindow) -> bool:
        warnings = consume_storage_warnings()
        if not warnings:
            return True
        if any(w.scope == "state" for w in warnings):
            self._disable_persistence = True
        detail_text = "\n\n".join(self._format_storage_warning(w) for w in warnings)
        dialog = QMessageBox(window)
        dialog.setIcon(QMessageBox.Warning)
        dialog.setWindowTitle(self._translator("storage_warning_title"))
        dialog.setText(self._translator("storage_warning_body"))
        dialog.setInformativeText(detail_text)
        continue_button = dialog.addButton(
            self._translator("storage_warning_continue"), QMessageBox.ButtonRole.AcceptRole
        )
        dialog.addButton(self._translator("storage_warning_exit"), QMessageBox.ButtonRole.RejectRole)
        dialog.setDefaultButton(continue_button)
        dialog.exec()
        return dialog.clickedButton() is continue_button

    def _format_storage_warning(self, warning: StorageWarning) -> str:
        return self._translator("storage_warning_line").format(
            scope=self._label("storage_scope", warning.scope),
            action=self._label("storage_action", warning.action),
            path=str(warning.path),
            detail=warning.detail,
        )

    def _label(self, prefix: str, value: str) -> str:
        key = f"{prefix}_{value}"
        label = self._translator(key)
        return label if label != key else value
