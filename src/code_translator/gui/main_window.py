"""PySide6 window for the error code translator."""
from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from ..config import AppSettings, get_settings
from ..i18n import detect_language, format_error_record, translate
from ..input_parser import InvalidCodeInput, parse_code
from ..platform_resolver import NullPlatformResolver, is_running_under_wine
from ..report_formatter import render_report
from ..resolver import Resolver, get_resolver
from ..state_store import AppState
from .lookup_controls import LookupControlsPanel
from .report_panel import ReportPanel
from .state_controller import StateController

LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Primary top-level window."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        state: AppState | None = None,
        app_icon: QIcon | None = None,
        resolver: Resolver | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or get_settings()
        self._language = detect_language()
        self._resolver = resolver or get_resolver(self._settings.lookup.platform_lookup)
        self.setWindowTitle(self._t("window_title"))
        if app_icon is not None and not app_icon.isNull():
            self.setWindowIcon(app_icon)
        self.resize(560, 420)
        under_wine = is_running_under_wine()
        self._controls = LookupControlsPanel(
            self._t,
            max_length=self._settings.lookup.input_max_length,
            simple_glyphs=under_wine,
            # Wine loses edit focus when a tooltip is attached.
            input_tooltip=not under_wine,
            parent=self,
        )
        self._controls.search_requested.connect(self._on_search_requested)
        self._report_panel = ReportPanel(
            self._t,
            foreground=self._settings.ui.output_foreground,
            background=self._settings.ui.output_background,
            project_url=self._settings.ui.project_url,
            parent=self,
        )
        self._state_controller = StateController(
            self._t, self._settings.lookup.input_max_length
        )
        self._state_controller.initialize(state)
        self._build_ui()
        self._state_controller.apply(window=self, controls=self._controls)
        self._controls.focus_input()
        if not self._state_controller.prompt_storage_warnings(self):
            QTimer.singleShot(0, self.close)

    def _t(self, key: str) -> str:
        return translate(key, self._language)

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._controls)
        layout.addWidget(self._report_panel, 1)
        self.setCentralWidget(central)
        self.statusBar().showMessage(self._ready_message())

    def _ready_message(self) -> str:
        if isinstance(self._resolver.platform, NullPlatformResolver):
            return self._t("platform_lookup_unavailable")
        return self._t("ready")

    def _on_search_requested(self) -> None:
        raw = self._controls.input_text()
        try:
            parsed = parse_code(raw, self._settings.lookup.input_max_length)
        except InvalidCodeInput as exc:
            LOGGER.debug("Rejected input %r: %s", raw, exc.record.code)
            self._report_panel.clear()
            self.statusBar().showMessage(format_error_record(exc.record, self._language))
            return
        self._state_controller.remember_input(self, parsed.raw)
        report = self._resolver.resolve(parsed.value)
        self._report_panel.set_report_text(render_report(report))
        self.statusBar().showMessage(
            self._t("lookup_done").format(count=len(report.hits), hex=report.numeric.hex_text)
        )

    def closeEvent(self, event):  # type: ignore[override]
        self._state_controller.remember_geometry(self)
        super().closeEvent(event)
