"""Code input and search button panel."""
from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QLineEdit, QPushButton

from .code_validator import CodeInputValidator

Translator = Callable[[str], str]

SEARCH_GLYPH = "\U0001F50D"
# Wine fonts lack the magnifier glyph.
FALLBACK_SEARCH_GLYPH = "►"


class LookupControlsPanel(QGroupBox):
    """Single-line code input with a search button."""

    search_requested = Signal()

    def __init__(
        self,
        translator: Translator,
        *,
        max_length: int,
        simple_glyphs: bool = False,
        input_tooltip: bool = True,
        parent=None,
    ):
        super().__init__(translator("lookup_group"), parent)
        self._t = translator
        self._build_ui(max_length, simple_glyphs, input_tooltip)

    def _build_ui(self, max_length: int, simple_glyphs: bool, input_tooltip: bool) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 8)
        layout.setSpacing(8)

        self._input = QLineEdit()
        self._input.setMaxLength(max_length)
        self._input.setPlaceholderText(self._t("input_placeholder"))
        self._input.setValidator(CodeInputValidator(self._input))
        self._input.setClearButtonEnabled(True)
        if input_tooltip:
            self._input.setToolTip(self._t("input_tooltip"))
        self._input.returnPressed.connect(self.search_requested)
        layout.addWidget(self._input, 1)

        glyph = FALLBACK_SEARCH_GLYPH if simple_glyphs else SEARCH_GLYPH
        self._search_button = QPushButton(glyph)
        self._search_button.setToolTip(self._t("search_tooltip"))
        self._search_button.clicked.connect(self.search_requested)
        layout.addWidget(self._search_button)

    def input_text(self) -> str:
        return self._input.text()

    def set_input_text(self, text: str) -> None:
        self._input.setText(text)

    def focus_input(self) -> None:
        self._input.setFocus()
        self._input.selectAll()
