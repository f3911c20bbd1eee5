"""Keystroke validation for the error code input field."""
from __future__ import annotations

from PySide6.QtGui import QValidator

from ..input_parser import is_acceptable_text


class CodeInputValidator(QValidator):
    """Rejects characters that can never be part of a decimal or 0x code."""

    def validate(self, text: str, pos: int):  # type: ignore[override]
        if is_acceptable_text(text):
            return QValidator.State.Acceptable, text, pos
        return QValidator.State.Invalid, text, pos
