"""Read-only output area for rendered reports."""
from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

Translator = Callable[[str], str]


class ReportPanel(QWidget):
    def __init__(
        self,
        translator: Translator,
        *,
        foreground: str,
        background: str,
        project_url: str,
        parent=None,
    ):
        super().__init__(parent)
        self._t = translator
        self._output_label = QLabel("")
        self._output_label.setObjectName("reportOutput")
        self._output_label.setWordWrap(True)
        self._output_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self._output_label.setTextFormat(Qt.TextFormat.PlainText)
        self._output_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self._output_label.setMargin(8)
        self._output_label.setStyleSheet(
            f"QLabel#reportOutput {{ color: {foreground}; background-color: {background}; }}"
        )
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(self._output_label)
        scroll.setStyleSheet(f"QScrollArea {{ background-color: {background}; }}")

        self._link_label = QLabel(f'<a href="{project_url}">{self._t("project_link")}</a>')
        self._link_label.setTextFormat(Qt.TextFormat.RichText)
        self._link_label.setOpenExternalLinks(True)
        self._link_label.setAlignment(Qt.AlignmentFlag.AlignRight)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(scroll, 1)
        layout.addWidget(self._link_label)

    def set_report_text(self, text: str) -> None:
        self._output_label.setText(text)

    def clear(self) -> None:
        self._output_label.clear()

    def report_text(self) -> str:
        return self._output_label.text()
