"""GUI package exposing the main window entry point."""
from __future__ import annotations

from .main_window import MainWindow

__all__ = ["MainWindow"]
