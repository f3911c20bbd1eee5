"""Application icon lookup."""
from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication, QStyle

ICON_DIRECTORY = Path("assets") / "icons"
ICON_FILENAMES = {
    "win32": ("code-translator.ico", "code-translator.png"),
    "darwin": ("code-translator.icns", "code-translator.png"),
}
DEFAULT_ICON_FILENAMES = ("code-translator.png",)


def _icon_roots() -> list[Path]:
    roots: list[Path] = []
    bundle_root = getattr(sys, "_MEIPASS", None)
    if bundle_root:
        roots.append(Path(bundle_root))
    package_root = Path(__file__).resolve().parent.parent
    roots.extend([package_root, package_root.parent.parent])
    return roots


@lru_cache(maxsize=1)
def load_app_icon() -> QIcon:
    """Return the bundled icon, or the style's magnifier-like icon as fallback."""

    filenames = ICON_FILENAMES.get(sys.platform, DEFAULT_ICON_FILENAMES)
    for root in _icon_roots():
        for filename in filenames:
            path = root / ICON_DIRECTORY / filename
            if not path.exists():
                continue
            icon = QIcon(str(path))
            if not icon.isNull():
                return icon
    app = QApplication.instance()
    if app is None:
        return QIcon()
    return app.style().standardIcon(QStyle.StandardPixmap.SP_FileDialogContentsView)
