"""Application entry point."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from PySide6.QtWidgets import QApplication
from PySide6.QtWidgets import QMessageBox

# PyInstaller executes main.py as a top-level script. When that happens
# ``__package__`` is empty and the src root is not on ``sys.path``.
if __package__ in (None, ""):
    package_dir = Path(__file__).resolve().parent
    sys.path.insert(0, str(package_dir.parent))

from code_translator.config import (  # noqa: E402
    AppSettings,
    ConfigurationError,
    get_settings,
    write_default_config,
)
from code_translator.gui import MainWindow  # noqa: E402
from code_translator.i18n import format_error_record, translate  # noqa: E402
from code_translator.input_parser import InvalidCodeInput, parse_code  # noqa: E402
from code_translator.report_formatter import render_report  # noqa: E402
from code_translator.resolver import get_resolver  # noqa: E402

EXIT_INVALID_INPUT = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate Win32/HRESULT, NTSTATUS, Windows Update, LDAP and stop codes"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging output",
    )
    parser.add_argument(
        "--lookup",
        metavar="CODE",
        help=(
            "Print the translation of CODE (decimal or 0x hex) instead of opening the window; "
            "write negative hex values as --lookup=-0x1"
        ),
    )
    parser.add_argument(
        "--write-config",
        metavar="PATH",
        type=Path,
        help="Write the default configuration YAML to PATH and exit",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --lookup, print the report as JSON",
    )
    return parser


def run_lookup(
    text: str,
    settings: AppSettings,
    *,
    as_json: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Resolve ``text`` without a GUI and write the report to ``out``."""

    out = out or sys.stdout
    err = err or sys.stderr
    try:
        parsed = parse_code(text, settings.lookup.input_max_length)
    except InvalidCodeInput as exc:
        print(format_error_record(exc.record), file=err)
        return EXIT_INVALID_INPUT
    report = get_resolver(settings.lookup.platform_lookup).resolve(parsed.value)
    if as_json:
        print(json.dumps(report.to_dict(), indent=2), file=out)
    else:
        print(render_report(report), file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.write_config is not None:
        target = write_default_config(args.write_config)
        print(f"Wrote default configuration to {target}")
        return 0

    if args.lookup is not None:
        try:
            settings = get_settings()
        except ConfigurationError as exc:
            logging.exception("Failed to load configuration")
            print(translate("config_error_body").format(detail=exc), file=sys.stderr)
            return 1
        return run_lookup(args.lookup, settings, as_json=args.json)

    app = QApplication(sys.argv)
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        logging.exception("Failed to load configuration")
        QMessageBox.critical(
            None,
            translate("config_error_title"),
            translate("config_error_body").format(detail=exc),
        )
        return 1
    from code_translator.gui.app_icon import load_app_icon

    app_icon = load_app_icon()
    if not app_icon.isNull():
        app.setWindowIcon(app_icon)
    window = MainWindow(settings, app_icon=app_icon)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
