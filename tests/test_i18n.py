"""Tests for translation helpers."""
from __future__ import annotations

from code_translator.error_codes import ERROR_INPUT_OUT_OF_RANGE, build_error
from code_translator.i18n import format_error_record, translate


def test_translate_falls_back_to_english() -> None:
    assert translate("storage_warning_line", "de") == translate("storage_warning_line", "en")
    assert translate("window_title", "fr") == "Translate Error Code"


def test_translate_returns_key_when_unknown() -> None:
    assert translate("no.such.key", "en") == "no.such.key"


def test_format_error_record_fills_context() -> None:
    record = build_error(ERROR_INPUT_OUT_OF_RANGE, value="4294967296")

    text = format_error_record(record, "en")

    assert text.startswith("[TC003] '4294967296' does not fit into 32 bits.")
    assert "(Action: " in text


def test_format_error_record_tolerates_missing_context() -> None:
    record = build_error(ERROR_INPUT_OUT_OF_RANGE)

    assert "{value}" in format_error_record(record, "en")
