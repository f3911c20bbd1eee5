"""Tests for code text parsing and keystroke filtering."""
from __future__ import annotations

import pytest

from code_translator.error_codes import (
    ERROR_INPUT_EMPTY,
    ERROR_INPUT_MALFORMED,
    ERROR_INPUT_OUT_OF_RANGE,
    ERROR_INPUT_TOO_LONG,
)
from code_translator.input_parser import (
    InvalidCodeInput,
    is_acceptable_text,
    is_allowed_keystroke,
    parse_code,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("5", 5),
        ("3221225786", 0xC000013A),
        ("-1073741510", 0xC000013A),
        ("0xC000013A", 0xC000013A),
        ("0xc000013a", 0xC000013A),
        ("0X9", 9),
        ("  0x00240005 ", 0x00240005),
        ("−1", 0xFFFFFFFF),
        ("-0x1", 0xFFFFFFFF),
        ("4294967295", 0xFFFFFFFF),
        ("-2147483648", 0x80000000),
    ],
)
def test_parse_code_accepts_decimal_and_hex(text, expected) -> None:
    assert parse_code(text).value == expected


def test_parse_code_keeps_trimmed_raw_text() -> None:
    assert parse_code("  0xDEADDEAD\n").raw == "0xDEADDEAD"


@pytest.mark.parametrize(
    ("text", "descriptor"),
    [
        ("", ERROR_INPUT_EMPTY),
        ("   ", ERROR_INPUT_EMPTY),
        ("0x", ERROR_INPUT_MALFORMED),
        ("12abc", ERROR_INPUT_MALFORMED),
        ("1-2", ERROR_INPUT_MALFORMED),
        ("--1", ERROR_INPUT_MALFORMED),
        ("DEAD", ERROR_INPUT_MALFORMED),
        ("4294967296", ERROR_INPUT_OUT_OF_RANGE),
        ("0x100000000", ERROR_INPUT_OUT_OF_RANGE),
        ("-2147483649", ERROR_INPUT_OUT_OF_RANGE),
        ("1" * 31, ERROR_INPUT_TOO_LONG),
    ],
)
def test_parse_code_rejects_invalid_text(text, descriptor) -> None:
    with pytest.raises(InvalidCodeInput) as excinfo:
        parse_code(text)

    assert excinfo.value.record.code == descriptor.code
    assert excinfo.value.record.message_key == descriptor.message_key


def test_parse_code_honours_custom_max_length() -> None:
    with pytest.raises(InvalidCodeInput) as excinfo:
        parse_code("0x00240005", max_length=4)

    assert excinfo.value.record.context == {"limit": "4"}


def test_invalid_code_input_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_code("not a number")


def test_minus_only_allowed_at_start() -> None:
    assert is_allowed_keystroke("-", 0) is True
    assert is_allowed_keystroke("−", 0) is True
    assert is_allowed_keystroke("-", 3) is False


def test_control_characters_pass_through() -> None:
    assert is_allowed_keystroke("\b", 4) is True
    assert is_allowed_keystroke("\r", 0) is True


@pytest.mark.parametrize("char", ["0", "9", "x", "a", "F"])
def test_hex_characters_allowed(char) -> None:
    assert is_allowed_keystroke(char, 2) is True


@pytest.mark.parametrize("char", ["g", "X", " ", "+", ".", "ä"])
def test_other_characters_rejected(char) -> None:
    assert is_allowed_keystroke(char, 1) is False


def test_is_acceptable_text() -> None:
    assert is_acceptable_text("-0xdeadbeef") is True
    assert is_acceptable_text("") is True
    assert is_acceptable_text("12-3") is False
    assert is_acceptable_text("0x12 ") is False
