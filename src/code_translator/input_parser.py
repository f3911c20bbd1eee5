"""Parsing and keystroke filtering for user-supplied code text."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .error_codes import (
    ERROR_INPUT_EMPTY,
    ERROR_INPUT_MALFORMED,
    ERROR_INPUT_OUT_OF_RANGE,
    ERROR_INPUT_TOO_LONG,
    build_error,
)
from .models import INT32_MIN, UINT32_MAX, ErrorRecord, to_unsigned

DEFAULT_MAX_LENGTH = 30
MINUS_SIGNS = ("-", "−")
ALLOWED_CHARACTERS = frozenset("0123456789xabcdefABCDEF")

_NUMBER_PATTERN = re.compile(r"(?P<sign>[-−]?)(?:0[xX](?P<hex>[0-9A-Fa-f]+)|(?P<dec>[0-9]+))")


class InvalidCodeInput(ValueError):
    """Raised when text cannot be turned into a 32-bit code."""

    def __init__(self, record: ErrorRecord) -> None:
        super().__init__(record.code)
        self.record = record


@dataclass(frozen=True)
class ParsedCode:
    raw: str
    value: int


def parse_code(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> ParsedCode:
    """Parse decimal or ``0x`` hexadecimal text, optionally negative.

    Values from -2^31 up to 2^32-1 are accepted so that both the signed and
    the unsigned spelling of a code work; the result is the unsigned value.
    """

    raw = text.strip()
    if not raw:
        raise InvalidCodeInput(build_error(ERROR_INPUT_EMPTY))
    if len(raw) > max_length:
        raise InvalidCodeInput(build_error(ERROR_INPUT_TOO_LONG, limit=max_length))
    match = _NUMBER_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidCodeInput(build_error(ERROR_INPUT_MALFORMED, value=raw))
    if match.group("hex") is not None:
        magnitude = int(match.group("hex"), 16)
    else:
        magnitude = int(match.group("dec"))
    value = -magnitude if match.group("sign") else magnitude
    if value < INT32_MIN or value > UINT32_MAX:
        raise InvalidCodeInput(build_error(ERROR_INPUT_OUT_OF_RANGE, value=raw))
    return ParsedCode(raw=raw, value=to_unsigned(value))


def is_allowed_keystroke(char: str, position: int) -> bool:
    """Return True when ``char`` may be typed at ``position``."""

    if char < " ":
        return True
    if char in MINUS_SIGNS:
        return position == 0
    return char in ALLOWED_CHARACTERS


def is_acceptable_text(text: str) -> bool:
    return all(is_allowed_keystroke(char, index) for index, char in enumerate(text))
