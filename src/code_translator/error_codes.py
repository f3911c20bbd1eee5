"""Centralized error descriptors and helpers."""
from __future__ import annotations

from dataclasses import dataclass

from .models import ErrorRecord


@dataclass(frozen=True)
class ErrorDescriptor:
    code: str
    message_key: str
    action_key: str


def build_error(descriptor: ErrorDescriptor, **context: object) -> ErrorRecord:
    """Create an ErrorRecord with safe stringified context."""

    str_context = {key: str(value) for key, value in context.items()}
    return ErrorRecord(
        code=descriptor.code,
        message_key=descriptor.message_key,
        action_key=descriptor.action_key,
        context=str_context,
    )


ERROR_INPUT_EMPTY = ErrorDescriptor(
    code="TC001",
    message_key="error.input_empty.message",
    action_key="error.input_empty.action",
)

ERROR_INPUT_MALFORMED = ErrorDescriptor(
    code="TC002",
    message_key="error.input_malformed.message",
    action_key="error.input_malformed.action",
)

ERROR_INPUT_OUT_OF_RANGE = ErrorDescriptor(
    code="TC003",
    message_key="error.input_out_of_range.message",
    action_key="error.input_out_of_range.action",
)

ERROR_INPUT_TOO_LONG = ErrorDescriptor(
    code="TC004",
    message_key="error.input_too_long.message",
    action_key="error.input_too_long.action",
)

__all__ = [
    "ERROR_INPUT_EMPTY",
    "ERROR_INPUT_MALFORMED",
    "ERROR_INPUT_OUT_OF_RANGE",
    "ERROR_INPUT_TOO_LONG",
    "ErrorDescriptor",
    "build_error",
]
