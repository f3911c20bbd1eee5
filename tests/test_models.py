"""Model helper tests."""
from __future__ import annotations

import pytest

from code_translator.models import (
    NAMESPACE_ORDER,
    Namespace,
    NamespaceHit,
    NumericRepresentation,
    Report,
    to_signed,
    to_unsigned,
)


@pytest.mark.parametrize(
    ("code", "unsigned", "signed", "hex_text"),
    [
        (0, 0, 0, "0x00000000"),
        (3221225786, 3221225786, -1073741510, "0xC000013A"),
        (-1073741510, 3221225786, -1073741510, "0xC000013A"),
        (0xFFFFFFFF, 4294967295, -1, "0xFFFFFFFF"),
        (0x7FFFFFFF, 2147483647, 2147483647, "0x7FFFFFFF"),
        (0x80000000, 2147483648, -2147483648, "0x80000000"),
    ],
)
def test_numeric_representation(code, unsigned, signed, hex_text) -> None:
    numeric = NumericRepresentation.from_code(code)

    assert numeric == NumericRepresentation(unsigned=unsigned, signed=signed, hex_text=hex_text)


def test_signed_unsigned_helpers_round_trip_boundaries() -> None:
    assert to_unsigned(-1) == 0xFFFFFFFF
    assert to_signed(0xFFFFFFFF) == -1
    assert to_signed(-5) == -5


def test_namespace_order_and_labels() -> None:
    assert [namespace.value for namespace in NAMESPACE_ORDER] == [
        "general-system",
        "kernel-subsystem",
        "update-subsystem",
        "directory-protocol",
        "kernel-panic",
    ]
    assert Namespace.KERNEL_PANIC.label == "StopCode/BugCheck"
    assert NamespaceHit(Namespace.UPDATE_SUBSYSTEM, "x").source_label == "WU"


def test_report_to_dict() -> None:
    report = Report(
        code=0xDEADDEAD,
        numeric=NumericRepresentation.from_code(0xDEADDEAD),
        hits=(NamespaceHit(Namespace.KERNEL_PANIC, "MANUALLY_INITIATED_CRASH1"),),
    )

    assert report.to_dict() == {
        "code": 0xDEADDEAD,
        "unsigned": 0xDEADDEAD,
        "signed": 0xDEADDEAD - (1 << 32),
        "hex": "0xDEADDEAD",
        "hits": [
            {
                "namespace": "kernel-panic",
                "label": "StopCode/BugCheck",
                "text": "MANUALLY_INITIATED_CRASH1",
            }
        ],
    }
    assert report.hit_for(Namespace.DIRECTORY_PROTOCOL) is None
