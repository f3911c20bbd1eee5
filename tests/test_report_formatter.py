"""Tests for report rendering."""
from __future__ import annotations

from code_translator.models import Namespace, NamespaceHit, NumericRepresentation, Report
from code_translator.report_formatter import build_numeric_text, render_report


def test_numeric_block_layout() -> None:
    numeric = NumericRepresentation.from_code(0xC000013A)

    assert build_numeric_text(numeric) == (
        "DWORD \t3221225786\n"
        "int \t-1073741510\n"
        "Hex \t0xC000013A"
    )


def test_render_without_hits_is_numeric_block_only() -> None:
    report = Report(code=7, numeric=NumericRepresentation.from_code(7))

    assert render_report(report) == "DWORD \t7\nint \t7\nHex \t0x00000007"


def test_render_separates_hits_with_blank_lines() -> None:
    report = Report(
        code=0x09,
        numeric=NumericRepresentation.from_code(0x09),
        hits=(
            NamespaceHit(Namespace.GENERAL_SYSTEM, "The storage control block address is invalid."),
            NamespaceHit(Namespace.DIRECTORY_PROTOCOL, "LDAP_PARTIAL_RESULTS"),
        ),
    )

    blocks = render_report(report).split("\n\n")

    assert blocks[1] == "Win32/HRESULT: The storage control block address is invalid."
    assert blocks[2] == "LDAP: LDAP_PARTIAL_RESULTS"
    assert len(blocks) == 3
