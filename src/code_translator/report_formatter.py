"""Shared helpers for turning a Report into display text."""
from __future__ import annotations

from .models import NamespaceHit, NumericRepresentation, Report

BLOCK_SEPARATOR = "\n\n"


def build_numeric_text(numeric: NumericRepresentation) -> str:
    lines = [
        f"DWORD \t{numeric.unsigned}",
        f"int \t{numeric.signed}",
        f"Hex \t{numeric.hex_text}",
    ]
    return "\n".join(lines)


def build_hit_text(hit: NamespaceHit) -> str:
    return f"{hit.source_label}: {hit.text}"


def render_report(report: Report) -> str:
    """Join the numeric block and every hit with blank lines between them."""

    blocks = [build_numeric_text(report.numeric)]
    blocks.extend(build_hit_text(hit) for hit in report.hits)
    return BLOCK_SEPARATOR.join(blocks)
