"""Shared helpers for tracking storage-layer warnings."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StorageWarning:
    """A recoverable config or state write failure the window should report."""

    scope: str
    action: str
    path: Path
    detail: str


_WARNINGS: list[StorageWarning] = []


def record_storage_warning(scope: str, action: str, path: Path, detail: str) -> None:
    _WARNINGS.append(StorageWarning(scope=scope, action=action, path=path, detail=detail))


def consume_storage_warnings() -> list[StorageWarning]:
    """Return and clear any pending storage warnings."""

    pending = list(_WARNINGS)
    _WARNINGS.clear()
    return pending
