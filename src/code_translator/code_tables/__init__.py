"""Static code tables for the namespaces that are not resolved by the host.

Each table is built once at import time from the literal ``ENTRIES`` tuple in
its data module and is never modified afterwards.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ..models import Namespace, to_unsigned
from . import bugcheck, ldap, windows_update


class CodeTable:
    """Read-only exact-match mapping from a 32-bit code to its description."""

    __slots__ = ("_namespace", "_entries")

    def __init__(self, namespace: Namespace, entries: Mapping[int, str]) -> None:
        self._namespace = namespace
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_entries(cls, namespace: Namespace, entries: Iterable[tuple[int, str]]) -> CodeTable:
        """Build a table from ordered pairs; a repeated code keeps its last text."""

        mapping: dict[int, str] = {}
        for code, text in entries:
            mapping[to_unsigned(code)] = text
        return cls(namespace, mapping)

    @property
    def namespace(self) -> Namespace:
        return self._namespace

    def lookup(self, code: int) -> str | None:
        return self._entries.get(to_unsigned(code))

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, int):
            return False
        return to_unsigned(code) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(self._entries.items())

    def __repr__(self) -> str:
        return f"CodeTable({self._namespace.value!r}, entries={len(self)})"


WINDOWS_UPDATE_TABLE = CodeTable.from_entries(Namespace.UPDATE_SUBSYSTEM, windows_update.ENTRIES)
LDAP_TABLE = CodeTable.from_entries(Namespace.DIRECTORY_PROTOCOL, ldap.ENTRIES)
BUGCHECK_TABLE = CodeTable.from_entries(Namespace.KERNEL_PANIC, bugcheck.ENTRIES)

_TABLES: dict[Namespace, CodeTable] = {
    table.namespace: table for table in (WINDOWS_UPDATE_TABLE, LDAP_TABLE, BUGCHECK_TABLE)
}


def get_code_table(namespace: Namespace) -> CodeTable:
    """Return the table backing ``namespace``.

    Raises ``KeyError`` for namespaces that are resolved by the host platform.
    """

    return _TABLES[namespace]


def default_tables() -> tuple[CodeTable, ...]:
    """Return the static tables in report priority order."""

    return (WINDOWS_UPDATE_TABLE, LDAP_TABLE, BUGCHECK_TABLE)


__all__ = [
    "BUGCHECK_TABLE",
    "CodeTable",
    "LDAP_TABLE",
    "WINDOWS_UPDATE_TABLE",
    "default_tables",
    "get_code_table",
]
