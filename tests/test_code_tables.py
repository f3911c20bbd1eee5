"""Tests for the static code tables."""
from __future__ import annotations

import pytest

from code_translator.code_tables import (
    BUGCHECK_TABLE,
    LDAP_TABLE,
    WINDOWS_UPDATE_TABLE,
    CodeTable,
    bugcheck,
    default_tables,
    get_code_table,
    ldap,
    windows_update,
)
from code_translator.models import Namespace

TABLE_SOURCES = [
    (WINDOWS_UPDATE_TABLE, windows_update.ENTRIES),
    (LDAP_TABLE, ldap.ENTRIES),
    (BUGCHECK_TABLE, bugcheck.ENTRIES),
]


@pytest.mark.parametrize(("table", "entries"), TABLE_SOURCES)
def test_every_listed_code_resolves_to_its_last_definition(table, entries) -> None:
    expected: dict[int, str] = {}
    for code, text in entries:
        expected[code] = text

    for code, text in expected.items():
        assert table.lookup(code) == text
    assert len(table) == len(expected)


def test_duplicate_ldap_code_keeps_last_label() -> None:
    labels = [text for code, text in ldap.ENTRIES if code == 0x09]

    assert labels == ["LDAP_REFERRAL_V2", "LDAP_PARTIAL_RESULTS"]
    assert LDAP_TABLE.lookup(0x09) == "LDAP_PARTIAL_RESULTS"
    assert len(LDAP_TABLE) == len(ldap.ENTRIES) - 1


def test_lookup_returns_none_for_unknown_code() -> None:
    assert WINDOWS_UPDATE_TABLE.lookup(0x12345678) is None
    assert BUGCHECK_TABLE.lookup(0) is None
    assert 0 not in BUGCHECK_TABLE


def test_signed_and_unsigned_spellings_hit_same_entry() -> None:
    signed_deaddead = 0xDEADDEAD - (1 << 32)

    assert BUGCHECK_TABLE.lookup(signed_deaddead) == "MANUALLY_INITIATED_CRASH1"
    assert signed_deaddead in BUGCHECK_TABLE


def test_windows_update_text_contains_name_and_description() -> None:
    text = WINDOWS_UPDATE_TABLE.lookup(0x00240005)

    assert text is not None
    name, description = text.split("\n", 1)
    assert name == "WU_S_REBOOT_REQUIRED"
    assert description.startswith("(") and description.endswith(")")


def test_corrupted_stop_code_labels_are_replaced() -> None:
    assert BUGCHECK_TABLE.lookup(0xDF) == "IMPERSONATING_WORKER_THREAD"
    assert BUGCHECK_TABLE.lookup(0xE0) == "ACPI_BIOS_FATAL_ERROR"


def test_from_entries_last_wins_and_normalizes_keys() -> None:
    table = CodeTable.from_entries(
        Namespace.KERNEL_PANIC,
        [(-1, "first"), (0xFFFFFFFF, "second"), (7, "seven")],
    )

    assert table.lookup(0xFFFFFFFF) == "second"
    assert table.lookup(-1) == "second"
    assert dict(table) == {0xFFFFFFFF: "second", 7: "seven"}


def test_table_contents_cannot_be_modified() -> None:
    with pytest.raises(TypeError):
        LDAP_TABLE._entries[0x09] = "changed"  # type: ignore[index]
    assert LDAP_TABLE.lookup(0x09) == "LDAP_PARTIAL_RESULTS"


def test_get_code_table_maps_namespaces() -> None:
    assert get_code_table(Namespace.UPDATE_SUBSYSTEM) is WINDOWS_UPDATE_TABLE
    assert get_code_table(Namespace.DIRECTORY_PROTOCOL) is LDAP_TABLE
    assert get_code_table(Namespace.KERNEL_PANIC) is BUGCHECK_TABLE
    with pytest.raises(KeyError):
        get_code_table(Namespace.GENERAL_SYSTEM)


def test_default_tables_follow_report_order() -> None:
    assert [table.namespace for table in default_tables()] == [
        Namespace.UPDATE_SUBSYSTEM,
        Namespace.DIRECTORY_PROTOCOL,
        Namespace.KERNEL_PANIC,
    ]
