"""Tests for multi-namespace resolution."""
from __future__ import annotations

import threading

import pytest

from code_translator import resolver as resolver_module
from code_translator.code_tables import CodeTable
from code_translator.models import NAMESPACE_ORDER, Namespace
from code_translator.platform_resolver import NullPlatformResolver
from code_translator.resolver import Resolver, get_resolver, reset_resolver


class FakePlatform:
    def __init__(self, general: dict[int, str] | None = None, kernel: dict[int, str] | None = None):
        self.general = general or {}
        self.kernel = kernel or {}
        self.calls: list[tuple[str, int]] = []

    def resolve_general(self, code: int) -> str | None:
        self.calls.append(("general", code))
        return self.general.get(code)

    def resolve_kernel_subsystem(self, code: int) -> str | None:
        self.calls.append(("kernel", code))
        return self.kernel.get(code)


@pytest.fixture
def offline_resolver() -> Resolver:
    return Resolver(platform=NullPlatformResolver())


def test_numeric_block_for_ntstatus_value(offline_resolver) -> None:
    report = offline_resolver.resolve(3221225786)

    assert report.numeric.unsigned == 3221225786
    assert report.numeric.signed == -1073741510
    assert report.numeric.hex_text == "0xC000013A"


def test_update_subsystem_hit(offline_resolver) -> None:
    report = offline_resolver.resolve(0x00240005)

    hit = report.hit_for(Namespace.UPDATE_SUBSYSTEM)
    assert hit is not None
    assert "WU_S_REBOOT_REQUIRED" in hit.text


def test_directory_protocol_duplicate_returns_single_last_entry(offline_resolver) -> None:
    report = offline_resolver.resolve(0x09)

    ldap_hits = [hit for hit in report.hits if hit.namespace is Namespace.DIRECTORY_PROTOCOL]
    assert len(ldap_hits) == 1
    assert ldap_hits[0].text == "LDAP_PARTIAL_RESULTS"


def test_kernel_panic_hit(offline_resolver) -> None:
    report = offline_resolver.resolve(0xDEADDEAD)

    hit = report.hit_for(Namespace.KERNEL_PANIC)
    assert hit is not None
    assert "MANUALLY_INITIATED_CRASH1" in hit.text


def test_zero_has_numeric_block_and_no_stop_code(offline_resolver) -> None:
    report = offline_resolver.resolve(0)

    assert report.numeric.unsigned == 0
    assert report.numeric.signed == 0
    assert report.numeric.hex_text == "0x00000000"
    assert report.hit_for(Namespace.KERNEL_PANIC) is None
    # 0 is LDAP_SUCCESS
    assert report.namespaces() == [Namespace.DIRECTORY_PROTOCOL]


def test_unknown_code_reports_only_platform_hits() -> None:
    platform = FakePlatform(general={0x7FFF0001: "general text"})
    report = Resolver(platform=platform).resolve(0x7FFF0001)

    assert report.namespaces() == [Namespace.GENERAL_SYSTEM]
    assert report.hits[0].text == "general text"


@pytest.mark.parametrize("code", [0, 1, 0x7FFFFFFF, 0x80000000, 0xFFFFFFFF, -1, -(1 << 31)])
def test_resolve_never_raises_for_32_bit_values(offline_resolver, code) -> None:
    report = offline_resolver.resolve(code)

    assert 0 <= report.numeric.unsigned <= 0xFFFFFFFF
    assert -(1 << 31) <= report.numeric.signed < (1 << 31)


def test_negative_input_matches_unsigned_lookup(offline_resolver) -> None:
    signed = 0xDEADDEAD - (1 << 32)

    assert offline_resolver.resolve(signed) == offline_resolver.resolve(0xDEADDEAD)


def test_resolve_is_idempotent(offline_resolver) -> None:
    assert offline_resolver.resolve(0x80240001) == offline_resolver.resolve(0x80240001)


def test_hits_follow_fixed_namespace_order() -> None:
    code = 0x50
    platform = FakePlatform(general={code: "general"}, kernel={code: "kernel"})
    tables = [
        CodeTable.from_entries(Namespace.UPDATE_SUBSYSTEM, [(code, "update")]),
        CodeTable.from_entries(Namespace.DIRECTORY_PROTOCOL, [(code, "ldap")]),
        CodeTable.from_entries(Namespace.KERNEL_PANIC, [(code, "panic")]),
    ]

    report = Resolver(platform=platform, tables=tables).resolve(code)

    assert report.namespaces() == list(NAMESPACE_ORDER)
    assert [hit.text for hit in report.hits] == ["general", "kernel", "update", "ldap", "panic"]


def test_platform_receives_unsigned_code() -> None:
    platform = FakePlatform()

    Resolver(platform=platform, tables=()).resolve(-1073741510)

    assert platform.calls == [("general", 0xC000013A), ("kernel", 0xC000013A)]


def test_empty_platform_text_is_not_a_hit() -> None:
    platform = FakePlatform(general={5: ""})

    report = Resolver(platform=platform, tables=()).resolve(5)

    assert report.hits == ()


def test_get_resolver_returns_single_instance_across_threads(monkeypatch) -> None:
    reset_resolver()
    monkeypatch.setattr(
        resolver_module, "default_platform_resolver", lambda enabled=True: NullPlatformResolver()
    )
    seen: list[Resolver] = []

    def worker() -> None:
        seen.append(get_resolver())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(instance) for instance in seen}) == 1
    reset_resolver()


def test_module_level_resolve_uses_default_resolver(monkeypatch) -> None:
    reset_resolver()
    monkeypatch.setattr(
        resolver_module, "default_platform_resolver", lambda enabled=True: NullPlatformResolver()
    )

    report = resolver_module.resolve(0x00240005)

    assert report.hit_for(Namespace.UPDATE_SUBSYSTEM) is not None
    reset_resolver()


def test_get_resolver_honours_platform_lookup_flag(monkeypatch) -> None:
    reset_resolver()
    native = object()

    def fake_default(enabled=True):
        return native if enabled else NullPlatformResolver()

    monkeypatch.setattr(resolver_module, "default_platform_resolver", fake_default)

    enabled = get_resolver(True)
    disabled = get_resolver(False)

    assert enabled.platform is native
    assert isinstance(disabled.platform, NullPlatformResolver)
    assert get_resolver(True) is enabled
    assert get_resolver(False) is disabled
    reset_resolver()
