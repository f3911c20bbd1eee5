"""Tests for host message lookup selection and trimming."""
from __future__ import annotations

from types import SimpleNamespace

import code_translator.platform_resolver as platform_module
from code_translator.platform_resolver import (
    NullPlatformResolver,
    default_platform_resolver,
    is_running_under_wine,
    trim_message,
)


def test_null_resolver_never_matches() -> None:
    resolver = NullPlatformResolver()

    assert resolver.resolve_general(5) is None
    assert resolver.resolve_kernel_subsystem(0xC0000005) is None


def test_trim_message_strips_trailing_line_breaks_only() -> None:
    assert trim_message("Access is denied.\r\n") == "Access is denied."
    assert trim_message("\nline one\r\nline two\n") == "\nline one\r\nline two"


def test_trim_message_returns_none_for_blank_text() -> None:
    assert trim_message("\r\n") is None


def test_default_resolver_is_null_off_windows(monkeypatch) -> None:
    monkeypatch.setattr(platform_module, "sys", SimpleNamespace(platform="linux"))

    assert isinstance(default_platform_resolver(), NullPlatformResolver)


def test_default_resolver_is_null_when_disabled(monkeypatch) -> None:
    monkeypatch.setattr(platform_module, "sys", SimpleNamespace(platform="win32"))

    assert isinstance(default_platform_resolver(enabled=False), NullPlatformResolver)


def test_default_resolver_degrades_when_native_api_missing(monkeypatch) -> None:
    class BrokenResolver:
        def __init__(self):
            raise OSError("kernel32 not found")

    monkeypatch.setattr(platform_module, "sys", SimpleNamespace(platform="win32"))
    monkeypatch.setattr(platform_module, "WindowsPlatformResolver", BrokenResolver)

    assert isinstance(default_platform_resolver(), NullPlatformResolver)


def test_default_resolver_uses_native_implementation_on_windows(monkeypatch) -> None:
    class FakeWindowsResolver:
        pass

    monkeypatch.setattr(platform_module, "sys", SimpleNamespace(platform="win32"))
    monkeypatch.setattr(platform_module, "WindowsPlatformResolver", FakeWindowsResolver)

    assert isinstance(default_platform_resolver(), FakeWindowsResolver)


def test_wine_detection_is_false_off_windows(monkeypatch) -> None:
    monkeypatch.setattr(platform_module, "sys", SimpleNamespace(platform="darwin"))

    assert is_running_under_wine() is False


def test_windows_resolver_skips_kernel_lookup_without_module() -> None:
    resolver = platform_module.WindowsPlatformResolver.__new__(platform_module.WindowsPlatformResolver)
    resolver._get_module_handle = lambda name: None

    assert resolver.resolve_kernel_subsystem(0xC0000005) is None


def test_windows_resolver_trims_formatted_text() -> None:
    captured: dict[str, object] = {}

    class FakeBuffer:
        value = "The system cannot find the file specified.\r\n"

    def fake_format(flags, module, code, lang, buffer, size, args):
        captured.update(flags=flags, module=module, code=code, lang=lang)
        return len(FakeBuffer.value)

    resolver = platform_module.WindowsPlatformResolver.__new__(platform_module.WindowsPlatformResolver)
    resolver._ctypes = SimpleNamespace(create_unicode_buffer=lambda size: FakeBuffer())
    resolver._format_message = fake_format

    assert resolver.resolve_general(-2) == "The system cannot find the file specified."
    assert captured["code"] == 0xFFFFFFFE
    assert captured["module"] is None
    assert captured["flags"] == (
        platform_module.FORMAT_MESSAGE_FROM_SYSTEM | platform_module.FORMAT_MESSAGE_IGNORE_INSERTS
    )
    assert captured["lang"] == platform_module.LANG_NEUTRAL_DEFAULT


def test_windows_resolver_returns_none_when_not_found() -> None:
    resolver = platform_module.WindowsPlatformResolver.__new__(platform_module.WindowsPlatformResolver)
    resolver._ctypes = SimpleNamespace(create_unicode_buffer=lambda size: SimpleNamespace(value=""))
    resolver._format_message = lambda *args: 0
    resolver._get_module_handle = lambda name: 1234

    assert resolver.resolve_general(0x12345678) is None
    assert resolver.resolve_kernel_subsystem(0x12345678) is None
