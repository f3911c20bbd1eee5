"""Host-provided message lookup for system and kernel status codes."""
from __future__ import annotations

import logging
import sys
from typing import Protocol

from .models import to_unsigned

LOGGER = logging.getLogger(__name__)

FORMAT_MESSAGE_IGNORE_INSERTS = 0x00000200
FORMAT_MESSAGE_FROM_HMODULE = 0x00000800
FORMAT_MESSAGE_FROM_SYSTEM = 0x00001000
# MAKELANGID(LANG_NEUTRAL, SUBLANG_DEFAULT)
LANG_NEUTRAL_DEFAULT = 0x0400
MESSAGE_BUFFER_CHARS = 64 * 1024
KERNEL_MESSAGE_MODULE = "ntdll.dll"


class PlatformResolver(Protocol):
    """Resolves codes against the host's own message tables."""

    def resolve_general(self, code: int) -> str | None:
        ...

    def resolve_kernel_subsystem(self, code: int) -> str | None:
        ...


class NullPlatformResolver:
    """Resolver for hosts without native message tables; never matches."""

    def resolve_general(self, code: int) -> str | None:
        return None

    def resolve_kernel_subsystem(self, code: int) -> str | None:
        return None


class WindowsPlatformResolver:
    """Looks codes up with ``FormatMessageW``."""

    def __init__(self) -> None:
        import ctypes
        from ctypes import wintypes

        self._ctypes = ctypes
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        format_message = kernel32.FormatMessageW
        format_message.argtypes = [
            wintypes.DWORD,
            wintypes.LPCVOID,
            wintypes.DWORD,
            wintypes.DWORD,
            wintypes.LPWSTR,
            wintypes.DWORD,
            wintypes.LPVOID,
        ]
        format_message.restype = wintypes.DWORD
        get_module_handle = kernel32.GetModuleHandleW
        get_module_handle.argtypes = [wintypes.LPCWSTR]
        get_module_handle.restype = wintypes.HMODULE
        self._format_message = format_message
        self._get_module_handle = get_module_handle

    def resolve_general(self, code: int) -> str | None:
        return self._format(FORMAT_MESSAGE_FROM_SYSTEM, None, code)

    def resolve_kernel_subsystem(self, code: int) -> str | None:
        module = self._get_module_handle(KERNEL_MESSAGE_MODULE)
        if not module:
            LOGGER.debug("%s is not loaded; skipping kernel message lookup", KERNEL_MESSAGE_MODULE)
            return None
        return self._format(FORMAT_MESSAGE_FROM_HMODULE, module, code)

    def _format(self, source_flag: int, module: object, code: int) -> str | None:
        buffer = self._ctypes.create_unicode_buffer(MESSAGE_BUFFER_CHARS)
        try:
            length = self._format_message(
                source_flag | FORMAT_MESSAGE_IGNORE_INSERTS,
                module,
                to_unsigned(code),
                LANG_NEUTRAL_DEFAULT,
                buffer,
                MESSAGE_BUFFER_CHARS,
                None,
            )
        except OSError as exc:
            LOGGER.debug("FormatMessageW failed for 0x%08X: %s", to_unsigned(code), exc)
            return None
        if not length:
            return None
        return trim_message(buffer.value[:length])


def trim_message(text: str) -> str | None:
    """Strip the trailing line breaks the host appends to its messages."""

    trimmed = text.rstrip("\r\n")
    return trimmed or None


def default_platform_resolver(enabled: bool = True) -> PlatformResolver:
    """Return the resolver matching the running host."""

    if not enabled or sys.platform != "win32":
        return NullPlatformResolver()
    try:
        return WindowsPlatformResolver()
    except (OSError, AttributeError) as exc:
        LOGGER.warning("Native message lookup unavailable: %s", exc)
        return NullPlatformResolver()


def is_running_under_wine() -> bool:
    """Return True when the Windows host is actually Wine."""

    if sys.platform != "win32":
        return False
    try:
        import ctypes

        ntdll = ctypes.WinDLL("ntdll")
    except (OSError, AttributeError):
        return False
    return hasattr(ntdll, "wine_get_version")
