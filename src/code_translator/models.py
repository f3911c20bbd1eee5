"""Core data models for the error code translator."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

UINT32_MASK = 0xFFFFFFFF
INT32_MIN = -(1 << 31)
UINT32_MAX = UINT32_MASK


class Namespace(Enum):
    """Independent numeric code spaces, declared in report priority order."""

    GENERAL_SYSTEM = "general-system"
    KERNEL_SUBSYSTEM = "kernel-subsystem"
    UPDATE_SUBSYSTEM = "update-subsystem"
    DIRECTORY_PROTOCOL = "directory-protocol"
    KERNEL_PANIC = "kernel-panic"

    @property
    def label(self) -> str:
        """Short label shown in front of a hit in the rendered report."""

        return _DISPLAY_LABELS[self]


_DISPLAY_LABELS: dict[Namespace, str] = {
    Namespace.GENERAL_SYSTEM: "Win32/HRESULT",
    Namespace.KERNEL_SUBSYSTEM: "NTSTATUS",
    Namespace.UPDATE_SUBSYSTEM: "WU",
    Namespace.DIRECTORY_PROTOCOL: "LDAP",
    Namespace.KERNEL_PANIC: "StopCode/BugCheck",
}

NAMESPACE_ORDER: tuple[Namespace, ...] = tuple(Namespace)


def to_unsigned(code: int) -> int:
    """Return ``code`` reinterpreted as an unsigned 32-bit value."""

    return code & UINT32_MASK


def to_signed(code: int) -> int:
    """Return ``code`` reinterpreted as a signed 32-bit value."""

    unsigned = to_unsigned(code)
    if unsigned & 0x80000000:
        return unsigned - (1 << 32)
    return unsigned


@dataclass(frozen=True)
class NumericRepresentation:
    """The three ways a queried code is always displayed."""

    unsigned: int
    signed: int
    hex_text: str

    @classmethod
    def from_code(cls, code: int) -> NumericRepresentation:
        unsigned = to_unsigned(code)
        return cls(
            unsigned=unsigned,
            signed=to_signed(unsigned),
            hex_text=f"0x{unsigned:08X}",
        )


@dataclass(frozen=True)
class NamespaceHit:
    """Description found for the queried code in one namespace."""

    namespace: Namespace
    text: str

    @property
    def source_label(self) -> str:
        return self.namespace.label


@dataclass(frozen=True)
class Report:
    """Result of resolving one code across every namespace."""

    code: int
    numeric: NumericRepresentation
    hits: tuple[NamespaceHit, ...] = ()

    def hit_for(self, namespace: Namespace) -> NamespaceHit | None:
        for hit in self.hits:
            if hit.namespace is namespace:
                return hit
        return None

    def namespaces(self) -> list[Namespace]:
        return [hit.namespace for hit in self.hits]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON friendly representation."""

        return {
            "code": self.code,
            "unsigned": self.numeric.unsigned,
            "signed": self.numeric.signed,
            "hex": self.numeric.hex_text,
            "hits": [
                {
                    "namespace": hit.namespace.value,
                    "label": hit.source_label,
                    "text": hit.text,
                }
                for hit in self.hits
            ],
        }


@dataclass
class ErrorRecord:
    """Structured error payload with translation keys and remediation hints."""

    code: str
    message_key: str
    action_key: str
    context: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "message_key": self.message_key,
            "action_key": self.action_key,
            "context": dict(self.context),
        }
