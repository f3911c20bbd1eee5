"""Resolve one code across every namespace into a single report."""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from .code_tables import CodeTable, default_tables
from .models import Namespace, NamespaceHit, NumericRepresentation, Report
from .platform_resolver import PlatformResolver, default_platform_resolver

LOGGER = logging.getLogger(__name__)


class Resolver:
    """Queries the host resolver and the static tables in priority order."""

    def __init__(
        self,
        platform: PlatformResolver | None = None,
        tables: Iterable[CodeTable] | None = None,
    ) -> None:
        self._platform = platform if platform is not None else default_platform_resolver()
        self._tables = tuple(tables) if tables is not None else default_tables()

    @property
    def platform(self) -> PlatformResolver:
        return self._platform

    @property
    def tables(self) -> tuple[CodeTable, ...]:
        return self._tables

    def resolve(self, code: int) -> Report:
        numeric = NumericRepresentation.from_code(code)
        hits: list[NamespaceHit] = []
        self._append(hits, Namespace.GENERAL_SYSTEM, self._platform.resolve_general(numeric.unsigned))
        self._append(
            hits,
            Namespace.KERNEL_SUBSYSTEM,
            self._platform.resolve_kernel_subsystem(numeric.unsigned),
        )
        for table in self._tables:
            self._append(hits, table.namespace, table.lookup(numeric.unsigned))
        return Report(code=numeric.unsigned, numeric=numeric, hits=tuple(hits))

    def _append(self, hits: list[NamespaceHit], namespace: Namespace, text: str | None) -> None:
        if not text:
            return
        LOGGER.debug("Match in %s: %s", namespace.value, text.splitlines()[0])
        hits.append(NamespaceHit(namespace=namespace, text=text))


_RESOLVERS: dict[bool, Resolver] = {}
_RESOLVER_LOCK = threading.Lock()


def get_resolver(platform_lookup: bool = True) -> Resolver:
    """Return the process-wide resolver for ``platform_lookup``, creating it on first use."""

    key = bool(platform_lookup)
    resolver = _RESOLVERS.get(key)
    if resolver is None:
        with _RESOLVER_LOCK:
            resolver = _RESOLVERS.get(key)
            if resolver is None:
                resolver = Resolver(platform=default_platform_resolver(key))
                _RESOLVERS[key] = resolver
    return resolver


def reset_resolver() -> None:
    """Drop the cached resolvers (useful for tests)."""

    with _RESOLVER_LOCK:
        _RESOLVERS.clear()


def resolve(code: int) -> Report:
    return get_resolver().resolve(code)
