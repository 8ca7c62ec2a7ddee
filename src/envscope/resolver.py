"""Resolver — domain-scoped lookup of typed configuration values.

A lookup for raw key ``K`` tries ``<DOMAIN>_K`` for every registered
domain in registration order (optionally followed by ``K`` itself) and
returns the first candidate that is both present in the value source and
parses for the requested type.  Candidates that are missing or fail to
parse are skipped.  When nothing resolves the caller's default is used.

INVARIANT: a domain pushed with :meth:`Resolver.scoped_register` or
:meth:`Resolver.scoped` is gone from the registry once the scope exits,
on success and on error alike.

The resolver is not thread-safe.  Use one instance per thread or context,
or serialize access externally.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

import structlog

from envscope.domain.keys import candidate_keys, primary_key
from envscope.domain.models import Resolution, ResolutionOrigin
from envscope.domain.parsers import parse_bool, parse_int, parse_str
from envscope.sources import ProcessEnvironmentSource, ValueSource

if TYPE_CHECKING:
    from envscope.config.settings import EnvScopeSettings

# Emits through stdlib logging; silent until a handler is configured.
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

_T = TypeVar("_T")


class Resolver:
    """Ordered domain registry plus precedence search over a value source.

    Attributes:
        fallback_to_raw_key: When domain search is enabled, also try the
            unqualified raw key after every domain-qualified key.
    """

    def __init__(
        self,
        source: ValueSource | None = None,
        *,
        domains: Iterable[str] = (),
        fallback_to_raw_key: bool = False,
    ) -> None:
        self._source: ValueSource = source if source is not None else ProcessEnvironmentSource()
        self._domains: list[str] = list(domains)
        self.fallback_to_raw_key = fallback_to_raw_key

    @classmethod
    def from_settings(
        cls, settings: EnvScopeSettings, source: ValueSource | None = None
    ) -> Resolver:
        """Build a resolver from the ``ENVSCOPE_*`` / CLI settings."""
        return cls(
            source,
            domains=settings.domains,
            fallback_to_raw_key=settings.fallback_to_raw_key,
        )

    def __repr__(self) -> str:
        return (
            f"Resolver(source={self._source!r}, domains={self._domains!r}, "
            f"fallback_to_raw_key={self.fallback_to_raw_key})"
        )

    # --- Value source ---

    @property
    def value_source(self) -> ValueSource:
        return self._source

    def set_value_source(self, source: ValueSource) -> None:
        """Swap the active value source (mostly for tests)."""
        self._source = source

    # --- Domain registry ---

    @property
    def domains(self) -> tuple[str, ...]:
        """Registered domains, highest precedence first."""
        return tuple(self._domains)

    def register(self, domain: str) -> None:
        """Append *domain*; registering a name twice keeps both entries."""
        self._domains.append(domain)

    def unregister(self, domain: str) -> None:
        """Remove every occurrence of *domain*."""
        self._domains[:] = [d for d in self._domains if d != domain]

    def scoped_register(self, domain: str, body: Callable[[], _T]) -> _T:
        """Run *body* with *domain* registered, then remove it.

        All occurrences of *domain* are removed afterwards, including ones
        registered before the call.  The body's return value or exception
        passes through unchanged.
        """
        with self.scoped(domain):
            return body()

    @contextmanager
    def scoped(self, domain: str) -> Generator[Resolver]:
        """Context-manager form of :meth:`scoped_register`."""
        self.register(domain)
        try:
            yield self
        finally:
            self.unregister(domain)

    def reset(self) -> None:
        """Clear domains and restore the default source and fallback flag."""
        self._domains.clear()
        self._source = ProcessEnvironmentSource()
        self.fallback_to_raw_key = False

    # --- Resolution ---

    def candidate_keys(self, raw_key: str, *, search_in_domain: bool) -> tuple[str, ...]:
        return candidate_keys(
            self._domains,
            raw_key,
            search_in_domain=search_in_domain,
            fallback_to_raw_key=self.fallback_to_raw_key,
        )

    def resolve(
        self,
        raw_key: str,
        parser: Callable[[str], Any],
        default: Any = None,
        *,
        search_in_domain: bool,
    ) -> Resolution:
        """Resolve *raw_key* with *parser*, returning the full record."""
        candidates = self.candidate_keys(raw_key, search_in_domain=search_in_domain)
        for key in candidates:
            raw = self._source.lookup(key)
            if raw is None:
                continue
            value = parser(raw)
            if value is None:
                continue
            _log_event("env.resolved", key=key, raw=raw, value=value)
            return Resolution(
                key=key,
                raw=raw,
                value=value,
                origin=ResolutionOrigin.FOUND,
                candidates=candidates,
            )

        key = primary_key(candidates, raw_key)
        origin = ResolutionOrigin.UNSET if default is None else ResolutionOrigin.DEFAULT
        _log_event("env.default", key=key, default=default, annotation=origin.value)
        return Resolution(key=key, value=default, origin=origin, candidates=candidates)

    def resolve_bool(
        self, raw_key: str, default: bool | None = None, *, search_in_domain: bool
    ) -> bool | None:
        """Resolve a boolean encoded as ``"1"`` or ``"0"``."""
        return self.resolve(raw_key, parse_bool, default, search_in_domain=search_in_domain).value

    def resolve_int(
        self, raw_key: str, default: int | None = None, *, search_in_domain: bool
    ) -> int | None:
        return self.resolve(raw_key, parse_int, default, search_in_domain=search_in_domain).value

    def resolve_string(
        self, raw_key: str, default: str | None = None, *, search_in_domain: bool
    ) -> str | None:
        return self.resolve(raw_key, parse_str, default, search_in_domain=search_in_domain).value


def _log_event(event: str, **fields: Any) -> None:
    try:
        logger.debug(event, **fields)
    except Exception:
        pass  # Logging never alters a resolution
