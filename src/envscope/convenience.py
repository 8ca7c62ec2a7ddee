"""Module-level lookup helpers bound to a context-local resolver.

Call sites that don't want to thread a :class:`Resolver` through every
function use these helpers.  The active resolver lives in a ContextVar, so
each thread or asyncio task can bind its own with :func:`use_resolver`.
Without a binding a process-environment resolver is created on first use
for the current context.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

from envscope.resolver import Resolver

_active_resolver: ContextVar[Resolver | None] = ContextVar("_active_resolver", default=None)


def get_resolver() -> Resolver:
    """Return the resolver bound to the current context."""
    resolver = _active_resolver.get()
    if resolver is None:
        resolver = Resolver()
        _active_resolver.set(resolver)
    return resolver


@contextmanager
def use_resolver(resolver: Resolver) -> Generator[Resolver]:
    """Bind *resolver* for the enclosed block."""
    token = _active_resolver.set(resolver)
    try:
        yield resolver
    finally:
        _active_resolver.reset(token)


def env_bool(
    key: str,
    default: bool = False,
    search_in_domain: bool = True,
    *,
    resolver: Resolver | None = None,
) -> bool:
    r = resolver or get_resolver()
    value = r.resolve_bool(key, default, search_in_domain=search_in_domain)
    assert value is not None
    return value


def env_int(
    key: str,
    default: int = 0,
    search_in_domain: bool = True,
    *,
    resolver: Resolver | None = None,
) -> int:
    r = resolver or get_resolver()
    value = r.resolve_int(key, default, search_in_domain=search_in_domain)
    assert value is not None
    return value


def env_str(
    key: str,
    default: str,
    search_in_domain: bool = True,
    *,
    resolver: Resolver | None = None,
) -> str:
    r = resolver or get_resolver()
    value = r.resolve_string(key, default, search_in_domain=search_in_domain)
    assert value is not None
    return value


def env_optional_str(
    key: str,
    search_in_domain: bool = True,
    *,
    resolver: Resolver | None = None,
) -> str | None:
    """Like :func:`env_str` but returns None when nothing resolves."""
    r = resolver or get_resolver()
    return r.resolve_string(key, search_in_domain=search_in_domain)
