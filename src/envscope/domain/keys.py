"""Candidate key construction — the precedence order of a lookup."""

from __future__ import annotations

from collections.abc import Iterable


def qualified_key(domain: str, raw_key: str) -> str:
    """Prefix *raw_key* with the upper-cased *domain*.

    Examples:
        >>> qualified_key("ci", "TIMEOUT")
        'CI_TIMEOUT'
        >>> qualified_key("MyTool", "debug")
        'MYTOOL_debug'
    """
    return f"{domain.upper()}_{raw_key}"


def candidate_keys(
    domains: Iterable[str],
    raw_key: str,
    *,
    search_in_domain: bool,
    fallback_to_raw_key: bool,
) -> tuple[str, ...]:
    """Return the keys to try for *raw_key*, highest precedence first.

    With *search_in_domain* every registered domain contributes one
    qualified key, in registration order, followed by *raw_key* itself
    when *fallback_to_raw_key* is set.  Without it only *raw_key* is
    tried and the fallback flag has no effect.

    Examples:
        >>> candidate_keys(["first", "second"], "VAR", search_in_domain=True, fallback_to_raw_key=True)
        ('FIRST_VAR', 'SECOND_VAR', 'VAR')
        >>> candidate_keys(["first"], "VAR", search_in_domain=False, fallback_to_raw_key=True)
        ('VAR',)
    """
    if not search_in_domain:
        return (raw_key,)
    keys = [qualified_key(domain, raw_key) for domain in domains]
    if fallback_to_raw_key:
        keys.append(raw_key)
    return tuple(keys)


def primary_key(candidates: tuple[str, ...], raw_key: str) -> str:
    """First key attempted, or *raw_key* when nothing was attempted."""
    return candidates[0] if candidates else raw_key
