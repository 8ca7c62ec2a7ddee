"""Value sources — where raw configuration text comes from.

The resolver only ever asks a source one question: "what text is stored
under this key?"  Anything that answers ``lookup(key) -> str | None`` can
be plugged in.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class ValueSource(Protocol):
    """Provider of raw string values keyed by name."""

    def lookup(self, key: str) -> str | None: ...


class ProcessEnvironmentSource:
    """Read values from ``os.environ`` at lookup time."""

    def lookup(self, key: str) -> str | None:
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "ProcessEnvironmentSource()"


class ContextEnvironmentSource:
    """Read values from an environment mapping handed over by a host tool.

    Build backends and process launchers usually receive the environment
    as a plain dict rather than through ``os.environ``.  The mapping is
    held by reference, so later changes made by the host are visible.
    """

    def __init__(self, environ: Mapping[str, str]) -> None:
        self._environ = environ

    def lookup(self, key: str) -> str | None:
        return self._environ.get(key)

    def __repr__(self) -> str:
        return f"ContextEnvironmentSource({len(self._environ)} keys)"


class MemoryValueSource:
    """Mutable in-memory source for tests.

    Access to the backing dict is serialized with a lock so a single
    instance can be shared with helper threads during a test.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def lookup(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def remove(self, key: str) -> None:
        """Delete *key*; missing keys are ignored."""
        with self._lock:
            self._values.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __repr__(self) -> str:
        with self._lock:
            return f"MemoryValueSource({sorted(self._values)})"
