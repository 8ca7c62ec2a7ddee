"""Shared pytest fixtures for envscope tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from click.testing import CliRunner

from envscope.resolver import Resolver
from envscope.sources import MemoryValueSource


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def source() -> Generator[MemoryValueSource]:
    """Empty in-memory value source, cleared after the test."""
    mock = MemoryValueSource()
    try:
        yield mock
    finally:
        mock.clear()


@pytest.fixture
def resolver(source: MemoryValueSource) -> Resolver:
    """Isolated resolver reading from the in-memory ``source`` fixture."""
    return Resolver(source)


@pytest.fixture
def _clean_envscope_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``ENVSCOPE_*`` settings inherited from the outer environment."""
    for field in ("domains", "fallback_to_raw_key", "json_output", "verbose", "log_json"):
        monkeypatch.delenv(f"ENVSCOPE_{field.upper()}", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by a test (CLI runs included)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("envscope")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.reset_defaults()
