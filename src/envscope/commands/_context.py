"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy resolver construction and centralized
output (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envscope.output.formatters import format_candidates, format_resolution

if TYPE_CHECKING:
    from envscope.config.settings import EnvScopeSettings
    from envscope.domain.models import Resolution
    from envscope.resolver import Resolver


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The resolver is built on first use from the settings, reading the
    process environment.
    """

    def __init__(self, settings: EnvScopeSettings) -> None:
        self.settings = settings
        self._resolver: Resolver | None = None

        from envscope.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def resolver(self) -> Resolver:
        """The resolver instance (created lazily on first access)."""
        if self._resolver is None:
            from envscope.resolver import Resolver

            self._resolver = Resolver.from_settings(self.settings)
        return self._resolver

    def emit(self, resolution: Resolution) -> None:
        """Print a Resolution with correct exit semantics.

        * A value exists (found or default): stdout, returns normally.
        * Unset: stderr, exits with code 1.
        """
        output = format_resolution(resolution, json_output=self.settings.json_output)
        if resolution.value is not None:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_candidates(self, keys: tuple[str, ...]) -> None:
        click.echo(format_candidates(keys, json_output=self.settings.json_output))
