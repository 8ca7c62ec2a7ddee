"""Root CLI group for envscope with global flags and command registration."""

from __future__ import annotations

import click

from envscope import __version__
from envscope.commands import register_commands
from envscope.commands._base import examples_option
from envscope.commands._context import AppContext
from envscope.config.settings import EnvScopeSettings


@click.group(invoke_without_command=True)
@examples_option(
    """\
  envscope -d ci get BUILD_TIMEOUT --type int --default 30
  ENVSCOPE_DOMAINS='["ci"]' envscope keys BUILD_TIMEOUT"""
)
@click.version_option(version=__version__, prog_name="envscope")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Log every resolution to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-d",
    "--domain",
    "domains",
    multiple=True,
    help="Register a domain (repeatable; first has highest precedence).",
)
@click.option(
    "--fallback-raw-key",
    is_flag=True,
    help="Also try the unqualified key after all domain-qualified keys.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    domains: tuple[str, ...],
    fallback_raw_key: bool,
) -> None:
    """envscope — domain-scoped configuration lookup."""
    settings = EnvScopeSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        domains=domains,
        fallback_to_raw_key=fallback_raw_key,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
