"""Command: resolve one key against the process environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envscope.commands._base import lookup_command
from envscope.domain.parsers import PARSERS

if TYPE_CHECKING:
    from envscope.commands._context import AppContext


@lookup_command(
    """\
  envscope get BUILD_TIMEOUT --type int --default 30
  envscope -d ci -d local get VERBOSE --type bool
  envscope --fallback-raw-key -d ci get API_URL
  envscope --json get API_URL --no-domain-search""",
)
@click.argument("key")
@click.option(
    "--type",
    "value_type",
    type=click.Choice(sorted(PARSERS)),
    default="str",
    show_default=True,
    help="Type the value must parse as.",
)
@click.option("--default", "default_text", default=None, help="Value used when nothing resolves.")
@click.pass_obj
def get(
    app: AppContext,
    key: str,
    value_type: str,
    default_text: str | None,
    search_in_domain: bool,
) -> None:
    """Resolve KEY and print the winning key and value."""
    parser = PARSERS[value_type]
    default = None
    if default_text is not None:
        default = parser(default_text)
        if default is None:
            raise click.BadParameter(
                f"{default_text!r} is not a valid {value_type}",
                param_hint="'--default'",
            )
    app.emit(app.resolver.resolve(key, parser, default, search_in_domain=search_in_domain))
