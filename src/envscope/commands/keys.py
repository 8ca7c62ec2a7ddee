"""Command: show the candidate keys a lookup would try."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envscope.commands._base import lookup_command

if TYPE_CHECKING:
    from envscope.commands._context import AppContext


@lookup_command(
    """\
  envscope -d ci -d local keys TIMEOUT
  envscope -d ci --fallback-raw-key keys TIMEOUT""",
)
@click.argument("key")
@click.pass_obj
def keys(app: AppContext, key: str, search_in_domain: bool) -> None:
    """List the keys tried for KEY, highest precedence first."""
    app.emit_candidates(app.resolver.candidate_keys(key, search_in_domain=search_in_domain))
