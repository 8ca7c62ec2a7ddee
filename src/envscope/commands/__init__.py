"""Subcommand modules for envscope.

Provides register_commands() which uses deferred imports to keep
``envscope --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from envscope.commands.get import get
    from envscope.commands.keys import keys

    cli.add_command(get)
    cli.add_command(keys)
