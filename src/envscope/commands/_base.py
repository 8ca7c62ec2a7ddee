"""Shared command decorators.

Every envscope command carries an eager ``--examples`` flag that prints
usage examples and exits, keeping ``--help`` concise.  Lookup commands
also take the ``--domain-search/--no-domain-search`` switch.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

_Decorator = Callable[[Callable[..., Any]], Any]


def examples_option(examples: str) -> _Decorator:
    """Add ``--examples``, printing *examples* for the invoked command path."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


def lookup_command(examples: str) -> _Decorator:
    """Declare a command that resolves keys.

    The wrapped function receives ``search_in_domain`` (True unless
    ``--no-domain-search`` is given).
    """

    def decorate(func: Callable[..., Any]) -> click.Command:
        func = click.option(
            "--domain-search/--no-domain-search",
            "search_in_domain",
            default=True,
            help="Search domain-qualified keys (default) or the raw key only.",
        )(func)
        func = examples_option(examples)(func)
        return click.command()(func)

    return decorate
