"""``--examples`` flag shared by the subcommands.

``--help`` stays short; ``--examples`` prints typical invocations and exits.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

F = TypeVar("F", bound=Callable[..., object])


def with_examples(text: str) -> Callable[[F], F]:
    """Decorate a command with an eager ``--examples`` flag printing *text*."""

    def print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{text}")
            ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=print_examples,
        help="Show usage examples and exit.",
    )
