"""Decorators shared by the vaultpush subcommands."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import TypeVar

import click

F = TypeVar("F", bound=Callable[..., object])


def examples_option(text: str) -> Callable[[F], F]:
    """Add an eager ``--examples`` flag that prints *text* and exits.

    *text* is dedented, so it can be written as an indented triple-quoted
    block next to the command it documents.
    """
    body = textwrap.indent(textwrap.dedent(text).strip("\n"), "  ")

    def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"{ctx.command_path} examples:\n\n{body}")
        ctx.exit()

    return click.option(
        "--examples",
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=_print_examples,
        help="Print usage examples and exit.",
    )
