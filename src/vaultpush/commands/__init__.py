"""vaultpush subcommands.

Command modules are imported inside :func:`register_commands`, and services
inside each command body, so ``vaultpush --help`` stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    from vaultpush.commands.push import push
    from vaultpush.commands.settings import settings

    for command in (push, settings):
        cli.add_command(command)
