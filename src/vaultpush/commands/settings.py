"""Command group: show and edit the stored push settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vaultpush.commands._base import examples_option
from vaultpush.services.preferences import EDITABLE_FIELDS

if TYPE_CHECKING:
    from vaultpush.commands._context import AppContext


@click.group()
@examples_option(
    """
    vaultpush settings show
    vaultpush settings set folder-to-copy blog/posts
    vaultpush settings set destination /Users/emma/src/my-blog/content/
    vaultpush settings reset
    """
)
def settings() -> None:
    """Show and edit the folder and destination used by push."""


@settings.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the stored settings."""
    from vaultpush.services.preferences import PreferencesService

    app.emit(PreferencesService(app.vault).show())


@settings.command(name="set")
@click.argument("key", type=click.Choice(sorted(EDITABLE_FIELDS)))
@click.argument("value")
@click.pass_obj
def set_cmd(app: AppContext, key: str, value: str) -> None:
    """Save one setting (folder-to-copy or destination)."""
    from vaultpush.services.preferences import PreferencesService

    app.emit(PreferencesService(app.vault).set(key, value))


@settings.command()
@click.pass_obj
def reset(app: AppContext) -> None:
    """Restore the default (empty) settings."""
    from vaultpush.services.preferences import PreferencesService

    app.emit(PreferencesService(app.vault).reset())
