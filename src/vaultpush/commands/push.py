"""Command: push the configured vault folder to its destination."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vaultpush.commands._base import examples_option

if TYPE_CHECKING:
    from vaultpush.commands._context import AppContext


@click.command()
@examples_option(
    """
    vaultpush push
    vaultpush push --source blog/posts
    vaultpush push --destination ~/src/my-blog/content
    vaultpush --vault ~/Notes --json push
    """
)
@click.option(
    "--source",
    "folder_to_copy",
    default=None,
    help="Vault-relative folder to push (overrides the stored setting).",
)
@click.option(
    "--destination",
    default=None,
    help="Destination directory (overrides the stored setting).",
)
@click.pass_obj
def push(app: AppContext, folder_to_copy: str | None, destination: str | None) -> None:
    """Copy a vault folder into the destination, overwriting existing files.

    This is a one-way push: files in the destination that do not exist in
    the vault folder are left alone.
    """
    from vaultpush.services.push import PushService

    app.emit(PushService(app.vault).push(folder_to_copy=folder_to_copy, destination=destination))
