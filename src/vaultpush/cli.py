"""``vaultpush`` entry point: global flags, then one of the subcommands."""

from __future__ import annotations

import click

from vaultpush import __version__
from vaultpush.commands import register_commands
from vaultpush.commands._context import AppContext
from vaultpush.config.settings import PushSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="vaultpush")
@click.option(
    "--vault",
    "vault_location",
    metavar="PATH",
    help="Vault directory or storage URI. [default: config file dir, else CWD]",
)
@click.option("-c", "--config", "config_path", metavar="FILE", help="Use this vaultpush.toml.")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the outcome message.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error codes.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON lines.")
@click.pass_context
def cli(
    ctx: click.Context,
    vault_location: str | None,
    config_path: str | None,
    **flags: bool,
) -> None:
    """Push a folder of a note vault into a directory on disk.

    The push is one-way: destination files are overwritten, and files that
    exist only in the destination are kept.
    """
    ctx.obj = AppContext(
        PushSettings.from_cli(config_path=config_path, vault_location=vault_location, **flags)
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
