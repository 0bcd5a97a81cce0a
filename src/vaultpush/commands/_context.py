"""AppContext: the object every subcommand receives through ``ctx.obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vaultpush.config.logging import configure_logging
from vaultpush.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from vaultpush.config.settings import PushSettings
    from vaultpush.infrastructure.vault import Vault
    from vaultpush.services.result import ServiceResult


class AppContext:
    """Resolved settings plus a vault that is opened on first use.

    ``--help`` and ``--version`` never reach :attr:`vault`, so they load no
    extensions and read no preferences.
    """

    def __init__(self, settings: PushSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._vault: Vault | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def vault(self) -> Vault:
        if self._vault is None:
            from vaultpush.infrastructure.vault import Vault

            self._vault = Vault(self.settings)
        return self._vault

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits 1.

        Warnings go to stderr in human mode. JSON output already carries
        them in the payload.
        """
        text = format_result(result, settings=self.output)
        click.echo(text, err=not result.ok)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
