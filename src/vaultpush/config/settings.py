"""Runtime settings: CLI flags, env vars, and ``vaultpush.toml`` merged.

Priority, highest first:

1. keyword arguments, i.e. the root CLI flags
2. ``VAULTPUSH_*`` environment variables (``__`` for nested keys)
3. the discovered ``vaultpush.toml``
4. model defaults

The push preferences themselves (folder and destination) live in the
plugin data store, :mod:`vaultpush.config.store`, not here.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from vaultpush.config.discovery import find_config
from vaultpush.config.models import PluginsConfig, StoreConfig

# The TOML file for the instance being built by ``from_cli``.
_active_toml: ContextVar[Path | None] = ContextVar("vaultpush_active_toml", default=None)


def _cwd() -> str:
    return str(Path.cwd())


class PushSettings(BaseSettings):
    """Settings for one CLI invocation, stored on the AppContext.

    Attributes:
        vault_location: A vault directory, or a URI for storage that is not
            on the local filesystem. Defaults to the directory holding
            ``vaultpush.toml``, else the CWD.
        config_path: The ``vaultpush.toml`` in effect, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="VAULTPUSH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    vault_location: str = Field(default_factory=_cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    store: StoreConfig = Field(default_factory=StoreConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        vault_location: Path | str | None = None,
        **cli_flags: Any,
    ) -> PushSettings:
        """Build settings for a CLI run.

        An explicit *config_path* is used only if it exists. Otherwise the
        config is searched upward from *vault_location* (or the CWD). A
        storage URI has no directory, so the search starts at the CWD.

        Raises:
            click.ClickException: the TOML file is not valid TOML.
        """
        if config_path:
            toml_path = Path(config_path) if Path(config_path).is_file() else None
        else:
            local = vault_location is not None and "://" not in str(vault_location)
            toml_path = find_config(Path(vault_location) if local else None)

        init: dict[str, Any] = {"config_path": toml_path, **cli_flags}
        if vault_location is not None:
            init["vault_location"] = str(vault_location)
        elif toml_path is not None:
            init["vault_location"] = str(toml_path.parent)

        token = _active_toml.set(toml_path)
        try:
            return cls(**init)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _active_toml.reset(token)
