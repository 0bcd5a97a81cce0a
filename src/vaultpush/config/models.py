"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, vaultpush.toml only contains
overrides. A vault needs no vaultpush.toml at all.

:class:`PushConfig` is the stored preferences record (the two strings a
user edits). It is kept separate from the TOML sections because it lives
in the host application's plugin data file, not in vaultpush.toml.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

PUSH_CONFIG_VERSION = 1
DEFAULT_PLUGIN_ID = "folder-push"


# --- Stored preferences (plugin data.json) ---


class PushConfig(BaseModel):
    """Preferences for the push command.

    Attributes:
        version: Schema version of the stored record.
        folder_to_copy: Folder to push, relative to the vault root. Empty
            means the vault root itself.
        destination: Absolute directory to push into. Empty means unset.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    version: int = PUSH_CONFIG_VERSION
    folder_to_copy: str = Field(default="", alias="folderToCopy")
    destination: str = ""

    @field_validator("version")
    @classmethod
    def _supported_version(cls, value: int) -> int:
        if value > PUSH_CONFIG_VERSION:
            msg = f"Unsupported settings version {value} (max {PUSH_CONFIG_VERSION})"
            raise ValueError(msg)
        return value

    @field_validator("folder_to_copy", "destination", mode="before")
    @classmethod
    def _none_is_empty(cls, value: object) -> object:
        return "" if value is None else value


# --- vaultpush.toml sections ---


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    plugin_id: str = DEFAULT_PLUGIN_ID
    config_dir: str = ".obsidian"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".vaultpush/plugins"
