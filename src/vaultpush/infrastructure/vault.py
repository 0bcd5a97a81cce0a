"""Vault: the host context every service receives.

Owns the storage adapter, the preferences store, and the extension hooks.
Nothing here touches the filesystem until a property is first accessed,
so ``--help`` and ``--version`` stay side-effect free.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from vaultpush.config.store import SettingsStore
from vaultpush.infrastructure.adapters import StorageAdapter, adapter_for, resolve_vault_root
from vaultpush.plugins.manager import PushHooks

if TYPE_CHECKING:
    from vaultpush.config.settings import PushSettings

logger = logging.getLogger(__name__)


class Vault:
    """Access point for vault storage, stored preferences, and extensions."""

    def __init__(
        self,
        settings: PushSettings,
        *,
        adapter: StorageAdapter | None = None,
    ) -> None:
        self._settings = settings
        self._adapter = adapter or adapter_for(settings.vault_location)
        self._store: SettingsStore | None = None
        self._hooks: PushHooks | None = None

    @property
    def settings(self) -> PushSettings:
        return self._settings

    @property
    def adapter(self) -> StorageAdapter:
        return self._adapter

    @property
    def root(self) -> Path | None:
        """Filesystem base path, or None when storage is not on disk."""
        return resolve_vault_root(self._adapter)

    @property
    def store(self) -> SettingsStore | None:
        """Preferences store, or None when the vault root is unavailable."""
        if self._store is None:
            root = self.root
            if root is None:
                return None
            self._store = SettingsStore(
                root,
                plugin_id=self._settings.store.plugin_id,
                config_dir=self._settings.store.config_dir,
            )
        return self._store

    @property
    def hooks(self) -> PushHooks | None:
        """Loaded extension hooks, or None when extensions are disabled."""
        if not self._settings.plugins.enabled:
            return None
        if self._hooks is None:
            root = self.root
            hooks = PushHooks()
            local_dir = None if root is None else root / self._settings.plugins.local_dir
            names = hooks.load(local_dir)
            logger.debug("Loaded extensions: %s", names)
            self._hooks = hooks
        return self._hooks
