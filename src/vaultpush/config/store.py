"""Persistent store for the push preferences.

The preferences live where the host application keeps plugin data:
``<vault>/<config_dir>/plugins/<plugin_id>/data.json``. The JSON keys
(``folderToCopy``, ``destination``) stay compatible with files written by
the host.

Contract:
- :meth:`SettingsStore.load` returns saved values merged over defaults.
- :meth:`SettingsStore.save` persists immediately.
- No path validation happens here; an empty destination is storable and
  only rejected when a push runs.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vaultpush.config.models import DEFAULT_PLUGIN_ID, PushConfig

logger = logging.getLogger(__name__)

DATA_FILENAME = "data.json"


class SettingsStoreError(Exception):
    """The stored preferences file exists but cannot be used."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class SettingsStore:
    """Load and save :class:`PushConfig` for one vault."""

    def __init__(
        self,
        vault_root: Path,
        *,
        plugin_id: str = DEFAULT_PLUGIN_ID,
        config_dir: str = ".obsidian",
    ) -> None:
        self._path = vault_root / config_dir / "plugins" / plugin_id / DATA_FILENAME

    @property
    def path(self) -> Path:
        """Location of the data file (may not exist yet)."""
        return self._path

    def load(self) -> PushConfig:
        """Return stored preferences merged over defaults."""
        if not self._path.is_file():
            logger.debug("No stored settings at %s, using defaults", self._path)
            return PushConfig()

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read settings file {self._path}: {exc}"
            raise SettingsStoreError(msg, path=self._path) from exc

        try:
            data: Any = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {self._path}: {exc}"
            raise SettingsStoreError(msg, path=self._path) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            msg = f"Settings file {self._path} does not contain a JSON object"
            raise SettingsStoreError(msg, path=self._path)

        try:
            return PushConfig.model_validate(data)
        except ValidationError as exc:
            msg = f"Invalid settings in {self._path}: {exc}"
            raise SettingsStoreError(msg, path=self._path) from exc

    def save(self, config: PushConfig) -> None:
        """Persist *config*, creating parent directories as needed."""
        payload = json.dumps(config.model_dump(by_alias=True), indent=2) + "\n"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot write settings file {self._path}: {exc.strerror or exc}"
            raise SettingsStoreError(msg, path=self._path) from exc
        logger.debug("Saved settings to %s", self._path)

    def update(self, **changes: str) -> PushConfig:
        """Apply one settings edit and save it immediately."""
        current = self.load()
        updated = current.model_copy(update=changes)
        self.save(updated)
        return updated
