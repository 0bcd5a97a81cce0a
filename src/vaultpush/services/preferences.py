"""PreferencesService: show and edit the stored push preferences.

Every edit is saved immediately, like a settings-panel text field. No
validation happens on save; an empty or odd destination is only rejected
when a push runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vaultpush.config.models import PushConfig
from vaultpush.config.store import SettingsStoreError
from vaultpush.services.base import BaseService
from vaultpush.services.result import ServiceResult

if TYPE_CHECKING:
    from vaultpush.config.store import SettingsStore

# CLI key -> PushConfig field
EDITABLE_FIELDS: dict[str, str] = {
    "folder-to-copy": "folder_to_copy",
    "destination": "destination",
}


class PreferencesService(BaseService):
    """Read and write the preferences record for the current vault."""

    def show(self) -> ServiceResult:
        op = "settings_show"
        store = self._vault.store
        if store is None:
            return _no_store(op)
        try:
            prefs = store.load()
        except SettingsStoreError as exc:
            return _invalid(op, exc)
        return _ok(op, store, prefs)

    def set(self, key: str, value: str) -> ServiceResult:
        """Save one preference. *key* uses the CLI spelling."""
        op = "settings_set"
        field_name = EDITABLE_FIELDS.get(key)
        if field_name is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_SETTING",
                f"Unknown setting: {key}",
                detail={"allowed": sorted(EDITABLE_FIELDS)},
            )

        store = self._vault.store
        if store is None:
            return _no_store(op)
        try:
            prefs = store.update(**{field_name: value})
        except SettingsStoreError as exc:
            return _invalid(op, exc)
        return _ok(op, store, prefs, message=f"Saved {key}")

    def reset(self) -> ServiceResult:
        """Overwrite the stored record with defaults."""
        op = "settings_reset"
        store = self._vault.store
        if store is None:
            return _no_store(op)
        prefs = PushConfig()
        try:
            store.save(prefs)
        except SettingsStoreError as exc:
            return _invalid(op, exc)
        return _ok(op, store, prefs, message="Settings reset to defaults")


def _ok(op: str, store: SettingsStore, prefs: PushConfig, *, message: str = "") -> ServiceResult:
    return ServiceResult(
        ok=True,
        op=op,
        message=message,
        data={
            "folder_to_copy": prefs.folder_to_copy,
            "destination": prefs.destination,
            "version": prefs.version,
            "path": str(store.path),
        },
    )


def _no_store(op: str) -> ServiceResult:
    return ServiceResult.failure(op, "VAULT_ROOT_UNAVAILABLE", "Failed to get vault path")


def _invalid(op: str, exc: SettingsStoreError) -> ServiceResult:
    return ServiceResult.failure(op, "SETTINGS_INVALID", str(exc), detail={"path": str(exc.path)})
