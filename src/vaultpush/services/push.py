"""PushService: the push command behind the user-facing trigger.

Checks run in a fixed order before any filesystem access:

1. destination set?            -> ``EMPTY_DESTINATION``
2. vault root on disk?         -> ``VAULT_ROOT_UNAVAILABLE``
3. copy the tree               -> ok, or ``COPY_FAILED``

Exactly four outcomes reach the user. Copy diagnostics (path, OS error,
traceback) go to the log only.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vaultpush.config.models import PushConfig
from vaultpush.config.store import SettingsStoreError
from vaultpush.domain.errors import CopyError, EmptyDestinationError, VaultRootUnavailableError
from vaultpush.infrastructure.copier import copy_tree
from vaultpush.services.base import BaseService
from vaultpush.services.result import ServiceResult

logger = logging.getLogger(__name__)

MSG_SUCCESS = "Folder copied successfully!"
MSG_EMPTY_DESTINATION = "Must set destination folder"
MSG_VAULT_ROOT_UNAVAILABLE = "Failed to get vault path"
MSG_COPY_FAILED = "Failed to copy folder. Check logs for details."

_OP = "push"


class PushService(BaseService):
    """Push the configured vault folder to the configured destination."""

    def push(
        self,
        *,
        folder_to_copy: str | None = None,
        destination: str | None = None,
    ) -> ServiceResult:
        """Mirror ``<vault>/<folder_to_copy>`` into *destination*.

        Arguments override the stored preferences for this call only; the
        store is never written here.
        """
        try:
            prefs = self._preferences()
        except SettingsStoreError as exc:
            logger.error("Cannot load push settings: %s", exc)
            return ServiceResult.failure(
                _OP, "SETTINGS_INVALID", str(exc), detail={"path": str(exc.path)}
            )

        folder = prefs.folder_to_copy if folder_to_copy is None else folder_to_copy
        target = prefs.destination if destination is None else destination

        if not target.strip():
            return self._fail(EmptyDestinationError(), MSG_EMPTY_DESTINATION)

        root = self._vault.root
        if root is None:
            logger.warning(
                "Vault storage has no filesystem path: %s", self._vault.adapter.describe()
            )
            return self._fail(VaultRootUnavailableError(), MSG_VAULT_ROOT_UNAVAILABLE)

        source = vault_path(root, folder)
        dest = Path(target).expanduser()
        logger.debug("Pushing %s -> %s", source, dest)
        try:
            copy_tree(source, dest)
        except CopyError as exc:
            logger.error("Error copying folder (%s): %s", exc.category, exc, exc_info=True)
            return self._fail(exc, MSG_COPY_FAILED, code="COPY_FAILED")

        warnings = self._notify("post_push", source=str(source), destination=str(dest))
        logger.info("Pushed %s -> %s", source, dest)
        return ServiceResult(
            ok=True,
            op=_OP,
            message=MSG_SUCCESS,
            data={"source": str(source), "destination": str(dest)},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _preferences(self) -> PushConfig:
        """Stored preferences; defaults when the vault is not on disk."""
        store = self._vault.store
        if store is None:
            return PushConfig()
        return store.load()

    def _fail(self, exc: CopyError, message: str, *, code: str | None = None) -> ServiceResult:
        error_code = code or exc.code
        warnings = self._notify("push_failed", code=error_code, message=message)
        return ServiceResult.failure(
            _OP, error_code, message, detail={"category": exc.category}, warnings=warnings
        )


def vault_path(root: Path, folder: str) -> Path:
    """Join a vault-relative *folder* onto *root*.

    Leading separators are dropped so ``/blog`` still means ``<root>/blog``.
    """
    return root / folder.lstrip("/\\")
