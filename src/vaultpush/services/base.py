"""BaseService: shared plumbing for the vaultpush services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vaultpush.infrastructure.vault import Vault


class BaseService:
    """A service works on one :class:`Vault` and returns ServiceResult."""

    def __init__(self, vault: Vault) -> None:
        self._vault = vault

    def _notify(self, event: str, **payload: Any) -> list[str]:
        """Tell extensions about *event*; returns their failures as warnings."""
        hooks = self._vault.hooks
        if hooks is None:
            return []
        return hooks.notify(event, **payload)
