"""Vault storage adapters and vault-root resolution.

A vault lives behind a storage adapter. Only a :class:`FileSystemAdapter`
has a concrete base path on disk; any other adapter (network, virtual,
sandboxed app storage) resolves to ``None`` and a push must not touch the
filesystem.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import unquote, urlparse

# Two or more characters so Windows drive letters (``C:\\``) stay local.
_URI_SCHEME = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]+)://")


@runtime_checkable
class StorageAdapter(Protocol):
    """Anything that can describe where a vault is stored."""

    def describe(self) -> str:
        """Human-readable location, safe for logs."""
        ...


class FileSystemAdapter:
    """Vault stored in a plain directory on the local filesystem."""

    def __init__(self, base_path: Path | str) -> None:
        self._base_path = Path(base_path).expanduser()

    def get_base_path(self) -> Path:
        return self._base_path

    def describe(self) -> str:
        return str(self._base_path)

    def __repr__(self) -> str:
        return f"FileSystemAdapter({self._base_path!s})"


class VirtualAdapter:
    """Vault stored somewhere without a filesystem path (e.g. ``s3://``)."""

    def __init__(self, uri: str) -> None:
        self.uri = uri

    def describe(self) -> str:
        return self.uri

    def __repr__(self) -> str:
        return f"VirtualAdapter({self.uri!r})"


def adapter_for(location: Path | str) -> StorageAdapter:
    """Pick the adapter for a configured vault *location*.

    ``file://`` URIs and plain paths map to :class:`FileSystemAdapter`;
    any other URI scheme maps to :class:`VirtualAdapter`.
    """
    if isinstance(location, Path):
        return FileSystemAdapter(location)

    match = _URI_SCHEME.match(location)
    if match is None:
        return FileSystemAdapter(location)
    if match.group("scheme").lower() == "file":
        return FileSystemAdapter(unquote(urlparse(location).path))
    return VirtualAdapter(location)


def resolve_vault_root(adapter: StorageAdapter) -> Path | None:
    """Return the vault's base path, or None when it is not on disk."""
    if isinstance(adapter, FileSystemAdapter):
        return adapter.get_base_path()
    return None
