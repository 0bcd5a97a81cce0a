"""Copy error taxonomy.

Four failure kinds, each with a stable ``code`` used by the service layer
and the CLI:

- configuration: empty destination
- environment: vault root cannot be resolved to a filesystem path
- source read: a source directory or file cannot be read
- destination write: a directory cannot be created or a file written

Only the two I/O kinds wrap an underlying :class:`OSError`.
"""

from __future__ import annotations

from pathlib import Path


class CopyError(Exception):
    """Base class for every failure of a push."""

    code: str = "COPY_ERROR"
    category: str = "copy_error"

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None and str(path) else None


class SourceUnreadableError(CopyError):
    """A source directory could not be listed, or a source file read."""

    code = "SOURCE_UNREADABLE"
    category = "source_unreadable"


class DestinationUnwritableError(CopyError):
    """A destination directory could not be created, or a file written."""

    code = "DESTINATION_UNWRITABLE"
    category = "destination_unwritable"


class EmptyDestinationError(CopyError):
    """The destination path is empty or unset."""

    code = "EMPTY_DESTINATION"
    category = "empty_destination"

    def __init__(self, message: str = "Destination path is not set") -> None:
        super().__init__(message)


class VaultRootUnavailableError(CopyError):
    """The storage adapter has no concrete filesystem base path."""

    code = "VAULT_ROOT_UNAVAILABLE"
    category = "vault_root_unavailable"

    def __init__(self, message: str = "Vault storage is not filesystem-backed") -> None:
        super().__init__(message)
