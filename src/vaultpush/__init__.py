"""vaultpush: push a note vault folder to a directory on disk."""

__version__ = "0.1.0"
