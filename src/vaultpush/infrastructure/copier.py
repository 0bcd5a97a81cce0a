"""Recursive mirror-push of one directory tree into another.

INVARIANT: After a successful :func:`copy_tree`, every file under *source*
at relative path R exists under *destination* at R with identical bytes.
Destination entries without a source counterpart are never touched.

The copy is fail-fast: the first I/O error aborts the whole traversal and
is raised as a :class:`~vaultpush.domain.errors.CopyError`. Entries written
before the failure stay on disk.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from collections.abc import Iterator
from pathlib import Path

from vaultpush.domain.errors import (
    DestinationUnwritableError,
    EmptyDestinationError,
    SourceUnreadableError,
)

logger = logging.getLogger(__name__)

# Raised by the write side even when the OSError names the source file.
_WRITE_ERRNOS = frozenset(
    code
    for code in (
        getattr(errno, "ENOSPC", None),
        getattr(errno, "EDQUOT", None),
        getattr(errno, "EROFS", None),
        getattr(errno, "EFBIG", None),
    )
    if code is not None
)


def copy_tree(source: Path | str, destination: Path | str | None) -> None:
    """Mirror *source* into *destination*, overwriting colliding files.

    Raises:
        EmptyDestinationError: *destination* is empty or unset. Checked
            before any filesystem access.
        SourceUnreadableError: a source directory cannot be listed or a
            source file cannot be read.
        DestinationUnwritableError: a destination directory cannot be
            created or a destination file cannot be written.
    """
    if destination is None or not str(destination).strip():
        raise EmptyDestinationError()

    src = Path(source)
    dest = Path(destination)
    _reject_nested_destination(src, dest)
    _mirror(src, dest)


def _reject_nested_destination(src: Path, dest: Path) -> None:
    """Refuse a destination equal to or inside the source tree."""
    src_resolved = src.resolve()
    dest_resolved = dest.resolve()
    if dest_resolved == src_resolved or dest_resolved.is_relative_to(src_resolved):
        msg = f"Destination {dest} is inside source {src}"
        raise DestinationUnwritableError(msg, path=dest)


def _mirror(src: Path, dest: Path) -> None:
    """Walk the tree depth-first with an explicit stack of open levels.

    Each stack frame holds one directory pair and the not yet visited part
    of its listing, so entries are handled in the same order a recursive
    walk would use and depth is bounded only by the filesystem.
    """
    stack = [(src, dest, _open_level(src, dest))]
    while stack:
        src_dir, dest_dir, entries = stack[-1]
        for name, is_dir in entries:
            if is_dir:
                child_src, child_dest = src_dir / name, dest_dir / name
                stack.append((child_src, child_dest, _open_level(child_src, child_dest)))
                break
            _copy_file(src_dir / name, dest_dir / name)
        else:
            stack.pop()


def _open_level(src: Path, dest: Path) -> Iterator[tuple[str, bool]]:
    """Create *dest*, then list *src* as ``(name, is_dir)`` pairs."""
    try:
        dest.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Cannot create directory {dest}: {exc.strerror or exc}"
        raise DestinationUnwritableError(msg, path=dest) from exc

    try:
        with os.scandir(src) as it:
            entries = [(entry.name, entry.is_dir()) for entry in it]
    except OSError as exc:
        msg = f"Cannot list directory {src}: {exc.strerror or exc}"
        raise SourceUnreadableError(msg, path=src) from exc

    logger.debug("Mirroring %s -> %s (%d entries)", src, dest, len(entries))
    return iter(entries)


def _copy_file(src: Path, dest: Path) -> None:
    """Copy the full byte content of *src* over *dest*."""
    try:
        shutil.copyfile(src, dest)
    except OSError as exc:
        if _is_read_error(exc, src):
            msg = f"Cannot read file {src}: {exc.strerror or exc}"
            raise SourceUnreadableError(msg, path=src) from exc
        msg = f"Cannot write file {dest}: {exc.strerror or exc}"
        raise DestinationUnwritableError(msg, path=dest) from exc


def _is_read_error(exc: OSError, src: Path) -> bool:
    # The kernel fast-copy path tags every failure with the source name.
    if exc.errno in _WRITE_ERRNOS:
        return False
    return exc.filename is not None and Path(exc.filename) == src
