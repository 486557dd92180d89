"""Infrastructure: directory inspection, clearing and recursive copy.

Rules
-----
* Every ``OSError`` is re-raised as :class:`FilesystemError` naming
  the path(s) involved, chained to the original cause.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from create_rolldown.core.constants import PRESERVED_ENTRY
from create_rolldown.exceptions import FilesystemError


def is_empty(path: str | os.PathLike[str]) -> bool:
    """Return ``True`` if *path* has no entries, or only ``.git``."""
    entries = os.listdir(path)
    return len(entries) == 0 or entries == [PRESERVED_ENTRY]


def empty_dir(path: str | os.PathLike[str]) -> None:
    """Remove everything inside *path* except the ``.git`` directory.

    Does nothing when *path* does not exist.

    Raises
    ------
    FilesystemError
        If any entry cannot be removed.
    """
    directory = Path(path)
    if not directory.exists():
        return
    try:
        for entry in directory.iterdir():
            if entry.name == PRESERVED_ENTRY:
                continue
            _remove(entry)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to empty directory {directory}: {exc}",
        ) from exc


def _remove(entry: Path) -> None:
    """Delete a file, symlink or directory tree."""
    if entry.is_dir() and not entry.is_symlink():
        shutil.rmtree(entry)
    else:
        entry.unlink(missing_ok=True)


def copy(src: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Copy a single file, or a whole directory via :func:`copy_dir`.

    Raises
    ------
    FilesystemError
        On any underlying I/O failure; the message names both paths.
    """
    try:
        if Path(src).is_dir():
            copy_dir(src, dest)
        else:
            shutil.copyfile(src, dest)
    except (FilesystemError, OSError) as exc:
        raise FilesystemError(
            f"Failed to copy from {src} to {dest}: {exc}",
        ) from exc


def copy_dir(src_dir: str | os.PathLike[str], dest_dir: str | os.PathLike[str]) -> None:
    """Recursively copy the entries of *src_dir* into *dest_dir*.

    *dest_dir* (and its parents) is created when absent.  Relative
    structure and entry kind are preserved.

    Raises
    ------
    FilesystemError
        On any underlying I/O failure; the message names both directories.
    """
    source = Path(src_dir)
    destination = Path(dest_dir)
    try:
        destination.mkdir(parents=True, exist_ok=True)
        for entry in sorted(source.iterdir()):
            copy(entry, destination / entry.name)
    except (FilesystemError, OSError) as exc:
        raise FilesystemError(
            f"Failed to copy directory from {source} to {destination}: {exc}",
        ) from exc
