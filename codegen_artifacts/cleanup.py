"""Removal of empty files and folders left behind by artifact generation."""

from __future__ import annotations

import os
import stat

from .logging import get_logger

logger = get_logger("cleanup")


def cleanup_empty_files_and_folders(path: str | os.PathLike[str]) -> None:
    """Delete empty files under ``path`` and then, bottom-up, empty folders.

    A missing path is already clean. Non-empty files are left alone, and so
    are symlinks, which are never followed. A folder is listed once to
    recurse into its entries and listed again afterwards; it is removed only
    if that second listing comes back empty.
    """
    target = os.fspath(path)
    try:
        info = os.lstat(target)
    except FileNotFoundError:
        return

    if stat.S_ISREG(info.st_mode):
        if info.st_size == 0:
            logger.debug("Removing empty file %s", target)
            os.remove(target)
        return

    if not stat.S_ISDIR(info.st_mode):
        return

    for entry in os.listdir(target):
        cleanup_empty_files_and_folders(os.path.join(target, entry))

    if not os.listdir(target):
        logger.debug("Removing empty folder %s", target)
        os.rmdir(target)


__all__ = ["cleanup_empty_files_and_folders"]
