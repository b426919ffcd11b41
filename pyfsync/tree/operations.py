"""Filesystem mutations performed during sync."""

import logging
import os
import shutil
from pathlib import Path

from ..utils import DEFAULT_DIR_MODE

logger = logging.getLogger(__name__)


class SyncOperations:
    """The only place where the destination tree is modified.

    Every method raises ``OSError`` on failure; nothing is retried.
    """

    def copy_file(self, source: Path, destination: Path) -> int:
        """Copy a file's bytes over destination, creating it if needed.

        Args:
            source: File to read
            destination: File to create or truncate and overwrite

        Returns:
            Number of bytes written
        """
        # Never write through a link; the link itself is replaced
        if destination.is_symlink():
            destination.unlink()
        destination.parent.mkdir(parents=True, exist_ok=True)

        with open(source, "rb") as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst)
            written = dst.tell()
        logger.debug(f"Copied {source} -> {destination} ({written} bytes)")
        return written

    def make_directory(self, destination: Path) -> None:
        """Create a directory (and missing parents).

        A dangling symbolic link at the destination is replaced.
        """
        if destination.is_symlink() and not destination.exists():
            destination.unlink()
        destination.mkdir(mode=DEFAULT_DIR_MODE, parents=True, exist_ok=True)
        logger.debug(f"Created directory {destination}")

    def remove_file(self, destination: Path) -> None:
        """Remove a single file or symbolic link."""
        destination.unlink()
        logger.debug(f"Removed file {destination}")

    def remove_tree(self, destination: Path) -> None:
        """Remove a path and everything below it.

        Symbolic links are removed without touching what they point to.
        """
        if destination.is_symlink() or not destination.is_dir():
            self.remove_file(destination)
            return
        shutil.rmtree(destination)
        logger.debug(f"Removed tree {destination}")

    def list_names(self, directory: Path) -> list[str]:
        """Return the names of a directory's immediate children."""
        with os.scandir(directory) as entries:
            return [entry.name for entry in entries]
