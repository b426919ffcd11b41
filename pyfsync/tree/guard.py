"""Pre-flight safety check run once before a top-level synchronization."""

import errno
import logging
import os
from pathlib import Path
from typing import Union

from ..exceptions import FileOverDirectoryError
from .classifier import PathNode

logger = logging.getLogger(__name__)


def would_overwrite_directory(
    destination: Union[str, Path], source: Union[str, Path]
) -> bool:
    """Check whether syncing would replace a non-empty directory with a file.

    Args:
        destination: Destination path
        source: Source path

    Returns:
        True only if destination is a non-empty directory and source is a file

    Raises:
        OSError: If destination exists but cannot be inspected, or if
            source cannot be stat'd
    """
    dst = PathNode.from_path(destination)
    if not dst.exists:
        return False

    src = PathNode.from_path(source)
    if not src.exists:
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(source))

    if not dst.is_dir or src.is_dir:
        return False

    with os.scandir(destination) as entries:
        return any(True for _ in entries)


def check_guard(destination: Union[str, Path], source: Union[str, Path]) -> None:
    """Raise FileOverDirectoryError if the sync would be destructive.

    Raises:
        FileOverDirectoryError: If destination is a non-empty directory and
            source is a file
    """
    if would_overwrite_directory(destination, source):
        logger.debug(f"Refusing to replace non-empty directory {destination}")
        raise FileOverDirectoryError(destination, source)
