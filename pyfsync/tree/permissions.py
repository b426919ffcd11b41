"""Permission propagation from source to destination."""

import logging
import os
from pathlib import Path
from typing import Union

from .classifier import PathNode

logger = logging.getLogger(__name__)


def sync_permissions(
    destination: Union[str, Path], source: Union[str, Path]
) -> bool:
    """Make destination's permission bits equal to source's.

    Only the permission portion of the mode is touched. If either path does
    not exist, nothing happens.

    Args:
        destination: Path whose permissions are updated
        source: Path whose permissions are copied

    Returns:
        True if destination's permissions were changed

    Raises:
        OSError: If either path cannot be stat'd or chmod fails
    """
    dst = PathNode.from_path(destination)
    src = PathNode.from_path(source)
    if not dst.exists or not src.exists:
        return False

    if dst.permissions == src.permissions:
        return False

    logger.debug(
        f"chmod {destination}: {dst.permissions:o} -> {src.permissions:o}"
    )
    os.chmod(destination, src.permissions)
    return True
