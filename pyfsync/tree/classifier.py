"""Path classification for sync operations."""

import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..utils import PERMISSION_MASK


class PathKind(str, Enum):
    """Kind of filesystem entry observed at a path."""

    MISSING = "missing"
    """Nothing exists at the path"""

    FILE = "file"
    """A regular file (or anything that is not a directory)"""

    DIRECTORY = "directory"
    """A directory"""


@dataclass
class PathNode:
    """Transient observation of a single filesystem entry.

    Nodes are never cached; each one reflects the filesystem at the moment
    ``from_path`` was called.
    """

    path: Path
    """Path that was observed"""

    kind: PathKind
    """Whether the entry is missing, a file or a directory"""

    size: int = 0
    """Size in bytes (files only)"""

    mode: int = 0
    """Full st_mode of the entry, 0 when missing"""

    @property
    def exists(self) -> bool:
        return self.kind is not PathKind.MISSING

    @property
    def is_dir(self) -> bool:
        return self.kind is PathKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is PathKind.FILE

    @property
    def permissions(self) -> int:
        """Permission bits of the entry, without file type bits."""
        return self.mode & PERMISSION_MASK

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "PathNode":
        """Stat a path and classify it.

        Symbolic links are followed. A missing path is not an error, but
        any other stat failure is propagated.

        Args:
            path: Path to observe

        Returns:
            PathNode for the path

        Raises:
            OSError: If the path exists but cannot be stat'd
        """
        path = Path(path)
        st = _stat_or_none(path)
        if st is None:
            return cls(path=path, kind=PathKind.MISSING)
        if stat.S_ISDIR(st.st_mode):
            return cls(path=path, kind=PathKind.DIRECTORY, mode=st.st_mode)
        return cls(path=path, kind=PathKind.FILE, size=st.st_size, mode=st.st_mode)


def _stat_or_none(path: Path) -> Optional[os.stat_result]:
    try:
        return os.stat(path)
    except FileNotFoundError:
        return None


def classify(path: Union[str, Path]) -> PathKind:
    """Return the PathKind of a path."""
    return PathNode.from_path(path).kind
