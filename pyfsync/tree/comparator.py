"""File comparison logic for sync operations."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Union

from ..utils import DEFAULT_CHUNK_SIZE
from .classifier import PathNode


class SyncAction(str, Enum):
    """Actions that can be taken for a single path during sync."""

    SKIP = "skip"
    """Destination already matches source (no action needed)"""

    CREATE_FILE = "create_file"
    """Copy source file to a missing destination"""

    OVERWRITE_FILE = "overwrite_file"
    """Copy source file over a destination file with different content"""

    REPLACE_WITH_FILE = "replace_with_file"
    """Remove destination directory, then copy source file"""

    CREATE_DIRECTORY = "create_directory"
    """Create missing destination directory, then descend"""

    REPLACE_WITH_DIRECTORY = "replace_with_directory"
    """Remove destination file, create a directory, then descend"""

    DESCEND = "descend"
    """Both sides are directories; synchronize their children"""

    DELETE_EXTRANEOUS = "delete_extraneous"
    """Remove destination entry that has no counterpart in source"""

    @property
    def copies_content(self) -> bool:
        return self in (
            SyncAction.CREATE_FILE,
            SyncAction.OVERWRITE_FILE,
            SyncAction.REPLACE_WITH_FILE,
        )


@dataclass
class SyncDecision:
    """Represents a decision about how to sync a single path."""

    action: SyncAction
    """Action to take"""

    reason: str
    """Human-readable reason for this decision"""

    destination: Path
    """Destination path the action applies to"""

    source: Optional[Path] = None
    """Source path (None for extraneous destination entries)"""


class FileComparator:
    """Compares destination and source entries to determine sync actions."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """Initialize file comparator.

        Args:
            chunk_size: Number of bytes read from each file per comparison step
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def files_equal(self, a: Union[str, Path], b: Union[str, Path]) -> bool:
        """Check whether two files have byte-identical content.

        Files of different sizes are reported unequal without reading them.
        A missing file is never equal to anything.

        Args:
            a: First file
            b: Second file

        Returns:
            True if both files exist and their contents are identical

        Raises:
            OSError: If either file cannot be stat'd, opened or read
        """
        node_a = PathNode.from_path(a)
        node_b = PathNode.from_path(b)
        if not node_a.exists or not node_b.exists:
            return False
        if node_a.size != node_b.size:
            return False
        if node_a.size == 0:
            return True

        with open(a, "rb") as stream_a, open(b, "rb") as stream_b:
            return self._streams_equal(stream_a, stream_b)

    def _streams_equal(self, stream_a: BinaryIO, stream_b: BinaryIO) -> bool:
        while True:
            chunk_a = self._read_chunk(stream_a)
            chunk_b = self._read_chunk(stream_b)
            if chunk_a != chunk_b:
                return False
            if not chunk_a:
                return True

    def _read_chunk(self, stream: BinaryIO) -> bytes:
        return stream.read(self.chunk_size)

    def decide(self, destination: PathNode, source: PathNode) -> SyncDecision:
        """Determine the action needed to make destination match source.

        Args:
            destination: Current state of the destination path
            source: Current state of the source path (must exist)

        Returns:
            SyncDecision for this path
        """
        if not source.exists:
            raise ValueError(f"Source does not exist: {source.path}")

        if source.is_dir:
            return self._decide_directory(destination, source)
        return self._decide_file(destination, source)

    def _decide_file(self, destination: PathNode, source: PathNode) -> SyncDecision:
        """Decide for a source file."""
        if destination.is_dir:
            return SyncDecision(
                action=SyncAction.REPLACE_WITH_FILE,
                reason="Directory replaced by file",
                destination=destination.path,
                source=source.path,
            )
        if not destination.exists:
            return SyncDecision(
                action=SyncAction.CREATE_FILE,
                reason="New file",
                destination=destination.path,
                source=source.path,
            )
        if self.files_equal(destination.path, source.path):
            return SyncDecision(
                action=SyncAction.SKIP,
                reason="Files are identical",
                destination=destination.path,
                source=source.path,
            )
        if destination.size != source.size:
            reason = f"Sizes differ ({destination.size} vs {source.size})"
        else:
            reason = "Contents differ"
        return SyncDecision(
            action=SyncAction.OVERWRITE_FILE,
            reason=reason,
            destination=destination.path,
            source=source.path,
        )

    def _decide_directory(
        self, destination: PathNode, source: PathNode
    ) -> SyncDecision:
        """Decide for a source directory."""
        if destination.is_dir:
            return SyncDecision(
                action=SyncAction.DESCEND,
                reason="Directory exists",
                destination=destination.path,
                source=source.path,
            )
        if destination.exists:
            return SyncDecision(
                action=SyncAction.REPLACE_WITH_DIRECTORY,
                reason="File replaced by directory",
                destination=destination.path,
                source=source.path,
            )
        return SyncDecision(
            action=SyncAction.CREATE_DIRECTORY,
            reason="New directory",
            destination=destination.path,
            source=source.path,
        )
