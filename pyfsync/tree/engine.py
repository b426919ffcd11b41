"""Core sync engine for making one tree mirror another."""

import errno
import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

from .classifier import PathNode
from .comparator import FileComparator, SyncAction, SyncDecision
from .operations import SyncOperations
from .permissions import sync_permissions
from .stats import SyncStats

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[SyncDecision], None]


class SyncEngine:
    """Recursive, depth-first tree synchronizer.

    The engine walks the source tree and, for every path, makes the
    destination match the source's type, content and permission bits. It
    raises the first ``OSError`` it hits and leaves any changes already
    made in place; callers that want a single error type should use
    :func:`pyfsync.synchronize`.
    """

    def __init__(
        self,
        delete_extraneous: bool = False,
        comparator: Optional[FileComparator] = None,
        operations: Optional[SyncOperations] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        """Initialize sync engine.

        Args:
            delete_extraneous: Remove destination entries missing from source
            comparator: Comparator used to decide per-path actions
            operations: Filesystem operations used to apply decisions
            progress_callback: Called with every decision before it is applied
        """
        self.delete_extraneous = delete_extraneous
        self.comparator = comparator or FileComparator()
        self.operations = operations or SyncOperations()
        self.progress_callback = progress_callback

    def sync(
        self, destination: Union[str, Path], source: Union[str, Path]
    ) -> SyncStats:
        """Make destination a copy of source.

        Args:
            destination: Path to update
            source: Existing file or directory to copy from

        Returns:
            SyncStats for this run

        Raises:
            OSError: On the first filesystem failure at any depth

        Examples:
            >>> engine = SyncEngine(delete_extraneous=True)
            >>> stats = engine.sync(Path("/backup/docs"), Path("/home/user/docs"))
            >>> print(f"Copied {stats.files_copied} file(s)")
        """
        stats = SyncStats()
        self._sync_path(Path(destination), Path(source), stats)
        return stats

    def _sync_path(self, destination: Path, source: Path, stats: SyncStats) -> None:
        dst = PathNode.from_path(destination)
        src = PathNode.from_path(source)
        if not src.exists:
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), str(source)
            )

        decision = self.comparator.decide(dst, src)
        self._report(decision)

        if src.is_dir:
            self._sync_directory(decision, source, stats)
        else:
            self._sync_file(decision, source, stats)

        # Content is settled; type may have changed, so permissions re-stat
        if sync_permissions(destination, source):
            stats.permissions_updated += 1

    def _sync_file(
        self, decision: SyncDecision, source: Path, stats: SyncStats
    ) -> None:
        """Apply a decision for a source file."""
        if decision.action is SyncAction.SKIP:
            stats.files_skipped += 1
            return

        if decision.action is SyncAction.REPLACE_WITH_FILE:
            self.operations.remove_tree(decision.destination)
            stats.entries_removed += 1

        stats.bytes_copied += self.operations.copy_file(
            source, decision.destination
        )
        stats.files_copied += 1

    def _sync_directory(
        self, decision: SyncDecision, source: Path, stats: SyncStats
    ) -> None:
        """Apply a decision for a source directory and recurse into it."""
        destination = decision.destination

        if decision.action is SyncAction.REPLACE_WITH_DIRECTORY:
            self.operations.remove_file(destination)
            stats.entries_removed += 1
        if decision.action in (
            SyncAction.CREATE_DIRECTORY,
            SyncAction.REPLACE_WITH_DIRECTORY,
        ):
            # Permissions are synced after the children
            self.operations.make_directory(destination)
            stats.directories_created += 1

        names = sorted(self.operations.list_names(source))
        for name in names:
            self._sync_path(destination / name, source / name, stats)

        if self.delete_extraneous:
            self._delete_extraneous(destination, set(names), stats)

    def _delete_extraneous(
        self, destination: Path, keep: set[str], stats: SyncStats
    ) -> None:
        """Remove destination children whose names are not in keep."""
        for name in sorted(self.operations.list_names(destination)):
            if name in keep:
                continue
            decision = SyncDecision(
                action=SyncAction.DELETE_EXTRANEOUS,
                reason="Not present in source",
                destination=destination / name,
            )
            self._report(decision)
            self.operations.remove_tree(decision.destination)
            stats.entries_removed += 1

    def _report(self, decision: SyncDecision) -> None:
        logger.debug(
            f"{decision.action.value}: {decision.destination} ({decision.reason})"
        )
        if self.progress_callback is not None:
            self.progress_callback(decision)
