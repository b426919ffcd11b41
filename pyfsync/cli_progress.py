"""CLI progress display for sync operations.

This module provides a Rich-based spinner that is fed by the sync
engine's progress callback.
"""

from typing import Callable, Optional

from rich.markup import escape
from rich.progress import (
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from .tree.comparator import SyncAction, SyncDecision


class SyncProgressDisplay:
    """Rich-based progress display for sync operations.

    The display shows the path currently being processed together with
    running counts of checked paths and copied files.
    """

    def __init__(self) -> None:
        """Initialize the progress display."""
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None
        self.paths_checked = 0
        self.files_copied = 0

    def create_callback(self) -> Callable[[SyncDecision], None]:
        """Create a progress callback that updates this display."""
        return self._handle_decision

    def _handle_decision(self, decision: SyncDecision) -> None:
        """Handle a decision reported by the engine.

        Args:
            decision: Decision about to be applied
        """
        self.paths_checked += 1
        if decision.action.copies_content:
            self.files_copied += 1

        if self._progress is None or self._task is None:
            return

        verb = "Checking" if decision.action is SyncAction.SKIP else "Syncing"
        if decision.action is SyncAction.DELETE_EXTRANEOUS:
            verb = "Deleting"
        self._progress.update(
            self._task,
            description=f"{verb}: {escape(decision.destination.name)}",
            counts=f"{self.paths_checked} checked, {self.files_copied} copied",
        )

    def __enter__(self) -> "SyncProgressDisplay":
        """Enter context manager - start progress display."""
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            TextColumn("[cyan]{task.fields[counts]}"),
            TimeElapsedColumn(),
            transient=True,
            refresh_per_second=8,
        )
        self._progress.__enter__()
        self._task = self._progress.add_task(
            "Preparing sync...",
            total=None,
            counts="0 checked, 0 copied",
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager - stop progress display."""
        if self._progress is not None:
            self._progress.__exit__(exc_type, exc_val, exc_tb)
            self._progress = None
            self._task = None
