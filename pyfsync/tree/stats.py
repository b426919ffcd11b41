"""Statistics collected while synchronizing."""

from dataclasses import asdict, dataclass


@dataclass
class SyncStats:
    """Counters describing the work done by a synchronization run."""

    files_copied: int = 0
    """Files whose content was written to the destination"""

    bytes_copied: int = 0
    """Total bytes written to the destination"""

    files_skipped: int = 0
    """Files that were already identical"""

    directories_created: int = 0
    """Destination directories created"""

    entries_removed: int = 0
    """Destination files or directory trees removed"""

    permissions_updated: int = 0
    """Paths whose permission bits were changed"""

    @property
    def changed(self) -> bool:
        """Whether the run modified the destination in any way."""
        return bool(
            self.files_copied
            or self.directories_created
            or self.entries_removed
            or self.permissions_updated
        )

    def merge(self, other: "SyncStats") -> "SyncStats":
        """Add another run's counters to this one and return self."""
        for name, value in asdict(other).items():
            setattr(self, name, getattr(self, name) + value)
        return self

    def to_dict(self) -> dict:
        """Convert stats to a dictionary for JSON output."""
        return asdict(self)
