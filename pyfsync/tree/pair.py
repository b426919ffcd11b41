"""Sync pair definition."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass
class SyncPair:
    """A destination/source pair to synchronize.

    Examples:
        >>> pair = SyncPair(destination="/backup/docs", source="/home/user/docs")
        >>> pair.delete
        False
    """

    destination: Path
    """Path that is made to mirror source"""

    source: Path
    """Authoritative path; never modified"""

    delete: bool = False
    """Remove destination entries that are absent from source"""

    alias: Optional[str] = None
    """Optional name used when reporting this pair"""

    def __post_init__(self) -> None:
        # Accept strings for convenience
        self.destination = Path(self.destination)
        self.source = Path(self.source)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SyncPair":
        """Create a sync pair from a dictionary.

        Args:
            data: Mapping with "destination" and "source" keys, and optional
                "delete" and "alias" keys

        Returns:
            SyncPair instance

        Raises:
            ValueError: If required fields are missing or empty
        """
        missing = [key for key in ("destination", "source") if key not in data]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        for key in ("destination", "source"):
            if not isinstance(data[key], str) or not data[key].strip():
                raise ValueError(f"Field '{key}' cannot be empty")

        delete = data.get("delete", False)
        if not isinstance(delete, bool):
            raise ValueError("Field 'delete' must be a boolean")

        return cls(
            destination=data["destination"],
            source=data["source"],
            delete=delete,
            alias=data.get("alias"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the sync pair to a dictionary."""
        return {
            "destination": str(self.destination),
            "source": str(self.source),
            "delete": self.delete,
            "alias": self.alias,
        }

    def __str__(self) -> str:
        arrow = "<=" if self.delete else "<-"
        text = f"{self.destination} {arrow} {self.source}"
        if self.alias:
            return f"{self.alias}: {text}"
        return text
