"""Exceptions raised by pyfsync."""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class FsyncError(Exception):
    """Base exception for all synchronization errors."""


class FileOverDirectoryError(FsyncError):
    """Raised when a file would replace a non-empty destination directory.

    This is checked once, before any change is made to the destination.
    """

    def __init__(self, destination: PathLike, source: PathLike):
        self.destination = Path(destination)
        self.source = Path(source)
        super().__init__(
            "trying to overwrite a non-empty directory with a file: "
            f"{self.destination} <- {self.source}"
        )


class SourceNotFoundError(FsyncError):
    """Raised when the source path does not exist."""

    def __init__(self, source: PathLike):
        self.source = Path(source)
        super().__init__(f"Source does not exist: {self.source}")


class SyncIOError(FsyncError):
    """Raised when a filesystem operation fails during synchronization.

    The original ``OSError`` is always available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        errno: Optional[int] = None,
    ):
        self.path = Path(path) if path is not None else None
        self.errno = errno
        super().__init__(message)

    @classmethod
    def from_os_error(cls, error: OSError) -> "SyncIOError":
        """Build a SyncIOError describing an OSError."""
        path = error.filename
        reason = error.strerror or str(error)
        if path is not None:
            message = f"{reason}: {path}"
        else:
            message = reason
        return cls(message, path=path, errno=error.errno)


class SyncConfigError(FsyncError):
    """Raised when sync configuration is invalid."""
