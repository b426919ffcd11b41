"""pyfsync - keep two files or directories in sync."""

from .api import sync, sync_del, sync_del_to, sync_pair, sync_to, synchronize
from .exceptions import (
    FileOverDirectoryError,
    FsyncError,
    SourceNotFoundError,
    SyncConfigError,
    SyncIOError,
)
from .tree import SyncEngine, SyncPair, SyncStats

__all__ = [
    "synchronize",
    "sync",
    "sync_del",
    "sync_to",
    "sync_del_to",
    "sync_pair",
    "SyncEngine",
    "SyncPair",
    "SyncStats",
    "FsyncError",
    "FileOverDirectoryError",
    "SourceNotFoundError",
    "SyncConfigError",
    "SyncIOError",
]
