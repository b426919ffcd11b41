"""Tree synchronization engine for pyfsync."""

from .classifier import PathKind, PathNode, classify
from .comparator import FileComparator, SyncAction, SyncDecision
from .config import load_sync_pairs_from_json
from .engine import ProgressCallback, SyncEngine
from .guard import check_guard, would_overwrite_directory
from .operations import SyncOperations
from .pair import SyncPair
from .permissions import sync_permissions
from .stats import SyncStats

__all__ = [
    "SyncEngine",
    "SyncOperations",
    "SyncPair",
    "SyncStats",
    "ProgressCallback",
    "load_sync_pairs_from_json",
    "PathKind",
    "PathNode",
    "classify",
    "FileComparator",
    "SyncAction",
    "SyncDecision",
    "check_guard",
    "would_overwrite_directory",
    "sync_permissions",
]
