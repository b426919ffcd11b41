"""Library entry points for synchronizing files and directories.

After::

    stats = pyfsync.sync("~/dst", ".")

every file and directory in the current directory is copied to ``~/dst``
with the same permissions. Later calls only copy changed or new files.
``sync_del`` additionally deletes destination entries that the source
lacks.

The filesystem is the only shared state. Nothing is locked or
snapshotted, and a failed run leaves already-applied changes in place.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import config
from .exceptions import SourceNotFoundError, SyncIOError
from .tree.classifier import PathNode
from .tree.comparator import FileComparator
from .tree.engine import ProgressCallback, SyncEngine
from .tree.guard import check_guard
from .tree.pair import SyncPair
from .tree.stats import SyncStats
from .utils import destination_for

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def synchronize(
    destination: PathLike,
    source: PathLike,
    delete_extraneous: bool = False,
    *,
    chunk_size: Optional[int] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> SyncStats:
    """Make destination mirror source.

    Args:
        destination: Path to update; may not exist yet
        source: Existing file or directory to copy from
        delete_extraneous: Also remove destination entries absent from source
        chunk_size: Comparison buffer size (defaults to the configured one)
        progress_callback: Called with each SyncDecision before it is applied

    Returns:
        SyncStats describing the work done

    Raises:
        SourceNotFoundError: If source does not exist
        FileOverDirectoryError: If destination is a non-empty directory and
            source is a file; nothing is changed
        SyncIOError: If any filesystem operation fails
    """
    destination = Path(destination)
    source = Path(source)
    comparator = FileComparator(config.resolve_chunk_size(chunk_size))

    try:
        if not PathNode.from_path(source).exists:
            raise SourceNotFoundError(source)
        check_guard(destination, source)

        engine = SyncEngine(
            delete_extraneous=delete_extraneous,
            comparator=comparator,
            progress_callback=progress_callback,
        )
        stats = engine.sync(destination, source)
    except OSError as e:
        raise SyncIOError.from_os_error(e) from e

    logger.debug(f"Synchronized {destination} <- {source}: {stats.to_dict()}")
    return stats


def sync(destination: PathLike, source: PathLike, **kwargs) -> SyncStats:
    """Copy source into destination without deleting anything extra."""
    return synchronize(destination, source, False, **kwargs)


def sync_del(destination: PathLike, source: PathLike, **kwargs) -> SyncStats:
    """Make destination an exact copy of source, deleting extra entries."""
    return synchronize(destination, source, True, **kwargs)


def sync_to(
    target_dir: PathLike,
    *sources: PathLike,
    delete_extraneous: bool = False,
    **kwargs,
) -> SyncStats:
    """Sync each source *into* target_dir.

    ``sync_to("a", "b", "c/d")`` is equivalent to ``sync("a/b", "b")``
    followed by ``sync("a/d", "c/d")``. Processing stops at the first
    error.

    Args:
        target_dir: Directory receiving the sources
        *sources: Files or directories to sync
        delete_extraneous: Use deletion mode for every source
        **kwargs: Passed to synchronize

    Returns:
        Combined SyncStats for all sources
    """
    total = SyncStats()
    for source in sources:
        destination = destination_for(target_dir, source)
        total.merge(synchronize(destination, source, delete_extraneous, **kwargs))
    return total


def sync_del_to(target_dir: PathLike, *sources: PathLike, **kwargs) -> SyncStats:
    """Like sync_to, but deletes extra entries in each destination."""
    return sync_to(target_dir, *sources, delete_extraneous=True, **kwargs)


def sync_pair(pair: SyncPair, **kwargs) -> SyncStats:
    """Synchronize a configured SyncPair."""
    return synchronize(pair.destination, pair.source, pair.delete, **kwargs)
