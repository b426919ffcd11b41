"""Utility functions and constants for pyfsync."""

import os
from pathlib import Path
from typing import Union

# =============================================================================
# Constants for file operations
# =============================================================================

# Buffer size used when comparing file contents (64 KB)
DEFAULT_CHUNK_SIZE: int = 64 * 1024

# Access-mode portion of st_mode that is propagated from source to destination
PERMISSION_MASK: int = 0o777

# Mode for newly created directories; replaced by the source's permissions
# once the directory's content is synchronized
DEFAULT_DIR_MODE: int = 0o755


# =============================================================================
# Size formatting utilities
# =============================================================================


def format_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string (e.g., "1.5 MB", "256 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / 1024 / 1024:.1f} MB"
    else:
        return f"{size_bytes / 1024 / 1024 / 1024:.1f} GB"


# =============================================================================
# Path utilities
# =============================================================================


def destination_for(target_dir: Union[str, Path], source: Union[str, Path]) -> Path:
    """Return the path a source lands at when synced *into* a directory.

    Trailing separators on the source are ignored, so ``"c/d/"`` maps to
    ``target_dir / "d"``.

    Args:
        target_dir: Directory that receives the source
        source: File or directory being synced into target_dir

    Returns:
        Destination path for the source

    Examples:
        >>> destination_for("a", "b").as_posix()
        'a/b'
        >>> destination_for("a", "c/d/").as_posix()
        'a/d'
    """
    name = os.path.basename(os.path.normpath(str(source)))
    if name in ("", os.curdir, os.pardir):
        return Path(target_dir)
    return Path(target_dir) / name
