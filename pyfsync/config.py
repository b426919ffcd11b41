"""Runtime configuration for pyfsync.

Settings come from environment variables, falling back to defaults:

- ``PYFSYNC_CHUNK_SIZE``: comparison buffer size in bytes
- ``PYFSYNC_PAIRS_FILE``: default sync pairs file for ``pyfsync run``
- ``XDG_CONFIG_HOME``: base of the configuration directory
"""

import os
from pathlib import Path
from typing import Optional

from .exceptions import SyncConfigError
from .utils import DEFAULT_CHUNK_SIZE

CHUNK_SIZE_ENV = "PYFSYNC_CHUNK_SIZE"
PAIRS_FILE_ENV = "PYFSYNC_PAIRS_FILE"
PAIRS_FILE_NAME = "pairs.json"


class Config:
    """Reads pyfsync settings from the environment."""

    @property
    def chunk_size(self) -> int:
        """Buffer size used by the content comparator."""
        value = os.environ.get(CHUNK_SIZE_ENV)
        if not value:
            return DEFAULT_CHUNK_SIZE
        try:
            chunk_size = int(value)
        except ValueError as e:
            raise SyncConfigError(
                f"{CHUNK_SIZE_ENV} must be an integer, got {value!r}"
            ) from e
        if chunk_size < 1:
            raise SyncConfigError(f"{CHUNK_SIZE_ENV} must be positive")
        return chunk_size

    def get_config_dir(self) -> Path:
        """Return the pyfsync configuration directory."""
        base = os.environ.get("XDG_CONFIG_HOME")
        if base:
            return Path(base) / "pyfsync"
        return Path.home() / ".config" / "pyfsync"

    def get_pairs_file(self) -> Path:
        """Return the default sync pairs file."""
        value = os.environ.get(PAIRS_FILE_ENV)
        if value:
            return Path(value).expanduser()
        return self.get_config_dir() / PAIRS_FILE_NAME

    def resolve_chunk_size(self, chunk_size: Optional[int]) -> int:
        """Return an explicit chunk size, or the configured one."""
        if chunk_size is None:
            return self.chunk_size
        if chunk_size < 1:
            raise SyncConfigError("Chunk size must be positive")
        return chunk_size


config = Config()
