"""Loading sync pairs from JSON configuration files."""

import json
import logging
from pathlib import Path
from typing import Union

from ..exceptions import SyncConfigError
from .pair import SyncPair

logger = logging.getLogger(__name__)


def load_sync_pairs_from_json(path: Union[str, Path]) -> list[SyncPair]:
    """Load sync pairs from a JSON file.

    The file holds either a list of pair objects or an object with a
    ``"pairs"`` list::

        [
            {"destination": "/backup/docs", "source": "~/docs", "delete": true},
            {"destination": "/backup/pics", "source": "~/pics", "alias": "pics"}
        ]

    Args:
        path: JSON file to read

    Returns:
        List of SyncPair objects, in file order

    Raises:
        SyncConfigError: If the file cannot be read or is malformed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SyncConfigError(f"Sync pairs file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SyncConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise SyncConfigError(f"Cannot read {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("pairs")
    if not isinstance(data, list):
        raise SyncConfigError(
            f"{path} must contain a list of sync pairs or an object with 'pairs'"
        )

    pairs: list[SyncPair] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise SyncConfigError(f"Sync pair #{index + 1} must be an object")
        try:
            pair = SyncPair.from_dict(item)
        except ValueError as e:
            raise SyncConfigError(f"Sync pair #{index + 1}: {e}") from e
        pair.source = pair.source.expanduser()
        pair.destination = pair.destination.expanduser()
        pairs.append(pair)

    logger.debug(f"Loaded {len(pairs)} sync pair(s) from {path}")
    return pairs
