"""Loading of the static candidate snapshot.

The snapshot is a JSON array of registry rows generated ahead of time from the
registry feed; the simulator reads it once per process and never mutates it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

__all__ = ["load_snapshot"]

LOGGER = logging.getLogger(__name__)


def load_snapshot(path: Path | str) -> List[Dict[str, Any]]:
    """Read the candidate snapshot stored at ``path``.

    Raises
    ------
    FileNotFoundError
        If the snapshot does not exist.
    ValueError
        If the file does not contain a JSON array of objects.
    """

    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError(f"Candidate snapshot {path} must contain a JSON array.")
    rows = [row for row in payload if isinstance(row, dict)]
    if len(rows) != len(payload):
        LOGGER.warning("Ignored %d non-object entries in %s", len(payload) - len(rows), path)
    LOGGER.info("Loaded %d candidate rows from %s", len(rows), path)
    return rows
