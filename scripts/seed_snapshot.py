#!/usr/bin/env python
"""
Write the bundled sample employees and users to a JSON snapshot file.

Usage:
    python scripts/seed_snapshot.py [path]

The path defaults to SNAPSHOT_PATH, then ``data/snapshot.json``. Point the CLI
at the result with ``talent-compass --snapshot <path> dashboard``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from talent_compass.core.config import settings
from talent_compass.core.store import RecordStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("talent_compass.seed_snapshot")

DEFAULT_SNAPSHOT = Path("data") / "snapshot.json"


def main(argv: list[str]) -> None:
    target = Path(argv[0]) if argv else (settings.SNAPSHOT_PATH or DEFAULT_SNAPSHOT)
    store = RecordStore.from_sample()
    written = store.write_snapshot_file(target)
    logger.info(
        "Wrote %d employees and %d users to %s",
        len(store.employees()),
        len(store.users()),
        written,
    )


if __name__ == "__main__":
    main(sys.argv[1:])
