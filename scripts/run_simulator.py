#!/usr/bin/env python
"""Launch the simulator API without requiring installation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import uvicorn


def main() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_path = repo_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    from simulator.config import SimulatorSettings

    settings = SimulatorSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(
        "simulator.app:create_app",
        host="0.0.0.0",
        port=8000,
        factory=True,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
