"""Runtime settings of the simulator service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from roster.assembly import PROCESS_ID

__all__ = ["SimulatorSettings"]

ENV_PREFIX = "SIMULADOR_"
_TRUE_VALUES = {"1", "true", "t", "yes", "y", "si", "sí"}


@dataclass(slots=True)
class SimulatorSettings:
    dataset_path: Path = Path("data/candidatos-eg2026.json")
    analytics_db_path: Path = Path("data/analytics.db")
    analytics_enabled: bool = True
    process_id: int = PROCESS_ID
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SimulatorSettings":
        """Build settings from ``SIMULADOR_*`` variables, falling back to defaults.

        Raises
        ------
        ValueError
            If ``SIMULADOR_PROCESS_ID`` is not an integer.
        """

        env = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str) -> str | None:
            value = env.get(f"{ENV_PREFIX}{name}")
            return value.strip() if value and value.strip() else None

        raw_process = read("PROCESS_ID")
        try:
            process_id = int(raw_process) if raw_process else defaults.process_id
        except ValueError as exc:
            raise ValueError(f"{ENV_PREFIX}PROCESS_ID must be an integer, got {raw_process!r}") from exc

        raw_enabled = read("ANALYTICS_ENABLED")
        return cls(
            dataset_path=Path(read("DATASET_PATH") or defaults.dataset_path),
            analytics_db_path=Path(read("ANALYTICS_DB_PATH") or defaults.analytics_db_path),
            analytics_enabled=(
                raw_enabled.lower() in _TRUE_VALUES if raw_enabled else defaults.analytics_enabled
            ),
            process_id=process_id,
            log_level=(read("LOG_LEVEL") or defaults.log_level).upper(),
        )
