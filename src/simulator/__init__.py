"""HTTP front-end of the ballot simulator."""

from .app import create_app
from .config import SimulatorSettings

__all__ = ["SimulatorSettings", "create_app"]
