"""Timer core: phase cycling, engine and configuration models."""

from .config_models import AppConfig, TimerConfig
from .cycling import Phase, next_phase
from .engine import PhaseTransition, Snapshot, TimerEngine
from .exceptions import ConfigError, TrataError

__all__ = [
    "AppConfig",
    "ConfigError",
    "Phase",
    "PhaseTransition",
    "Snapshot",
    "TimerConfig",
    "TimerEngine",
    "TrataError",
    "next_phase",
]
