"""trata - pomodoro interval timer core with a terminal host."""

from trata.models import (
    ConfigError,
    Phase,
    PhaseTransition,
    Snapshot,
    TimerConfig,
    TimerEngine,
    TrataError,
    next_phase,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Phase",
    "PhaseTransition",
    "Snapshot",
    "TimerConfig",
    "TimerEngine",
    "TrataError",
    "next_phase",
    "__version__",
]
