"""Pomodoro phase cycling.

Decides which phase follows the current one. Knows nothing about time: it is
only consulted when a phase has expired or been skipped.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config_models import TimerConfig


class Phase(str, Enum):
    """Activity the timer currently represents."""

    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        """Human readable phase name."""
        return self.value.replace("_", " ").title()

    @property
    def is_break(self) -> bool:
        return self is not Phase.WORK


def next_phase(
    current: Phase, sessions_since_break: int, config: TimerConfig
) -> tuple[Phase, int]:
    """Determine the phase after ``current`` and the updated session count.

    Completing Work counts a session. The session that reaches
    ``config.sessions_before_long_break`` earns a LongBreak (when enabled) and
    resets the count; every other Work is followed by a ShortBreak.
    """
    if current is Phase.WORK:
        completed = sessions_since_break + 1
        if completed == config.sessions_before_long_break:
            if config.has_long_break:
                return Phase.LONG_BREAK, 0
            # No long breaks: wrap so the count stays within the threshold
            return Phase.SHORT_BREAK, 0
        return Phase.SHORT_BREAK, completed

    elif current is Phase.SHORT_BREAK:
        return Phase.WORK, sessions_since_break

    # After a long break a new cycle starts
    return Phase.WORK, 0
