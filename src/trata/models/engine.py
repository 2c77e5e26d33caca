"""Clock-driven pomodoro timer engine.

The engine records the clock instant at which the current phase is due to end
instead of decrementing a counter on every tick, so irregular polling never
makes it drift. Phase boundaries are resolved lazily whenever the host calls
``query()``; there is no background thread and no stored callback. Completed
phases are reported inline through ``Snapshot.transitions`` and the return
value of ``skip_current_phase()``.

The engine is not thread-safe. Hosts calling it from several threads must
serialize those calls themselves.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

from .config_models import TimerConfig
from .cycling import Phase, next_phase

# Upper bound on phase advances resolved by a single query
MAX_BOUNDARY_CROSSINGS = 10_000

Clock = Callable[[], float]


@dataclass(frozen=True)
class PhaseTransition:
    """A completed phase and the phase that replaced it."""

    completed: Phase
    started: Phase
    skipped: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Read-only observation of the engine returned by ``TimerEngine.query()``."""

    phase: Phase
    remaining: timedelta
    running: bool
    started: bool = True
    sessions_since_break: int = 0
    transitions: tuple[PhaseTransition, ...] = ()

    @property
    def paused(self) -> bool:
        return self.started and not self.running

    @property
    def remaining_seconds(self) -> int:
        """Whole seconds remaining, rounded up for countdown display."""
        return math.ceil(self.remaining.total_seconds())


class TimerEngine:
    """Work/break interval timer.

    States: not started, running, paused. ``start``/``resume`` and ``pause``
    move between them; calling ``start`` while running or ``pause`` while not
    running is a no-op so a single toggle key can drive the engine. When a
    phase completes and ``auto_continue`` is off, the engine pauses with the
    next phase loaded at its full duration.
    """

    def __init__(self, config: TimerConfig | None = None, clock: Clock = time.monotonic):
        self._config = config if config is not None else TimerConfig()
        # Catches configs built with model_construct(), which skips validation
        self._config.ensure_valid()
        self._clock = clock
        self.reset()

    # ----- Read-only state -----
    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def running(self) -> bool:
        return self._running

    @property
    def started(self) -> bool:
        return self._running or self._paused_remaining is not None

    @property
    def sessions_since_break(self) -> int:
        return self._sessions_since_break

    # ----- Commands -----
    def reset(self) -> None:
        """Return to Work at full duration, not started."""
        self._phase = Phase.WORK
        self._sessions_since_break = 0
        self._running = False
        self._phase_end = 0.0
        self._paused_remaining: timedelta | None = None
        self._pending: list[PhaseTransition] = []

    def start(self) -> None:
        """Start or resume the clock. No-op when already running."""
        if self._running:
            return
        remaining = self._paused_remaining
        if remaining is None:
            remaining = self._full_duration()
        self._phase_end = self._clock() + remaining.total_seconds()
        self._running = True

    def resume(self) -> None:
        """Alias of ``start`` for a paused engine."""
        self.start()

    def pause(self) -> None:
        """Stop the clock, keeping the time left in the phase. No-op when not running."""
        if not self._running:
            return
        now = self._clock()
        # A boundary already passed must be crossed, not frozen at zero
        self._resolve_boundaries(now)
        if not self._running:
            return
        self._paused_remaining = timedelta(seconds=max(0.0, self._phase_end - now))
        self._running = False

    def toggle(self) -> bool:
        """Pause when running, otherwise start. Returns whether the clock now runs."""
        if self._running:
            self.pause()
        else:
            self.start()
        return self._running

    def skip_current_phase(self) -> PhaseTransition:
        """End the current phase now, whatever time is left in it."""
        transition = self._advance(skipped=True)
        if self._config.auto_continue:
            self._phase_end = self._clock() + self._full_duration().total_seconds()
            self._running = True
        else:
            self._running = False
        return transition

    def query(self) -> Snapshot:
        """Resolve elapsed phase boundaries and return the current state."""
        now = self._clock()
        if self._running:
            self._resolve_boundaries(now)

        transitions = tuple(self._pending)
        self._pending.clear()

        if self._running:
            remaining = timedelta(seconds=max(0.0, self._phase_end - now))
        elif self._paused_remaining is not None:
            remaining = self._paused_remaining
        else:
            remaining = self._full_duration()

        return Snapshot(
            phase=self._phase,
            remaining=remaining,
            running=self._running,
            started=self.started,
            sessions_since_break=self._sessions_since_break,
            transitions=transitions,
        )

    # ----- Internals -----
    def _full_duration(self) -> timedelta:
        return self._config.duration_for(self._phase)

    def _advance(self, skipped: bool) -> PhaseTransition:
        completed = self._phase
        self._phase, self._sessions_since_break = next_phase(
            completed, self._sessions_since_break, self._config
        )
        self._paused_remaining = self._full_duration()
        return PhaseTransition(completed=completed, started=self._phase, skipped=skipped)

    def _resolve_boundaries(self, now: float) -> None:
        crossings = 0
        while self._running and now >= self._phase_end:
            if crossings >= MAX_BOUNDARY_CROSSINGS:
                # Give up catching up and restart the current phase from now
                self._phase_end = now + self._full_duration().total_seconds()
                break

            boundary = self._phase_end
            self._pending.append(self._advance(skipped=False))
            crossings += 1

            if self._config.auto_continue:
                # Carry the overshoot into the next phase
                self._phase_end = boundary + self._full_duration().total_seconds()
            else:
                self._running = False
