"""Configuration models for the trata timer.

``TimerConfig`` is the immutable input of the timer engine. ``AppConfig`` wraps
it together with the host-side settings persisted by the config service.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, Field, model_validator

from .cycling import Phase
from .exceptions import ConfigError

_DURATION_FIELDS = ("work_duration", "short_break_duration", "long_break_duration")


class TimerConfig(BaseModel):
    """Durations and cycling rules for one timer engine."""

    model_config = {"frozen": True}

    work_duration: timedelta = Field(
        default=timedelta(minutes=25), description="Length of a Work phase"
    )
    short_break_duration: timedelta = Field(
        default=timedelta(minutes=5), description="Length of a ShortBreak phase"
    )
    long_break_duration: timedelta = Field(
        default=timedelta(minutes=15), description="Length of a LongBreak phase"
    )
    sessions_before_long_break: int = Field(
        default=4, description="Completed Work phases before a LongBreak"
    )
    has_long_break: bool = Field(default=True, description="Whether LongBreak is used")
    auto_continue: bool = Field(
        default=True, description="Chain phases without pausing at each boundary"
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> TimerConfig:
        # ConfigError is not a ValueError, so pydantic lets it propagate unwrapped.
        self.ensure_valid()
        return self

    def ensure_valid(self) -> None:
        """Raise ConfigError unless every duration is positive and the session threshold is >= 1."""
        for name in _DURATION_FIELDS:
            value = getattr(self, name)
            if value <= timedelta(0):
                raise ConfigError(f"{name} must be positive, got {value}")
        if self.sessions_before_long_break < 1:
            raise ConfigError(
                "sessions_before_long_break must be at least 1, "
                f"got {self.sessions_before_long_break}"
            )

    def duration_for(self, phase: Phase) -> timedelta:
        """Get the configured duration of a phase."""
        if phase is Phase.WORK:
            return self.work_duration
        elif phase is Phase.SHORT_BREAK:
            return self.short_break_duration
        else:  # long break
            return self.long_break_duration

    @classmethod
    def from_minutes(
        cls,
        work: float = 25,
        short_break: float = 5,
        long_break: float = 15,
        **kwargs,
    ) -> TimerConfig:
        """Build a config from durations given in minutes."""
        return cls(
            work_duration=timedelta(minutes=work),
            short_break_duration=timedelta(minutes=short_break),
            long_break_duration=timedelta(minutes=long_break),
            **kwargs,
        )


class AppConfig(BaseModel):
    """Persisted trata configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    bell: bool = Field(default=True, description="Ring the terminal bell on phase change")
