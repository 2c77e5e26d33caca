"""Tests for TimerConfig and AppConfig."""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from trata.models.config_models import AppConfig, TimerConfig
from trata.models.cycling import Phase
from trata.models.exceptions import ConfigError, TrataError


class TestTimerConfigDefaults:
    def test_default_values(self):
        """Default configuration matches standard Pomodoro timings."""
        config = TimerConfig()

        assert config.work_duration == timedelta(minutes=25)
        assert config.short_break_duration == timedelta(minutes=5)
        assert config.long_break_duration == timedelta(minutes=15)
        assert config.sessions_before_long_break == 4
        assert config.has_long_break is True
        assert config.auto_continue is True

    def test_from_minutes(self):
        config = TimerConfig.from_minutes(
            work=50, short_break=10, long_break=30, sessions_before_long_break=2
        )

        assert config.work_duration == timedelta(minutes=50)
        assert config.short_break_duration == timedelta(minutes=10)
        assert config.long_break_duration == timedelta(minutes=30)
        assert config.sessions_before_long_break == 2

    def test_numbers_are_seconds(self):
        config = TimerConfig(work_duration=90)
        assert config.work_duration == timedelta(seconds=90)

    def test_iso_duration_strings(self):
        config = TimerConfig(work_duration="PT50M")
        assert config.work_duration == timedelta(minutes=50)

    def test_is_frozen(self):
        config = TimerConfig()
        with pytest.raises(ValidationError):
            config.work_duration = timedelta(minutes=1)

    def test_json_dump_loads_back(self):
        config = TimerConfig.from_minutes(work=1.5, has_long_break=False)
        assert TimerConfig.model_validate_json(config.model_dump_json()) == config


class TestTimerConfigValidation:
    @pytest.mark.parametrize(
        "field", ["work_duration", "short_break_duration", "long_break_duration"]
    )
    @pytest.mark.parametrize("value", [timedelta(0), timedelta(seconds=-5)])
    def test_non_positive_duration_rejected(self, field, value):
        with pytest.raises(ConfigError, match=field):
            TimerConfig(**{field: value})

    def test_zero_sessions_rejected(self):
        with pytest.raises(ConfigError, match="sessions_before_long_break"):
            TimerConfig(sessions_before_long_break=0)

    def test_config_error_is_a_trata_error(self):
        with pytest.raises(TrataError):
            TimerConfig.from_minutes(work=0)

    def test_wrong_type_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            TimerConfig(work_duration="not a duration")


class TestDurationFor:
    def test_each_phase(self):
        config = TimerConfig.from_minutes(work=1, short_break=2, long_break=3)

        assert config.duration_for(Phase.WORK) == timedelta(minutes=1)
        assert config.duration_for(Phase.SHORT_BREAK) == timedelta(minutes=2)
        assert config.duration_for(Phase.LONG_BREAK) == timedelta(minutes=3)


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.timer == TimerConfig()
        assert config.bell is True

    def test_nested_invalid_timer_rejected(self):
        with pytest.raises(ConfigError):
            AppConfig.model_validate({"timer": {"work_duration": 0}})
