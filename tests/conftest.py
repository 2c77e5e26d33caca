"""Shared test fixtures and configuration.

Provides a controllable clock for the timer engine and isolates tests from
the real config and log directories.
"""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import patch

import pytest

from trata.models.config_models import TimerConfig
from trata.models.engine import TimerEngine


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_engine(clock):
    """Build an engine on the fake clock. Durations are given in seconds."""

    def _make(
        work: float = 60,
        short: float = 60,
        long: float = 90,
        sessions: int = 2,
        has_long_break: bool = True,
        auto_continue: bool = False,
    ) -> TimerEngine:
        config = TimerConfig(
            work_duration=timedelta(seconds=work),
            short_break_duration=timedelta(seconds=short),
            long_break_duration=timedelta(seconds=long),
            sessions_before_long_break=sessions,
            has_long_break=has_long_break,
            auto_continue=auto_continue,
        )
        return TimerEngine(config, clock=clock)

    return _make


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Send application logs to a temporary directory."""
    import logging

    import trata.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("trata").handlers.clear()
    logging.getLogger("trata").propagate = True
    with patch("trata.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    logging.getLogger("trata").handlers.clear()
    logging.getLogger("trata").propagate = True


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from trata.services.config_service import get_config_service

    get_config_service.cache_clear()
    with patch(
        "trata.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        yield get_config_service()
    get_config_service.cache_clear()
