"""Tests for ConfigService persistence and dotted-key access."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import patch

import pytest

from trata.models.config_models import AppConfig, TimerConfig
from trata.models.exceptions import ConfigError
from trata.services.config_service import ConfigService


def test_missing_file_gives_defaults(tmp_config):
    assert tmp_config.load_config() == AppConfig()
    assert not tmp_config.config_path.exists()


def test_config_dir_is_created(tmp_config):
    assert tmp_config.config_dir.is_dir()


def test_save_then_load(tmp_path):
    with patch(
        "trata.services.config_service.user_config_dir", return_value=str(tmp_path)
    ):
        first = ConfigService()
        first.set("timer.sessions_before_long_break", 3)

        second = ConfigService()
        assert second.config.timer.sessions_before_long_break == 3


def test_set_duration_in_seconds(tmp_config):
    tmp_config.set("timer.work_duration", 1500)

    assert tmp_config.config.timer.work_duration == timedelta(seconds=1500)
    assert tmp_config.config_path.exists()


def test_set_bool(tmp_config):
    tmp_config.set("bell", False)
    assert tmp_config.get("bell") is False


def test_get_nested(tmp_config):
    assert tmp_config.get("timer.long_break_duration") == timedelta(minutes=15)
    assert tmp_config.get("timer") == TimerConfig()


@pytest.mark.parametrize("key", ["nope", "timer.nope", "bell.deeper"])
def test_unknown_key(tmp_config, key):
    with pytest.raises(ConfigError, match="Unknown configuration key"):
        tmp_config.get(key)
    with pytest.raises(ConfigError):
        tmp_config.set(key, 1)


def test_invalid_value_leaves_config_unchanged(tmp_config):
    with pytest.raises(ConfigError):
        tmp_config.set("timer.work_duration", 0)
    with pytest.raises(ConfigError):
        tmp_config.set("timer.sessions_before_long_break", "many")

    assert tmp_config.config == AppConfig()
    assert not tmp_config.config_path.exists()


def test_corrupt_file_raises_config_error(tmp_config):
    tmp_config.config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid config file"):
        tmp_config.load_config()


def test_invalid_durations_in_file_raise_config_error(tmp_config):
    tmp_config.config_path.write_text('{"timer": {"work_duration": 0}}', encoding="utf-8")

    with pytest.raises(ConfigError):
        tmp_config.load_config()


def test_reset(tmp_config):
    tmp_config.set("timer.auto_continue", False)
    tmp_config.reset_config()

    assert tmp_config.config == AppConfig()
    assert AppConfig.model_validate_json(tmp_config.config_path.read_text()) == AppConfig()


def test_saved_file_is_indented_json(tmp_config):
    tmp_config.set("bell", False)

    lines = tmp_config.config_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "{"
    assert lines[1].startswith('    "timer": {')
    assert any(line.startswith('        "work_duration": ') for line in lines)
