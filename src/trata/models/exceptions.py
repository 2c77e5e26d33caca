"""Custom exceptions for trata."""


class TrataError(Exception):
    """Base exception for all trata errors."""


class ConfigError(TrataError):
    """Raised when a timer configuration is malformed (non-positive durations, zero session threshold)."""
