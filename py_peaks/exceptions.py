"""Exceptions raised by skyline generation."""


class ConfigError(ValueError):
    """Raised when a mountain configuration cannot produce a skyline."""
