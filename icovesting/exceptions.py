"""Exceptions raised by the deployment helpers."""


class ICOVestingError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(ICOVestingError):
    """The project configuration is missing or invalid."""
