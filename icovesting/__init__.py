"""Configuration and logging for the ICOTokenVesting brownie project."""

from icovesting.exceptions import ConfigError, ICOVestingError
from icovesting.log import configure_logging
from icovesting.settings import ProjectSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ICOVestingError",
    "ProjectSettings",
    "configure_logging",
    "load_settings",
]
