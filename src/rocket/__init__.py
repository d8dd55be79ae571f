"""
Rocket - automated software delivery as fast and easy as possible.
"""

__version__ = "0.1.0"

from rocket.config import Config, Environment, expand_env, find_config_file, get_config

# Exceptions
from rocket.exceptions import (
    ConfigDecodeError,
    ConfigNotFoundError,
    ConfigReadError,
    ConfigurationError,
    EnvironmentWriteError,
    RocketError,
    VersionControlError,
)

# Logging utilities
from rocket.utils.logging import get_logger, setup_logging

__all__ = [
    # Config
    "get_config",
    "find_config_file",
    "expand_env",
    "Config",
    "Environment",
    # Logging
    "setup_logging",
    "get_logger",
    # Exceptions
    "RocketError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigDecodeError",
    "ConfigReadError",
    "EnvironmentWriteError",
    "VersionControlError",
]
