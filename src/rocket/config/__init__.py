"""
Configuration management.

Locating and decoding .rocket.toml, predefined git variables, env merging.
"""

from rocket.config.environment import Environment
from rocket.config.expand import expand_env
from rocket.config.loader import get_config, parse_config
from rocket.config.locator import DEFAULT_CONFIG_FILE, find_config_file
from rocket.config.predefined import PREDEFINED_ENV, is_predefined, repo_slug, set_predefined_env
from rocket.config.resolver import resolve_env
from rocket.config.schema import Config, default_config

__all__ = [
    "get_config",
    "parse_config",
    "find_config_file",
    "expand_env",
    "set_predefined_env",
    "resolve_env",
    "repo_slug",
    "is_predefined",
    "default_config",
    "Config",
    "Environment",
    "DEFAULT_CONFIG_FILE",
    "PREDEFINED_ENV",
]
