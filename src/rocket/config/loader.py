"""
Configuration file loading.

Locate .rocket.toml, decode it, then export predefined and user-declared
environment variables.
"""

import tomllib
from pathlib import Path

from rocket.config.environment import Environment
from rocket.config.locator import DEFAULT_CONFIG_FILE, find_config_file
from rocket.config.predefined import set_predefined_env
from rocket.config.resolver import resolve_env
from rocket.config.schema import Config
from rocket.exceptions import ConfigDecodeError, ConfigNotFoundError, ConfigReadError
from rocket.utils.logging import get_logger
from rocket.vcs import VersionControl

logger = get_logger("rocket.config.loader")


def parse_config(path: str | Path) -> Config:
    """
    Read and decode a configuration file.

    Args:
        path: Path to a TOML configuration file

    Returns:
        Decoded Config

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigDecodeError: If the content is not valid TOML or has the wrong shape
    """
    path = Path(path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigReadError(f"Cannot read configuration file {path}: {e}", path=str(path)) from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigDecodeError(f"{path}: {e}", path=str(path)) from e

    try:
        return Config.from_dict(data)
    except ValueError as e:
        raise ConfigDecodeError(f"{path}: {e}", path=str(path)) from e


def get_config(
    file: str = "",
    *,
    environ: Environment | None = None,
    vcs: VersionControl | None = None,
) -> Config:
    """
    Resolve the rocket configuration.

    The environment is updated in place: predefined variables are injected
    first, then the config's env table is expanded and merged.

    Args:
        file: Explicit configuration path, or "" for .rocket.toml in the working directory
        environ: Environment to update (default: process environment)
        vcs: Repository queries for predefined variables (default: git)

    Returns:
        Resolved Config

    Raises:
        ConfigNotFoundError: If no configuration file is found
        ConfigReadError: If the file cannot be read
        ConfigDecodeError: If the file content is invalid
        EnvironmentWriteError: If the environment rejects an assignment
    """
    if environ is None:
        environ = Environment()

    config_path = find_config_file(file)
    if not config_path:
        if not file:
            raise ConfigNotFoundError(
                f'{DEFAULT_CONFIG_FILE} configuration file not found. Please run "rocket init"',
                path=DEFAULT_CONFIG_FILE,
            )
        raise ConfigNotFoundError(f"{file} file not found.", path=file)

    logger.debug(f"Loading configuration from {config_path}")
    config = parse_config(config_path)

    set_predefined_env(environ, vcs)
    resolve_env(config, environ)

    return config
