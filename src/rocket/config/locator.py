"""
Configuration file lookup.
"""

from pathlib import Path

DEFAULT_CONFIG_FILE = ".rocket.toml"


def _file_exists(path: str) -> bool:
    # Any stat failure, permission errors included, counts as missing
    try:
        Path(path).stat()
    except OSError:
        return False
    return True


def find_config_file(explicit_path: str = "") -> str:
    """
    Return the path of the configuration file to use.

    An explicit path is returned only if it exists; it never falls back to the
    default file. Without an explicit path, the default file in the working
    directory is used if present. Parent directories are not searched.

    Args:
        explicit_path: Path given by the user, or "" for the default

    Returns:
        Path of the configuration file, or "" if none was found
    """
    if explicit_path:
        return explicit_path if _file_exists(explicit_path) else ""

    if _file_exists(DEFAULT_CONFIG_FILE):
        return DEFAULT_CONFIG_FILE

    return ""
