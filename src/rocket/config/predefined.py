"""
Predefined environment variables derived from the git repository.
"""

from collections.abc import Callable

from rocket.config.environment import Environment
from rocket.exceptions import VersionControlError
from rocket.utils.logging import get_logger
from rocket.vcs import GitClient, VersionControl

logger = get_logger("rocket.config.predefined")

PREDEFINED_ENV = (
    "ROCKET_COMMIT_HASH",
    "ROCKET_LAST_TAG",
    "ROCKET_GIT_REPO",
)


def is_predefined(key: str) -> bool:
    """True if key is one of the predefined variable names."""
    return key in PREDEFINED_ENV


def repo_slug(url: str) -> str:
    """
    Derive an "owner/repo" slug from a remote URL.

    Works for SSH-style (git@host:owner/repo.git) and HTTPS-style
    (https://host/owner/repo.git) URLs.

    Raises:
        ValueError: If the URL has fewer than two path segments
    """
    path = url.strip().split(":")[-1]
    parts = path.split("/")
    if len(parts) < 2:
        raise ValueError(f"cannot derive owner/repo from remote URL {url!r}")
    return "/".join(parts[-2:]).removesuffix(".git")


def set_predefined_env(environ: Environment | None = None, vcs: VersionControl | None = None) -> None:
    """
    Inject the predefined variables that are not already set.

    A failed git query leaves the variable set to "" and is logged at debug
    level; it is not an error.

    Args:
        environ: Environment to update (default: process environment)
        vcs: Repository queries (default: git in the working directory)

    Raises:
        EnvironmentWriteError: If the environment rejects an assignment
    """
    if environ is None:
        environ = Environment()
    if vcs is None:
        vcs = GitClient()

    queries: dict[str, Callable[[], str]] = {
        "ROCKET_COMMIT_HASH": vcs.current_commit,
        "ROCKET_LAST_TAG": vcs.last_tag,
        "ROCKET_GIT_REPO": lambda: repo_slug(vcs.remote_url()),
    }

    for key in PREDEFINED_ENV:
        if environ.is_set(key):
            continue
        value = ""
        try:
            value = queries[key]().strip()
        except (VersionControlError, ValueError) as e:
            logger.debug(f"error setting env var {key}: {e}")
        environ.set(key, value)
