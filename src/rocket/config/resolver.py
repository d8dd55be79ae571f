"""
Merge the configuration's env table into the process environment.
"""

from rocket.config.environment import Environment
from rocket.config.expand import expand_env
from rocket.config.predefined import is_predefined
from rocket.config.schema import Config


def resolve_env(config: Config, environ: Environment | None = None) -> None:
    """
    Expand and export the variables declared in config.env.

    Keys are uppercased. A variable already set by the caller is kept, except
    for predefined variables, which the configuration may always override.
    Iteration order over env is not significant.

    Args:
        config: Decoded configuration
        environ: Environment to update (default: process environment)

    Raises:
        EnvironmentWriteError: If the environment rejects an assignment
    """
    if environ is None:
        environ = Environment()

    for key, value in config.env.items():
        key = key.upper()
        if not environ.is_set(key) or is_predefined(key):
            environ.set(key, expand_env(value, environ))
