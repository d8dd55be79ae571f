"""
Shell-style environment variable expansion.

Supports $NAME and ${NAME}. "$$" is an escaped literal dollar sign.
"""

import re

from rocket.config.environment import Environment

# Sentinel bound to "$" so that "$$" survives expansion as a literal dollar
DOLLAR_SENTINEL = "ROCKET_DOLLAR"

# Alternatives, in order:
#   ${name}  - anything up to the closing brace (empty name is dropped)
#   ${       - unterminated brace, dropped
#   $c       - one-character special parameter (* # $ @ ! ? - or a digit)
#   $name    - run of alphanumerics and underscores
_VAR_PATTERN = re.compile(
    r"\$(?:\{(?P<braced>[^}]*)\}|(?P<open>\{)|(?P<special>[*#$@!?\-0-9])|(?P<name>[A-Za-z0-9_]+))"
)


def _substitute(value: str, environ: Environment) -> str:
    def replace_var(match: re.Match[str]) -> str:
        if match.group("open") is not None:
            return ""
        name = match.group("braced")
        if name is None:
            name = match.group("special") or match.group("name")
        if not name:
            return ""
        return environ.get(name)

    return _VAR_PATTERN.sub(replace_var, value)


def expand_env(value: str, environ: Environment | None = None) -> str:
    """
    Expand environment variable references in a string.

    "$$" is rewritten to a reference to a sentinel variable bound to "$",
    so "$$HOME" expands to the literal "$HOME". Unset variables expand to
    an empty string; a "$" that does not start a reference is kept.

    Args:
        value: String to expand
        environ: Environment to read from (default: process environment)

    Returns:
        Expanded string
    """
    if environ is None:
        environ = Environment()

    environ.set(DOLLAR_SENTINEL, "$")
    if "$" not in value:
        return value
    return _substitute(value.replace("$$", "${" + DOLLAR_SENTINEL + "}"), environ)
