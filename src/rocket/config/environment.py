"""
Process environment state.

Resolution reads and conditionally writes environment variables. The state is
passed explicitly so tests can substitute an in-memory mapping for os.environ.
"""

import os
from collections.abc import Iterator, MutableMapping

from rocket.exceptions import EnvironmentWriteError


class Environment:
    """Mutable view over a string mapping, defaulting to the real process environment."""

    def __init__(self, environ: MutableMapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    @property
    def mapping(self) -> MutableMapping[str, str]:
        return self._environ

    def get(self, key: str, default: str = "") -> str:
        """Return the value of key, or default when it is not present."""
        return self._environ.get(key, default)

    def is_set(self, key: str) -> bool:
        """True when key is present with a non-empty value."""
        return self._environ.get(key, "") != ""

    def set(self, key: str, value: str) -> None:
        """
        Assign key=value.

        Raises:
            EnvironmentWriteError: If the underlying mapping rejects the write
                (os.environ raises ValueError/OSError for names containing '='
                or values containing NUL bytes).
        """
        try:
            self._environ[key] = value
        except (ValueError, OSError) as e:
            raise EnvironmentWriteError(key, str(e)) from e

    def __contains__(self, key: str) -> bool:
        return key in self._environ

    def __iter__(self) -> Iterator[str]:
        return iter(self._environ)

    def __repr__(self) -> str:
        source = "os.environ" if self._environ is os.environ else f"{len(self._environ)} vars"
        return f"Environment({source})"
