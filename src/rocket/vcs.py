"""
Version-control queries used to derive predefined environment variables.

The resolver depends on the VersionControl protocol only, so tests can supply
a fake instead of spawning git.
"""

from __future__ import annotations

import subprocess
from typing import Protocol

from rocket.exceptions import VersionControlError


class VersionControl(Protocol):
    """
    Repository queries needed by the predefined-variable step.

    Implementations raise VersionControlError when a query cannot be answered
    (not a repository, no tags, no origin remote, missing executable).
    """

    def current_commit(self) -> str: ...

    def last_tag(self) -> str: ...

    def remote_url(self) -> str: ...


class GitClient:
    """VersionControl backed by the git executable."""

    def __init__(self, cwd: str | None = None, executable: str = "git", timeout: float | None = None):
        self.cwd = cwd
        self.executable = executable
        # None blocks until git returns
        self.timeout = timeout

    def _run(self, *args: str) -> str:
        cmd = [self.executable, *args]
        command = " ".join(cmd)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.cwd,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise VersionControlError(command, stderr or f"exit status {e.returncode}") from e
        except subprocess.TimeoutExpired as e:
            raise VersionControlError(command, f"timed out after {e.timeout}s") from e
        except OSError as e:
            raise VersionControlError(command, str(e)) from e
        return result.stdout.strip()

    def current_commit(self) -> str:
        return self._run("rev-parse", "HEAD")

    def last_tag(self) -> str:
        return self._run("describe", "--tags", "--abbrev=0")

    def remote_url(self) -> str:
        return self._run("config", "--get", "remote.origin.url")
