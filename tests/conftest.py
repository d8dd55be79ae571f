"""
Shared fixtures: in-memory environment and a fake version-control client.
"""

import os

import pytest

from rocket.config.environment import Environment
from rocket.exceptions import VersionControlError


class FakeVersionControl:
    """VersionControl returning canned answers; None makes a query fail."""

    def __init__(
        self,
        commit: str | None = "0123456789abcdef0123456789abcdef01234567",
        tag: str | None = "v1.2.3",
        remote: str | None = "git@github.com:astrocorp42/rocket.git",
    ):
        self.commit = commit
        self.tag = tag
        self.remote = remote
        self.calls: list[str] = []

    def _answer(self, name: str, value: str | None) -> str:
        self.calls.append(name)
        if value is None:
            raise VersionControlError(f"git {name}", "fatal: not a git repository")
        return value

    def current_commit(self) -> str:
        return self._answer("current_commit", self.commit)

    def last_tag(self) -> str:
        return self._answer("last_tag", self.tag)

    def remote_url(self) -> str:
        return self._answer("remote_url", self.remote)


@pytest.fixture
def environ():
    """Empty in-memory environment."""
    return Environment({})


@pytest.fixture
def fake_vcs():
    return FakeVersionControl()


@pytest.fixture
def failing_vcs():
    return FakeVersionControl(commit=None, tag=None, remote=None)


@pytest.fixture
def restore_os_environ():
    """Snapshot os.environ and restore it after the test."""
    saved = dict(os.environ)
    yield os.environ
    os.environ.clear()
    os.environ.update(saved)
