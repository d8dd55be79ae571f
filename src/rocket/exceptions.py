"""
Rocket exception hierarchy.

All domain-specific exceptions inherit from RocketError, so the CLI can catch
any resolution failure with a single base class while callers can still handle
individual failures.

Hierarchy::

    RocketError
    ├── ConfigurationError        - config lookup, reading, decoding
    │   ├── ConfigNotFoundError   - no configuration file could be resolved
    │   ├── ConfigDecodeError     - malformed or mis-shaped content
    │   └── ConfigReadError       - file exists but cannot be read
    ├── EnvironmentWriteError     - process refused an environment mutation
    └── VersionControlError       - a git query failed (absorbed during resolution)
"""

from __future__ import annotations


class RocketError(Exception):
    """Base exception for all Rocket errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Configuration -----------------------------------------------------------


class ConfigurationError(RocketError):
    """Raised when configuration lookup, reading, or decoding fails."""


class ConfigNotFoundError(ConfigurationError):
    """Raised when no configuration file can be resolved."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message, details={"path": path})
        self.path = path


class ConfigDecodeError(ConfigurationError):
    """Raised when the configuration content is not well-formed or has the wrong shape."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message, details={"path": path})
        self.path = path


class ConfigReadError(ConfigurationError):
    """Raised when the configuration file cannot be read after it was located."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message, details={"path": path})
        self.path = path


# --- Environment -------------------------------------------------------------


class EnvironmentWriteError(RocketError):
    """Raised when the process environment refuses a variable assignment.

    This is fatal: resolution stops and the error reaches the caller.
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"Cannot set environment variable '{key}': {message}", details={"key": key})
        self.key = key


# --- Version control ---------------------------------------------------------


class VersionControlError(RocketError):
    """Raised when a version-control query fails.

    The predefined-variable step absorbs this error and falls back to an
    empty value; it only reaches callers that use the VCS client directly.
    """

    def __init__(self, command: str, message: str) -> None:
        super().__init__(f"'{command}' failed: {message}", details={"command": command})
        self.command = command
