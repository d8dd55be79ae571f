"""
Configuration record and provider blocks.

Provider blocks are passed through to the deployment layer untouched. An absent
block is None, never an empty record, so "not configured" and "configured with
defaults" stay distinguishable.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

DEFAULT_DESCRIPTION = (
    "This is a configuration file for rocket: automated software delivery as fast and easy as possible. "
    "See https://github.com/astrocorp42/rocket"
)

_KIND_NAMES = {
    "str": "a string",
    "bool": "a boolean",
    "list": "an array of strings",
    "map": "a table of strings",
}


def _opt(kind: str) -> Any:
    return field(default=None, metadata={"kind": kind})


def _coerce(kind: str, value: Any, where: str) -> Any:
    """Check value against kind and return a detached copy of it."""
    if kind == "str" and isinstance(value, str):
        return value
    if kind == "bool" and isinstance(value, bool):
        return value
    if kind == "list" and isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    if kind == "map" and isinstance(value, dict) and all(isinstance(v, str) for v in value.values()):
        return dict(value)

    got = type(value).__name__
    if kind == "list" and isinstance(value, list):
        got = f"array containing {next(type(v).__name__ for v in value if not isinstance(v, str))}"
    elif kind == "map" and isinstance(value, dict):
        got = f"table containing {next(type(v).__name__ for v in value.values() if not isinstance(v, str))}"
    raise ValueError(f"'{where}' must be {_KIND_NAMES[kind]}, got {got}")


@dataclass
class ProviderConfig:
    """Base for provider blocks. Fields not set in the file stay None."""

    @classmethod
    def from_dict(cls, data: Any, section: str) -> ProviderConfig:
        if not isinstance(data, dict):
            raise ValueError(f"'{section}' must be a table, got {type(data).__name__}")
        values = {}
        for f in fields(cls):
            if f.name in data:
                values[f.name] = _coerce(f.metadata["kind"], data[f.name], f"{section}.{f.name}")
        # Unknown keys are ignored
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class HerokuConfig(ProviderConfig):
    api_key: str | None = _opt("str")
    app: str | None = _opt("str")
    directory: str | None = _opt("str")
    version: str | None = _opt("str")


@dataclass
class GitHubReleasesConfig(ProviderConfig):
    name: str | None = _opt("str")
    body: str | None = _opt("str")
    prerelease: bool | None = _opt("bool")
    repo: str | None = _opt("str")
    api_key: str | None = _opt("str")
    assets: list[str] | None = _opt("list")
    tag: str | None = _opt("str")
    base_url: str | None = _opt("str")
    upload_url: str | None = _opt("str")


@dataclass
class DockerConfig(ProviderConfig):
    username: str | None = _opt("str")
    password: str | None = _opt("str")
    login: bool | None = _opt("bool")
    images: list[str] | None = _opt("list")


@dataclass
class AWSS3Config(ProviderConfig):
    access_key_id: str | None = _opt("str")
    secret_access_key: str | None = _opt("str")
    region: str | None = _opt("str")
    bucket: str | None = _opt("str")
    local_directory: str | None = _opt("str")
    remote_directory: str | None = _opt("str")


@dataclass
class ZeitNowConfig(ProviderConfig):
    token: str | None = _opt("str")
    directory: str | None = _opt("str")
    env: dict[str, str] | None = _opt("map")
    public: bool | None = _opt("bool")
    deployment_type: str | None = _opt("str")
    name: str | None = _opt("str")
    force_new: bool | None = _opt("bool")
    engines: dict[str, str] | None = _opt("map")
    session_affinity: str | None = _opt("str")


@dataclass
class AWSEBConfig(ProviderConfig):
    access_key_id: str | None = _opt("str")
    secret_access_key: str | None = _opt("str")
    region: str | None = _opt("str")
    application: str | None = _opt("str")
    environment: str | None = _opt("str")
    s3_bucket: str | None = _opt("str")
    version: str | None = _opt("str")
    directory: str | None = _opt("str")
    s3_key: str | None = _opt("str")


# Table-shaped provider blocks, in declaration order (script is handled separately)
PROVIDER_BLOCKS: dict[str, type[ProviderConfig]] = {
    "heroku": HerokuConfig,
    "github_releases": GitHubReleasesConfig,
    "docker": DockerConfig,
    "aws_s3": AWSS3Config,
    "zeit_now": ZeitNowConfig,
    "aws_eb": AWSEBConfig,
}

PROVIDERS = ("script", *PROVIDER_BLOCKS)


@dataclass
class Config:
    """Decoded .rocket.toml document."""

    description: str = DEFAULT_DESCRIPTION
    env: dict[str, str] = field(default_factory=dict)

    # providers
    script: list[str] | None = None
    heroku: HerokuConfig | None = None
    github_releases: GitHubReleasesConfig | None = None
    docker: DockerConfig | None = None
    aws_s3: AWSS3Config | None = None
    zeit_now: ZeitNowConfig | None = None
    aws_eb: AWSEBConfig | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """
        Build a Config from a decoded document.

        Raises:
            ValueError: If a known field has the wrong shape
        """
        config = cls()

        if "description" in data:
            config.description = _coerce("str", data["description"], "description")
        if "env" in data:
            config.env = _coerce("map", data["env"], "env")
        if "script" in data:
            config.script = _coerce("list", data["script"], "script")

        for name, block_cls in PROVIDER_BLOCKS.items():
            if name in data:
                setattr(config, name, block_cls.from_dict(data[name], name))

        return config

    def configured_providers(self) -> list[str]:
        """Names of the provider blocks present in the file."""
        return [name for name in PROVIDERS if getattr(self, name) is not None]

    def to_dict(self) -> dict[str, Any]:
        """Populated fields only, for display."""
        result: dict[str, Any] = {"description": self.description}
        if self.env:
            result["env"] = dict(self.env)
        if self.script is not None:
            result["script"] = list(self.script)
        for name in PROVIDER_BLOCKS:
            block = getattr(self, name)
            if block is not None:
                result[name] = block.to_dict()
        return result


def default_config() -> Config:
    """Return the configuration written by `rocket init`."""
    return Config()
