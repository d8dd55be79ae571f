"""
Tests for the configuration record.
"""

import pytest

from rocket.config.schema import (
    DEFAULT_DESCRIPTION,
    PROVIDERS,
    AWSEBConfig,
    Config,
    DockerConfig,
    GitHubReleasesConfig,
    HerokuConfig,
    ZeitNowConfig,
    default_config,
)


class TestConfigFromDict:
    def test_empty_document(self):
        cfg = Config.from_dict({})
        assert cfg.description == DEFAULT_DESCRIPTION
        assert cfg.env == {}
        assert cfg.configured_providers() == []

    def test_absent_providers_are_none(self):
        cfg = Config.from_dict({"description": "demo"})
        for name in PROVIDERS:
            assert getattr(cfg, name) is None

    def test_empty_block_is_configured(self):
        cfg = Config.from_dict({"docker": {}})
        assert cfg.docker == DockerConfig()
        assert cfg.docker.images is None
        assert cfg.configured_providers() == ["docker"]

    def test_env_keys_stored_as_written(self):
        cfg = Config.from_dict({"env": {"greeting": "hello", "Mixed_Case": "x"}})
        assert cfg.env == {"greeting": "hello", "Mixed_Case": "x"}

    def test_provider_fields(self):
        cfg = Config.from_dict(
            {
                "script": ["make", "make release"],
                "github_releases": {"name": "v1", "prerelease": True, "assets": ["dist/a", "dist/b"]},
                "heroku": {"app": "my-app"},
                "zeit_now": {"env": {"A": "1"}, "public": False},
                "aws_eb": {"s3_key": "k"},
            }
        )
        assert cfg.script == ["make", "make release"]
        assert cfg.github_releases == GitHubReleasesConfig(name="v1", prerelease=True, assets=["dist/a", "dist/b"])
        assert cfg.heroku == HerokuConfig(app="my-app")
        assert cfg.zeit_now == ZeitNowConfig(env={"A": "1"}, public=False)
        assert cfg.aws_eb == AWSEBConfig(s3_key="k")
        assert cfg.configured_providers() == ["script", "heroku", "github_releases", "zeit_now", "aws_eb"]

    def test_unknown_fields_ignored(self):
        cfg = Config.from_dict({"unknown": 1, "heroku": {"app": "a", "region": "eu"}})
        assert cfg.heroku == HerokuConfig(app="a")

    @pytest.mark.parametrize(
        "data, match",
        [
            ({"description": 3}, "'description' must be a string"),
            ({"env": {"A": 1}}, "'env' must be a table of strings"),
            ({"env": ["A"]}, "'env' must be a table of strings"),
            ({"script": "make"}, "'script' must be an array of strings"),
            ({"docker": "yes"}, "'docker' must be a table"),
            ({"docker": {"login": "yes"}}, "'docker.login' must be a boolean"),
            ({"heroku": {"app": ["a"]}}, "'heroku.app' must be a string"),
        ],
    )
    def test_wrong_shape_raises(self, data, match):
        with pytest.raises(ValueError, match=match):
            Config.from_dict(data)


class TestConfigToDict:
    def test_only_populated_fields(self):
        cfg = Config.from_dict({"description": "d", "docker": {"images": ["x"]}})
        assert cfg.to_dict() == {"description": "d", "docker": {"images": ["x"]}}

    def test_env_and_script_included(self):
        cfg = Config.from_dict({"env": {"A": "1"}, "script": ["echo"]})
        assert cfg.to_dict() == {"description": DEFAULT_DESCRIPTION, "env": {"A": "1"}, "script": ["echo"]}


class TestDefaultConfig:
    def test_default(self):
        cfg = default_config()
        assert cfg.description.startswith("This is a configuration file for rocket")
        assert cfg.configured_providers() == []
