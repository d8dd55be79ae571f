"""
Tests for configuration file lookup.
"""

from rocket.config.locator import DEFAULT_CONFIG_FILE, find_config_file


class TestFindConfigFile:
    def test_default_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert find_config_file("") == ""

    def test_default_present(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / DEFAULT_CONFIG_FILE).write_text("")
        assert find_config_file("") == DEFAULT_CONFIG_FILE
        assert find_config_file() == DEFAULT_CONFIG_FILE

    def test_explicit_present(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "explicit.toml").write_text("")
        assert find_config_file("explicit.toml") == "explicit.toml"

    def test_explicit_absolute_path_returned_unchanged(self, tmp_path):
        path = tmp_path / "deploy.toml"
        path.write_text("")
        assert find_config_file(str(path)) == str(path)

    def test_explicit_missing_does_not_fall_back(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / DEFAULT_CONFIG_FILE).write_text("")
        assert find_config_file("explicit.toml") == ""

    def test_parent_directory_not_searched(self, tmp_path, monkeypatch):
        (tmp_path / DEFAULT_CONFIG_FILE).write_text("")
        child = tmp_path / "child"
        child.mkdir()
        monkeypatch.chdir(child)
        assert find_config_file("") == ""

    def test_directory_counts_as_existing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "confdir").mkdir()
        assert find_config_file("confdir") == "confdir"
