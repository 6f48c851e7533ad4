"""
Tests for configuration loading — defaults, file, environment overrides.
"""

import json
from pathlib import Path

import pytest

from launchpad.config import LauncherConfig, config_from_dict, load_config
from launchpad.errors import ConfigError


class TestDefaults:
    def test_missing_file_gives_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "launcher_config.json", environ={})
        assert cfg == LauncherConfig()
        assert cfg.catalog_paths == ("apps.json", "src/apps.json")
        assert cfg.variant == "search"

    def test_no_path(self):
        assert load_config(None, environ={}) == LauncherConfig()

    def test_candidate_paths_relative_to_base(self, tmp_path):
        assert LauncherConfig().candidate_paths(tmp_path) == [
            tmp_path / "apps.json",
            tmp_path / "src" / "apps.json",
        ]

    def test_candidate_paths_dedupe(self, tmp_path):
        cfg = LauncherConfig(catalog_paths=("apps.json", "apps.json", str(tmp_path / "apps.json")))
        assert cfg.candidate_paths(tmp_path) == [tmp_path / "apps.json"]


class TestFile:
    def test_partial_file_merges_defaults(self, tmp_path):
        p = tmp_path / "launcher_config.json"
        p.write_text(json.dumps({"variant": "COMBO", "log_level": "debug"}))
        cfg = load_config(p, environ={})
        assert cfg.variant == "combo"
        assert cfg.log_level == "DEBUG"
        assert cfg.catalog_paths == ("apps.json", "src/apps.json")

    def test_invalid_json_falls_back(self, tmp_path, caplog):
        p = tmp_path / "launcher_config.json"
        p.write_text("{oops")
        with caplog.at_level("WARNING"):
            assert load_config(p, environ={}) == LauncherConfig()
        assert "Ignoring" in caplog.text

    def test_unknown_variant(self):
        with pytest.raises(ConfigError):
            config_from_dict({"variant": "tiles"})

    def test_bad_catalog_paths(self):
        with pytest.raises(ConfigError):
            config_from_dict({"catalog_paths": [1, 2]})

    @pytest.mark.parametrize("level", ["verbose", "basic_format", "logger", ""])
    def test_unknown_log_level(self, level):
        with pytest.raises(ConfigError):
            config_from_dict({"log_level": level})

    def test_log_level_from_file_rejected(self, tmp_path):
        p = tmp_path / "launcher_config.json"
        p.write_text(json.dumps({"log_level": "loud"}))
        with pytest.raises(ConfigError):
            load_config(p, environ={})

    def test_single_catalog_path_string(self):
        assert config_from_dict({"catalog_paths": "mine.json"}).catalog_paths == ("mine.json",)


class TestEnvironment:
    def test_env_catalog_tried_first(self, tmp_path):
        cfg = load_config(None, environ={"LAUNCHPAD_CATALOG": "/opt/apps.json"})
        assert cfg.catalog_paths == ("/opt/apps.json", "apps.json", "src/apps.json")

    def test_env_log_level(self):
        assert load_config(None, environ={"LAUNCHPAD_LOG_LEVEL": "warning"}).log_level == "WARNING"

    def test_env_log_level_unknown(self):
        with pytest.raises(ConfigError):
            load_config(None, environ={"LAUNCHPAD_LOG_LEVEL": "logger"})
