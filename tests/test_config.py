"""Tests for YAML config loading."""
from pathlib import Path

import pytest
import yaml

import camo_tracker.config as config_mod
from camo_tracker.config import Config, ConfigError


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_mod, "CONFIG_PATH", tmp_path / "absent.yaml")


def write_config(path: Path, data) -> str:
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return str(path)


class TestConfigLoad:

    def test_defaults_when_no_file(self):
        cfg = Config.load()
        assert cfg.title == "BO6 Camo Tracker"
        assert cfg.done_marker == "✅"
        assert cfg.list_height == 16
        assert cfg.default_width == 20
        assert cfg.seed_path == ""

    def test_paths_expanded(self):
        cfg = Config.load()
        assert "~" not in cfg.state_path
        assert cfg.state_path.endswith("camos.json")
        assert "~" not in cfg.log_path

    def test_values_from_yaml(self, tmp_path):
        path = write_config(tmp_path / "config.yaml", {
            "title": "Gold Grind",
            "done_marker": "[x]",
            "list_height": 8,
            "state_path": str(tmp_path / "p.json"),
        })
        cfg = Config.load(path)
        assert cfg.title == "Gold Grind"
        assert cfg.done_marker == "[x]"
        assert cfg.list_height == 8
        assert cfg.state_path == str(tmp_path / "p.json")

    def test_unknown_keys_ignored(self, tmp_path):
        path = write_config(tmp_path / "config.yaml", {"colour": "pink", "title": "T"})
        assert Config.load(path).title == "T"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Config.load(str(path)) == Config.load()

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            Config.load(str(tmp_path / "missing.yaml"))

    def test_non_mapping_raises(self, tmp_path):
        path = write_config(tmp_path / "config.yaml", ["a", "b"])
        with pytest.raises(ConfigError, match="mapping"):
            Config.load(path)

    def test_bad_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("title: [unclosed")
        with pytest.raises(ConfigError):
            Config.load(str(path))

    @pytest.mark.parametrize("field,value", [
        ("list_height", 0),
        ("list_height", "ten"),
        ("default_width", -5),
        ("default_width", True),
    ])
    def test_invalid_numbers_raise(self, tmp_path, field, value):
        path = write_config(tmp_path / "config.yaml", {field: value})
        with pytest.raises(ConfigError, match=field):
            Config.load(path)

    @pytest.mark.parametrize("field,value", [
        ("state_path", None),
        ("state_path", 5),
        ("seed_path", ["a"]),
        ("title", None),
        ("done_marker", 1),
        ("log_path", None),
        ("log_level", 10),
    ])
    def test_non_string_values_raise(self, tmp_path, field, value):
        path = write_config(tmp_path / "config.yaml", {field: value})
        with pytest.raises(ConfigError, match=field):
            Config.load(path)

    def test_non_utf8_config_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b"title: \xff\xfe\n")
        with pytest.raises(ConfigError):
            Config.load(str(path))
