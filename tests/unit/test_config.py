"""Unit tests for EnvConfig."""

import json

import pytest
import yaml
from pydantic import ValidationError

from procenv.config import EnvConfig
from procenv.enums import JoinMode


class TestEnvConfigDefaults:
    def test_defaults(self):
        config = EnvConfig()
        assert config.join_mode == JoinMode.ALIAS
        assert config.thread_safe is False
        assert config.log_values is False
        assert config.log_max_chars == 200

    def test_ignores_process_environment(self, monkeypatch):
        """Options are never read from env vars."""
        monkeypatch.setenv("JOIN_MODE", "copy")
        monkeypatch.setenv("PROCENV_JOIN_MODE", "copy")
        assert EnvConfig().join_mode == JoinMode.ALIAS

    def test_join_mode_from_string(self):
        assert EnvConfig(join_mode="copy").join_mode == JoinMode.COPY

    def test_invalid_join_mode_rejected(self):
        with pytest.raises(ValidationError):
            EnvConfig(join_mode="merge")

    def test_negative_log_max_chars_rejected(self):
        with pytest.raises(ValidationError):
            EnvConfig(log_max_chars=-1)

    def test_frozen(self):
        config = EnvConfig()
        with pytest.raises(ValidationError):
            config.thread_safe = True


class TestEnvConfigFromFile:
    def test_from_json_file(self, tmp_path):
        path = tmp_path / "procenv.json"
        path.write_text(json.dumps({"join_mode": "copy", "thread_safe": True}), encoding="utf-8")

        config = EnvConfig.from_file(path)

        assert config.join_mode == JoinMode.COPY
        assert config.thread_safe is True

    @pytest.mark.parametrize("suffix", [".yml", ".yaml"])
    def test_from_yaml_file(self, tmp_path, suffix):
        path = tmp_path / f"procenv{suffix}"
        path.write_text(
            yaml.safe_dump({"log_values": True, "log_max_chars": 50, "unknown": 1}),
            encoding="utf-8",
        )

        config = EnvConfig.from_file(str(path))

        assert config.log_values is True
        assert config.log_max_chars == 50

    def test_empty_yaml_file_gives_defaults(self, tmp_path):
        path = tmp_path / "procenv.yml"
        path.write_text("", encoding="utf-8")
        assert EnvConfig.from_file(path) == EnvConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EnvConfig.from_file(tmp_path / "nope.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "procenv.toml"
        path.write_text("join_mode = 'copy'", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported"):
            EnvConfig.from_file(path)

    def test_non_mapping_top_level(self, tmp_path):
        path = tmp_path / "procenv.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            EnvConfig.from_file(path)
