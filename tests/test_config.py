"""Tests for configuration loading."""

import logging

import pytest

from smart_input.config import (
    Config,
    ConfigValidationError,
    create_default_config,
    load_config,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, tmp_path, clean_env):
        config = load_config(tmp_path / "missing.yaml")

        assert config.extraction.note_max_length == 50
        assert config.extraction.lenient_amount_parsing is True
        assert config.recognition.provider == "simulated"
        assert config.recognition.seed is None
        assert config.validate() == []

    def test_yaml_values(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text(
            "extraction:\n"
            "  note_max_length: 30\n"
            "  lenient_amount_parsing: false\n"
            "recognition:\n"
            "  simulated_delay_seconds: 0.5\n"
            "  seed: 7\n"
            "log_level: DEBUG\n",
            encoding="utf-8",
        )
        config = load_config(path)

        assert config.extraction.note_max_length == 30
        assert config.extraction.lenient_amount_parsing is False
        assert config.recognition.simulated_delay_seconds == 0.5
        assert config.recognition.seed == 7
        assert config.log_level_value == logging.DEBUG

    def test_env_overrides(self, tmp_path, clean_env):
        clean_env.setenv("SMART_INPUT_LENIENT_AMOUNTS", "false")
        clean_env.setenv("SMART_INPUT_SIMULATED_DELAY", "1.5")
        clean_env.setenv("SMART_INPUT_LOG_LEVEL", "WARNING")

        config = load_config(tmp_path / "missing.yaml")

        assert config.extraction.lenient_amount_parsing is False
        assert config.recognition.simulated_delay_seconds == 1.5
        assert config.log_level == "WARNING"

    def test_bad_delay_env(self, tmp_path, clean_env):
        clean_env.setenv("SMART_INPUT_SIMULATED_DELAY", "soon")
        with pytest.raises(ConfigValidationError):
            load_config(tmp_path / "missing.yaml")

    def test_non_mapping_file(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_empty_sections_give_defaults(self, tmp_path, clean_env):
        """A section key with no body is treated as an empty section."""
        path = tmp_path / "config.yaml"
        path.write_text("extraction:\nrecognition:\nlog_level: INFO\n", encoding="utf-8")

        config = load_config(path)

        assert config == Config()

    def test_default_file_round_trip(self, tmp_path, clean_env):
        path = tmp_path / "nested" / "config.yaml"
        create_default_config(path)

        assert path.exists()
        assert load_config(path) == Config()


class TestValidation:
    """Tests for Config.validate."""

    def test_unknown_provider(self, tmp_path, clean_env):
        clean_env.setenv("SMART_INPUT_PROVIDER", "baidu")
        config = load_config(tmp_path / "missing.yaml")

        errors = config.validate()
        assert len(errors) == 1
        assert "recognition.provider" in errors[0]
        with pytest.raises(ConfigValidationError):
            config.validate_or_raise()

    def test_invalid_values(self):
        config = Config()
        config.extraction.note_max_length = 0
        config.recognition.simulated_delay_seconds = -1
        config.log_level = "LOUD"

        assert len(config.validate()) == 3
