"""Tests for configuration and its persistence."""

import dataclasses
import json

import pytest

from word_lookup import __version__
from word_lookup.config import ConfigManager, LookupConfig, create_default_config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Redirect ConfigManager to a temporary file."""
    path = tmp_path / ".word_lookup" / "config.json"
    monkeypatch.setattr(ConfigManager, "CONFIG_FILE", path)
    return path


class TestLookupConfig:
    """Tests for LookupConfig defaults and normalization."""

    def test_defaults(self):
        """Should point at the public dictionary service."""
        config = create_default_config()

        assert config.api_url == "https://api.dictionaryapi.dev/api/v2/entries/en/"
        assert config.request_timeout == 10.0
        assert config.initial_word == "chess"
        assert config.user_agent == f"word-lookup/{__version__}"

    def test_overrides(self):
        """Should apply keyword overrides."""
        config = create_default_config(initial_word="rook", request_timeout=3.0)

        assert config.initial_word == "rook"
        assert config.request_timeout == 3.0

    def test_api_url_gets_trailing_slash(self):
        """Should add the slash the word is appended after."""
        config = LookupConfig(api_url="https://dictionary.test/entries/en")
        assert config.api_url == "https://dictionary.test/entries/en/"

    @pytest.mark.parametrize("volume,expected", [(-1.0, 0.0), (0.3, 0.3), (7, 1.0)])
    def test_volume_is_clamped(self, volume, expected):
        """Should clamp volume into [0, 1]."""
        assert LookupConfig(audio_volume=volume).audio_volume == expected

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_non_positive_timeout_rejected(self, timeout):
        """Should reject timeouts that would disable the client-side limit."""
        with pytest.raises(ValueError, match="request_timeout"):
            LookupConfig(request_timeout=timeout)

    @pytest.mark.parametrize("field", ["api_url", "user_agent", "initial_word"])
    def test_non_string_text_fields_rejected(self, field):
        """Should reject text settings that are not strings."""
        with pytest.raises(TypeError, match=field):
            LookupConfig(**{field: None})

    def test_is_frozen(self):
        """Should be immutable."""
        config = create_default_config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.initial_word = "rook"


class TestConfigManager:
    """Tests for ConfigManager save/load."""

    def test_load_without_file_returns_defaults(self, config_file):
        """Should fall back to defaults when no file exists."""
        assert ConfigManager.config_exists() is False
        assert ConfigManager.load_config() == create_default_config()

    def test_save_and_load(self, config_file):
        """Should restore what was saved."""
        config = create_default_config(initial_word="rook", audio_volume=0.25)

        ConfigManager.save_config(config)

        assert config_file.exists()
        assert ConfigManager.load_config() == config

    def test_invalid_json_falls_back(self, config_file, caplog):
        """Should use defaults and warn when the file is corrupt."""
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{not json", encoding="utf-8")

        with caplog.at_level("WARNING"):
            config = ConfigManager.load_config()

        assert config == create_default_config()
        assert "Invalid config file" in caplog.text

    def test_unknown_key_falls_back(self, config_file):
        """Should use defaults when the file has unexpected keys."""
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        assert ConfigManager.load_config() == create_default_config()

    def test_non_object_falls_back(self, config_file):
        """Should use defaults when the file is not a JSON object."""
        config_file.parent.mkdir(parents=True)
        config_file.write_text("[1, 2]", encoding="utf-8")

        assert ConfigManager.load_config() == create_default_config()

    @pytest.mark.parametrize(
        "content", [{"api_url": None}, {"api_url": 42}, {"request_timeout": "fast"}, {"audio_volume": None}]
    )
    def test_wrongly_typed_values_fall_back(self, config_file, caplog, content):
        """Should use defaults when a value has the wrong JSON type."""
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps(content), encoding="utf-8")

        with caplog.at_level("WARNING"):
            config = ConfigManager.load_config()

        assert config == create_default_config()
        assert "Invalid config file" in caplog.text

    def test_delete_config(self, config_file):
        """Should remove the saved file."""
        ConfigManager.save_config(create_default_config())
        ConfigManager.delete_config()

        assert ConfigManager.config_exists() is False
