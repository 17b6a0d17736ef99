"""
Tests for configuration and settings persistence
"""
import json
import os

import pytest

from config import Config, load_settings, sanitize_for_log, save_settings, settings_path
from errors import ConfigError
from models import PluginSettings


class TestConfigFromEnv:
    """Test environment loading"""

    def test_defaults(self, monkeypatch):
        for name in ("TRANSLATOR_BACKEND", "OLLAMA_MODEL", "JISHO_URL", "REQUEST_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        config = Config.from_env()
        assert config.translator_backend == "ollama"
        assert config.jisho_url == "https://jisho.org"
        assert config.request_timeout == 60.0
        assert config.default_model == "mistral:7b"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TRANSLATOR_BACKEND", "openai")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-test")
        monkeypatch.setenv("REQUEST_TIMEOUT", "5")
        config = Config.from_env()
        assert config.translator_backend == "openai"
        assert config.default_model == "gpt-test"
        assert config.request_timeout == 5.0


class TestSettingsPersistence:
    """Test per-plugin settings load/save"""

    def test_missing_file_gives_defaults(self, config):
        assert load_settings(config, "dictionary-lookup") == PluginSettings()

    def test_save_then_load(self, config):
        settings = PluginSettings(model="llama3", insert_mode="replace")
        path = save_settings(config, "translate-to-english", settings)

        assert os.path.exists(path)
        assert load_settings(config, "translate-to-english") == settings

    def test_saved_file_is_readable_json(self, config):
        save_settings(config, "p", PluginSettings(model="モデル"))
        with open(settings_path(config, "p"), encoding="utf-8") as f:
            text = f.read()
        assert "モデル" in text
        assert json.loads(text)["model"] == "モデル"

    def test_partial_file_merges_with_defaults(self, config):
        config.ensure_directories()
        with open(settings_path(config, "p"), "w", encoding="utf-8") as f:
            json.dump({"model": "qwen", "unknown_key": 1}, f)

        settings = load_settings(config, "p")
        assert settings.model == "qwen"
        assert settings.insert_mode == "below"
        assert settings.enabled is True

    def test_corrupt_file_gives_defaults(self, config):
        config.ensure_directories()
        with open(settings_path(config, "p"), "w", encoding="utf-8") as f:
            f.write("{not json")
        assert load_settings(config, "p") == PluginSettings()

    def test_binary_file_gives_defaults(self, config):
        config.ensure_directories()
        with open(settings_path(config, "p"), "wb") as f:
            f.write(b"\xff\xfe\x00garbage")
        assert load_settings(config, "p") == PluginSettings()

    def test_invalid_insert_mode(self, config):
        config.ensure_directories()
        with open(settings_path(config, "p"), "w", encoding="utf-8") as f:
            json.dump({"insert_mode": "sideways"}, f)
        with pytest.raises(ConfigError):
            load_settings(config, "p")

    def test_save_rejects_invalid_insert_mode(self, config):
        with pytest.raises(ConfigError):
            save_settings(config, "p", PluginSettings(insert_mode="sideways"))


def test_sanitize_for_log_hides_content():
    assert sanitize_for_log("秘密のメモ") == "[5 chars]"
    assert sanitize_for_log(None) == "[NONE]"
