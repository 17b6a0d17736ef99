"""Configuration and settings persistence for the Japanese helper commands."""
import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Optional

from errors import ConfigError
from models import INSERT_MODES, PluginSettings


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class Config:
    """Configuration loaded from environment variables."""

    # Translation backend: "ollama" or "openai" (any OpenAI-compatible server)
    translator_backend: str = "ollama"

    # Ollama configuration
    ollama_url: str = "http://localhost:11434"
    ollama_model: str = "mistral:7b"

    # OpenAI-compatible configuration
    openai_url: str = "https://api.openai.com"
    openai_model: str = "gpt-4o-mini"
    openai_api_key: str = ""

    # Dictionary lookup
    jisho_url: str = "https://jisho.org"

    request_timeout: float = 60.0

    # Per-plugin settings files live here
    settings_dir: str = "./settings"

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            translator_backend=os.getenv("TRANSLATOR_BACKEND", "ollama"),
            ollama_url=os.getenv("OLLAMA_URL", "http://localhost:11434"),
            ollama_model=os.getenv("OLLAMA_MODEL", "mistral:7b"),
            openai_url=os.getenv("OPENAI_URL", "https://api.openai.com"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            jisho_url=os.getenv("JISHO_URL", "https://jisho.org"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "60.0")),
            settings_dir=os.getenv("SETTINGS_DIR", "./settings"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    @property
    def default_model(self) -> str:
        if self.translator_backend == "openai":
            return self.openai_model
        return self.ollama_model

    def ensure_directories(self) -> None:
        """Create the settings directory if it doesn't exist."""
        os.makedirs(self.settings_dir, exist_ok=True)


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def sanitize_for_log(text: Optional[str]) -> str:
    """Describe user text for logs without including its content."""
    if text is None:
        return "[NONE]"
    return f"[{len(text)} chars]"


def settings_path(config: Config, plugin_id: str) -> str:
    return os.path.join(config.settings_dir, f"{plugin_id}.json")


def load_settings(config: Config, plugin_id: str) -> PluginSettings:
    """
    Load a plugin's persisted settings.

    Defaults are merged with whatever the settings file holds. Unknown keys are
    ignored; a missing or unreadable file yields the defaults.

    Raises:
        ConfigError: If the stored insert_mode is not a known mode.
    """
    path = settings_path(config, plugin_id)
    stored = {}

    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read settings for {plugin_id} ({e}); using defaults")
            stored = {}
        if not isinstance(stored, dict):
            logger.warning(f"Settings file for {plugin_id} is not an object; using defaults")
            stored = {}

    known = {f.name for f in fields(PluginSettings)}
    settings = PluginSettings(**{k: v for k, v in stored.items() if k in known})

    if settings.insert_mode not in INSERT_MODES:
        raise ConfigError(
            f"Invalid insert_mode '{settings.insert_mode}' for {plugin_id}. "
            f"Allowed: {', '.join(INSERT_MODES)}"
        )

    return settings


def save_settings(config: Config, plugin_id: str, settings: PluginSettings) -> str:
    """Write a plugin's settings to disk and return the file path."""
    if settings.insert_mode not in INSERT_MODES:
        raise ConfigError(f"Invalid insert_mode '{settings.insert_mode}'")

    config.ensure_directories()
    path = settings_path(config, plugin_id)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, ensure_ascii=False, indent=2)

    logger.debug(f"Saved settings for {plugin_id} to {path}")
    return path
