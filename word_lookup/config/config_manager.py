"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

from .config import LookupConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Saves and loads user settings as JSON.

    Only settings are stored here. Lookup results are never persisted.
    Falls back to the default configuration when the file is missing or
    invalid.
    """

    CONFIG_FILE = Path.home() / ".word_lookup" / "config.json"

    @classmethod
    def save_config(cls, config: LookupConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(asdict(config), f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls) -> LookupConfig:
        """Load configuration from JSON file.

        Returns:
            Loaded configuration, or default configuration if file doesn't exist
            or cannot be parsed
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config()

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise TypeError(f"expected a JSON object, got {type(config_dict).__name__}")

            return LookupConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config()

    @classmethod
    def config_exists(cls) -> bool:
        """Check if configuration file exists."""
        return cls.CONFIG_FILE.exists()

    @classmethod
    def delete_config(cls) -> None:
        """Delete the configuration file."""
        if cls.CONFIG_FILE.exists():
            cls.CONFIG_FILE.unlink()
