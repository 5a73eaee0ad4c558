"""Configuration management for Word Lookup."""

from .config import LookupConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["ConfigManager", "LookupConfig", "create_default_config"]
