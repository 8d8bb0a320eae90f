"""Configuration data structures and loading."""
from .config import Config
from .config_manager import ConfigManager

__all__ = ["Config", "ConfigManager"]
