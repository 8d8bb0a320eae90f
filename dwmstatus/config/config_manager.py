"""Configuration loading and management."""
import os

import yaml

from .config import Config
from .cpu_config import CPUConfig
from .display_config import DisplayConfig
from .highlight_config import HighlightConfig
from .memory_config import MemoryConfig
from .network_config import NetworkConfig
from .power_config import PowerConfig
from .sink_config import SinkConfig

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'default_config.yaml')


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: str) -> Config:
        """Load configuration from YAML file - let it crash if bad."""
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return ConfigManager.from_dict(config_data)

    @staticmethod
    def default_config() -> Config:
        """Load the configuration shipped with the package."""
        return ConfigManager.load_config(DEFAULT_CONFIG_PATH)

    @staticmethod
    def from_dict(config_data: dict) -> Config:
        """Build a Config from parsed YAML, missing sections use defaults."""
        # Parse display config with its nested highlight section
        display_data = dict(config_data.get('display') or {})
        highlight = HighlightConfig(**(display_data.pop('highlight', None) or {}))
        display = DisplayConfig(highlight=highlight, **display_data)

        return Config(
            network=NetworkConfig(**(config_data.get('network') or {})),
            cpu=CPUConfig(**(config_data.get('cpu') or {})),
            memory=MemoryConfig(**(config_data.get('memory') or {})),
            power=PowerConfig(**(config_data.get('power') or {})),
            display=display,
            sink=SinkConfig(**(config_data.get('sink') or {})),
            log_level=config_data.get('log_level', 'WARNING'),
        )
