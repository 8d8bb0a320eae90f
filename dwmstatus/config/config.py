"""Main configuration data structure."""
from dataclasses import dataclass, field

from .cpu_config import CPUConfig
from .display_config import DisplayConfig
from .memory_config import MemoryConfig
from .network_config import NetworkConfig
from .power_config import PowerConfig
from .sink_config import SinkConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Main configuration class."""
    network: NetworkConfig = field(default_factory=NetworkConfig)
    cpu: CPUConfig = field(default_factory=CPUConfig)
    memory: MemoryConfig = field(default_factory=MemoryConfig)
    power: PowerConfig = field(default_factory=PowerConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    sink: SinkConfig = field(default_factory=SinkConfig)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Fix invalid values."""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            self.log_level = "WARNING"
