"""Memory collector configuration data structure."""
from dataclasses import dataclass


@dataclass
class MemoryConfig:
    """Memory info source configuration."""
    meminfo_path: str = "/proc/meminfo"
    sign: str = "MEM"

    def __post_init__(self):
        """Fix invalid values."""
        if not self.meminfo_path:
            self.meminfo_path = "/proc/meminfo"
