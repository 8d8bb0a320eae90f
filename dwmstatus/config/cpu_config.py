"""CPU collector configuration data structure."""
from dataclasses import dataclass


@dataclass
class CPUConfig:
    """Core count used for scaling the load average."""
    cores: int = 0  # 0 means ask psutil at startup
    sign: str = "CPU"

    def __post_init__(self):
        """Fix invalid values."""
        if self.cores < 0:
            self.cores = 0
