"""Network collector configuration data structure."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class NetworkConfig:
    """Interfaces and counter source for the throughput field."""
    interfaces: List[str] = field(default_factory=lambda: ["enp2s6", "wlan0"])
    dev_path: str = "/proc/net/dev"
    rx_sign: str = "RX "
    tx_sign: str = "TX "

    def __post_init__(self):
        """Fix invalid values."""
        # Interface names are listed without the trailing colon of /proc/net/dev
        self.interfaces = [name.rstrip(":") for name in self.interfaces if name]
        if not self.dev_path:
            self.dev_path = "/proc/net/dev"
