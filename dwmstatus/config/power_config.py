"""Power supply configuration data structure."""
from dataclasses import dataclass


@dataclass
class PowerConfig:
    """Power supply layout and battery field signs."""
    supply_path: str = "/sys/class/power_supply"
    ac_adapter: str = "ADP1"
    battery_prefix: str = "BAT"
    plugged_sign: str = "⚡"
    unplugged_sign: str = "☢"
    # When set, an unreadable supply root counts as "present"
    legacy_presence_check: bool = True

    def __post_init__(self):
        """Fix invalid values."""
        if not self.supply_path:
            self.supply_path = "/sys/class/power_supply"
        if not self.ac_adapter:
            self.ac_adapter = "ADP1"
        if not self.battery_prefix:
            self.battery_prefix = "BAT"
