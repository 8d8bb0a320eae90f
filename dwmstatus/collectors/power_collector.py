"""Battery and AC adapter collector reading /sys/class/power_supply."""
import os
from dataclasses import dataclass
from typing import Optional

from ..config.power_config import PowerConfig
from ..utils.logger import get_logger
from .formatting import HighlightStyle

logger = get_logger(__name__)

ERROR_TOKEN = "ERR"


@dataclass
class BatteryReading:
    """Full and current energy (or charge) of one or more batteries."""
    full: int = 0
    now: int = 0

    def __add__(self, other: "BatteryReading") -> "BatteryReading":
        return BatteryReading(self.full + other.full, self.now + other.now)


def is_empty(path: str, legacy: bool = True) -> bool:
    """Tell whether the directory at path has no entries.

    A path that cannot be opened is reported as not empty when legacy is
    set and as empty otherwise.
    """
    try:
        entries = os.scandir(path)
    except OSError as e:
        logger.debug(f"Cannot open {path}: {e}")
        return not legacy

    with entries:
        try:
            return next(entries, None) is None
        except OSError as e:
            logger.debug(f"Cannot list {path}: {e}")
            return False


def _read_int(path: str) -> Optional[int]:
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return int(f.read().strip())
    except (OSError, ValueError):
        return None


def read_battery_value(battery_dir: str, field: str) -> int:
    """Read energy_<field>, falling back to charge_<field>; 0 if neither works."""
    energy_path = os.path.join(battery_dir, "energy_" + field)
    charge_path = os.path.join(battery_dir, "charge_" + field)
    path = energy_path if os.path.exists(energy_path) else charge_path
    value = _read_int(path)
    return value if value is not None else 0


class PowerCollector:
    """Aggregates all batteries into one percentage with a plug indicator."""

    def __init__(self, config: PowerConfig, style: Optional[HighlightStyle] = None):
        """Initialize the power collector."""
        self.config = config
        self.style = style

    def is_present(self) -> bool:
        """True when the power supply root has any entries."""
        return not is_empty(self.config.supply_path, self.config.legacy_presence_check)

    def read_plugged(self) -> bool:
        """Read the AC adapter state, raising OSError when unavailable."""
        online = os.path.join(self.config.supply_path, self.config.ac_adapter, "online")
        with open(online, 'r', encoding='utf-8', errors='replace') as f:
            return f.read() == "1\n"

    def read_batteries(self) -> BatteryReading:
        """Sum the readings of every battery entry, raising OSError on listing failure."""
        total = BatteryReading()
        for name in sorted(os.listdir(self.config.supply_path)):
            if not name.startswith(self.config.battery_prefix):
                continue
            battery_dir = os.path.join(self.config.supply_path, name)
            total += BatteryReading(
                full=read_battery_value(battery_dir, "full"),
                now=read_battery_value(battery_dir, "now"),
            )
        return total

    def sample(self) -> str:
        """Return the power field, e.g. ``⚡ 50%``."""
        try:
            plugged = self.read_plugged()
            reading = self.read_batteries()
        except OSError as e:
            logger.debug(f"Cannot read power supply state: {e}")
            return ERROR_TOKEN

        if reading.full == 0:  # batteries found but no readable full file
            logger.debug("No usable battery capacity found")
            return ERROR_TOKEN

        percentage = reading.now * 100 // reading.full
        icon = self.config.plugged_sign if plugged else self.config.unplugged_sign
        text = f"{icon}{percentage:3d}"
        if self.style is not None:
            text = self.style.wrap(percentage, text)
        return text + "%"
