"""Memory usage collector reading /proc/meminfo."""
from typing import Dict, Iterable, Optional

from ..config.memory_config import MemoryConfig
from ..utils.logger import get_logger
from .formatting import HighlightStyle, format_percentage

logger = get_logger(__name__)

WANTED_KEYS = ("MemTotal:", "MemFree:", "Buffers:", "Cached:")


class MemInfoError(ValueError):
    """Raised when /proc/meminfo cannot be turned into a usage figure."""


def read_meminfo(lines: Iterable[str]) -> Dict[str, int]:
    """Collect the wanted keys, stopping as soon as all of them are seen.

    Every line read before that point has to parse as ``KEY VALUE ...``.
    """
    values: Dict[str, int] = {}
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise MemInfoError(f"Malformed meminfo line: {line!r}")
        try:
            value = int(fields[1])
        except ValueError:
            raise MemInfoError(f"Malformed meminfo line: {line!r}") from None
        if fields[0] in WANTED_KEYS:
            values[fields[0]] = value
            if len(values) == len(WANTED_KEYS):
                break
    return values


def used_percentage(values: Dict[str, int]) -> int:
    """Percentage of memory used by applications."""
    missing = [key for key in WANTED_KEYS if key not in values]
    if missing:
        raise MemInfoError(f"Missing meminfo keys: {missing}")
    total = values["MemTotal:"]
    if total <= 0:
        raise MemInfoError("MemTotal is zero")
    used = total - values["MemFree:"] - values["Buffers:"] - values["Cached:"]
    return used * 100 // total


class MemoryCollector:
    """Reports memory used by applications scaled to [0, 100]."""

    def __init__(self, config: MemoryConfig, style: Optional[HighlightStyle] = None):
        """Initialize the memory collector."""
        self.config = config
        self.style = style

    def sample(self) -> str:
        """Return the memory field, e.g. ``MEM 40``."""
        try:
            with open(self.config.meminfo_path, 'r', encoding='utf-8', errors='replace') as f:
                percentage = used_percentage(read_meminfo(f))
        except (OSError, MemInfoError) as e:
            logger.debug(f"Cannot compute memory usage: {e}")
            return self.config.sign + "ERR"

        return format_percentage(self.config.sign, percentage, self.style)
