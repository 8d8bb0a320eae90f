"""CPU load collector based on the one minute load average."""
from typing import Optional

import psutil

from ..config.cpu_config import CPUConfig
from ..utils.logger import get_logger
from .formatting import HighlightStyle, format_percentage

logger = get_logger(__name__)


def resolve_cores(configured: int) -> int:
    """Core count used to scale the load average, at least 1."""
    if configured > 0:
        return configured
    return psutil.cpu_count() or 1


class CPUCollector:
    """Scales the one minute load average by the number of cores."""

    def __init__(self, config: CPUConfig, style: Optional[HighlightStyle] = None):
        """Initialize the CPU collector; the core count is fixed from here on."""
        self.config = config
        self.cores = resolve_cores(config.cores)
        self.style = style

    def sample(self) -> str:
        """Return the CPU field, e.g. ``CPU 42``."""
        try:
            load = psutil.getloadavg()[0]
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot read load average: {e}")
            return self.config.sign + "ERR"

        return format_percentage(self.config.sign, int(load * 100.0 / self.cores), self.style)
