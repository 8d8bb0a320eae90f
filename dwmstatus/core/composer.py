"""Assembles sampler fields into the status line."""
from datetime import datetime
from typing import Callable, List

from ..collectors.cpu_collector import CPUCollector
from ..collectors.memory_collector import MemoryCollector
from ..collectors.network_collector import NetworkCollector
from ..collectors.power_collector import PowerCollector
from ..config import Config
from ..utils.logger import get_logger

logger = get_logger(__name__)


class StatusComposer:
    """Calls every collector once per tick and joins their fields."""

    def __init__(self, config: Config, sink, clock: Callable[[], datetime] = datetime.now):
        """Initialize the composer and its collectors from config."""
        self.config = config
        self.sink = sink
        self.clock = clock

        highlight = config.display.highlight
        self.network = NetworkCollector(config.network, config.display.float_separator)
        self.cpu = CPUCollector(config.cpu, highlight.percentage_style())
        self.memory = MemoryCollector(config.memory, highlight.percentage_style())
        self.power = PowerCollector(config.power, highlight.battery_style())

    def fields(self) -> List[str]:
        """Current fields in display order."""
        fields = [
            self.network.sample(),
            self.cpu.sample() + "%",
            self.memory.sample() + "%",
        ]
        if self.power.is_present():
            fields.append(self.power.sample())
        fields.append(self.clock().strftime(self.config.display.time_format))
        return fields

    def compose(self) -> str:
        """Build the status line for this tick."""
        return self.config.display.field_separator.join(self.fields())

    def tick(self) -> str:
        """Compose the line and hand it to the sink."""
        status = self.compose()
        logger.debug(f"Status: {status}")
        self.sink.push(status)
        return status
