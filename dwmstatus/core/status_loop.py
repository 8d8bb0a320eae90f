"""Second-aligned tick loop."""
import time
from typing import Callable

from ..utils.logger import get_logger
from .composer import StatusComposer

logger = get_logger(__name__)


def until_next_second(now: float) -> float:
    """Seconds left until the next whole wall-clock second."""
    return 1.0 - (now % 1.0)


class StatusLoop:
    """Runs the composer at the top of every second until stopped."""

    def __init__(self, composer: StatusComposer,
                 clock: Callable[[], float] = time.time,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize the loop; clock and sleep are replaceable for tests."""
        self.composer = composer
        self.clock = clock
        self.sleep = sleep
        self.ticks = 0

    def run_once(self):
        """One tick, then wait for the next second boundary."""
        self.composer.tick()
        self.ticks += 1
        self.sleep(until_next_second(self.clock()))

    def run(self, max_ticks: int = 0):
        """Tick forever, or max_ticks times when it is positive."""
        logger.info("Status loop started")
        while max_ticks <= 0 or self.ticks < max_ticks:
            self.run_once()
