"""Destinations for the composed status line."""
import subprocess
from typing import List, Optional

from rich.console import Console

from ..utils.logger import get_logger

logger = get_logger(__name__)


class XsetrootSink:
    """Sets the root window name, which dwm shows as its status text."""

    def __init__(self, command: Optional[List[str]] = None):
        """Initialize the sink; the status line is appended to command."""
        self.command = list(command or ["xsetroot", "-name"])

    def push(self, status: str):
        """Run the command once; failures are ignored, the next tick resends."""
        try:
            result = subprocess.run(self.command + [status], capture_output=True, check=False)
        except OSError as e:
            logger.debug(f"Cannot run {self.command[0]}: {e}")
            return
        if result.returncode != 0:
            logger.debug(f"{self.command[0]} exited with {result.returncode}")


class ConsoleSink:
    """Prints the status line, for bars that read lines from stdin."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the sink with a rich console writing to stdout."""
        self.console = console or Console(highlight=False)

    def push(self, status: str):
        """Print one status line verbatim."""
        self.console.print(status, markup=False, highlight=False, emoji=False, soft_wrap=True)
