"""Status sink configuration data structure."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class SinkConfig:
    """Command receiving the status line as its last argument."""
    command: List[str] = field(default_factory=lambda: ["xsetroot", "-name"])

    def __post_init__(self):
        """Fix invalid values."""
        if not self.command:
            self.command = ["xsetroot", "-name"]
