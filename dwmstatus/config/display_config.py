"""Display configuration data structure."""
from dataclasses import dataclass, field

from .highlight_config import HighlightConfig


@dataclass
class DisplayConfig:
    """Status line layout preferences."""
    field_separator: str = " | "
    float_separator: str = ""
    time_format: str = "%A %B %d  %-I:%M:%S %p"
    highlight: HighlightConfig = field(default_factory=HighlightConfig)

    def __post_init__(self):
        """Fix invalid values."""
        if not self.time_format:
            self.time_format = "%A %B %d  %-I:%M:%S %p"
