"""Highlight thresholds configuration data structure."""
from dataclasses import dataclass, field
from typing import Dict, List

from ..collectors.formatting import HighlightStyle


def _rules(entries: List[Dict]) -> list:
    return [
        (int(entry["threshold"]), entry.get("prefix", ""), entry.get("suffix", ""))
        for entry in entries
    ]


@dataclass
class HighlightConfig:
    """Markers placed around percentage fields once they cross a threshold.

    Both lists hold mappings with ``threshold``, ``prefix`` and ``suffix``.
    The default markers are empty, so the status line stays plain until a
    config file sets e.g. dwm status2d colour escapes.
    """
    percentage: List[Dict] = field(default_factory=lambda: [
        {"threshold": 100, "prefix": "", "suffix": ""},
        {"threshold": 70, "prefix": "", "suffix": ""},
    ])
    battery: List[Dict] = field(default_factory=lambda: [
        {"threshold": 5, "prefix": "", "suffix": ""},
        {"threshold": 10, "prefix": "", "suffix": ""},
    ])

    def __post_init__(self):
        """Validate threshold entries."""
        for entry in self.percentage + self.battery:
            if "threshold" not in entry:
                raise ValueError(f"Highlight entry without threshold: {entry}")
        # Highest threshold first for ">=", lowest first for "<="
        self.percentage = sorted(self.percentage, key=lambda e: -int(e["threshold"]))
        self.battery = sorted(self.battery, key=lambda e: int(e["threshold"]))

    def percentage_style(self) -> HighlightStyle:
        """Style for CPU and memory fields (value >= threshold)."""
        return HighlightStyle(rules=_rules(self.percentage))

    def battery_style(self) -> HighlightStyle:
        """Style for the battery field (value <= threshold)."""
        return HighlightStyle(rules=_rules(self.battery), at_most=True)
