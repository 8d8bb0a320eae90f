"""Fixed-width field formatting for the status line."""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

BPS_SIGN = "b"
KIBPS_SIGN = "kb"
MIBPS_SIGN = "mb"

KIB = 1024
MIB = 1024 * 1024


@dataclass
class HighlightStyle:
    """Threshold to (prefix, suffix) mapping wrapped around a rendered field.

    Rules are checked in order and the first match wins. With ``at_most``
    false a rule matches when the value is >= its threshold, otherwise when
    it is <= the threshold.
    """
    rules: List[Tuple[int, str, str]] = field(default_factory=list)
    at_most: bool = False

    def wrap(self, value: int, text: str) -> str:
        """Return text wrapped in the markers of the first matching rule."""
        for threshold, prefix, suffix in self.rules:
            matched = value <= threshold if self.at_most else value >= threshold
            if matched:
                return prefix + text + suffix
        return text


def _fixed_number(value: float) -> str:
    """Render value in a three or four character field."""
    if value >= 100:
        return f"{value:3.0f}"
    if value >= 10:
        return f"{value:4.1f}"
    return f" {value:3.1f}"


def format_rate(label: str, rate: int, float_separator: str = "") -> str:
    """Build a fixed width transfer rate string with a fitting unit suffix."""
    if rate < 0:
        return label + " ERR"

    speed = float(rate)
    suffix = BPS_SIGN

    if speed >= 1000 * MIB:  # > 999 MiB/s
        return label + "ERR"
    elif speed >= 1000 * KIB:
        speed /= MIB
        suffix = MIBPS_SIGN
    elif speed >= 1000:
        speed /= KIB
        suffix = KIBPS_SIGN

    number = _fixed_number(speed).replace(".", float_separator, 1)
    return label + number + suffix


def format_percentage(label: str, percentage: int,
                      style: Optional[HighlightStyle] = None) -> str:
    """Render label followed by a right aligned three digit percentage."""
    text = f"{label}{percentage:3d}"
    if style is None:
        return text
    return style.wrap(percentage, text)
