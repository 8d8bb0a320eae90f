"""Network throughput collector reading /proc/net/dev."""
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from ..config.network_config import NetworkConfig
from ..utils.logger import get_logger
from .formatting import format_rate

logger = get_logger(__name__)

RX_COLUMN = 0
TX_COLUMN = 8


@dataclass(frozen=True)
class NetworkCounterState:
    """Cumulative byte counters summed over the monitored interfaces."""
    rx_bytes: int = 0
    tx_bytes: int = 0


def parse_dev_line(line: str):
    """Split one /proc/net/dev line into (interface, rx_bytes, tx_bytes).

    Returns None for header lines and anything else that does not parse.
    """
    name, sep, counters = line.partition(":")
    if not sep:
        return None
    columns = counters.split()
    if len(columns) <= TX_COLUMN:
        return None
    try:
        return name.strip(), int(columns[RX_COLUMN]), int(columns[TX_COLUMN])
    except ValueError:
        return None


def sum_counters(lines: Iterable[str], interfaces: FrozenSet[str]) -> NetworkCounterState:
    """Sum received and transmitted bytes of the wanted interfaces."""
    rx_now, tx_now = 0, 0
    for line in lines:
        record = parse_dev_line(line)
        if record is None:
            continue
        name, rx, tx = record
        if name in interfaces:
            rx_now += rx
            tx_now += tx
    return NetworkCounterState(rx_now, tx_now)


class NetworkCollector:
    """Turns interface byte counters into receive/transmit rates."""

    def __init__(self, config: NetworkConfig, float_separator: str = "",
                 state: Optional[NetworkCounterState] = None):
        """Initialize the network collector."""
        self.config = config
        self.interfaces = frozenset(config.interfaces)
        self.float_separator = float_separator
        self.state = state or NetworkCounterState()

    def sample(self) -> str:
        """Read the counters once and return the formatted rate field."""
        try:
            with open(self.config.dev_path, 'r', encoding='utf-8', errors='replace') as f:
                now = sum_counters(f, self.interfaces)
        except OSError as e:
            logger.debug(f"Cannot read {self.config.dev_path}: {e}")
            return f"{self.config.rx_sign} ERR {self.config.tx_sign} ERR"

        text, self.state = self.advance(self.state, now)
        return text

    def advance(self, previous: NetworkCounterState, now: NetworkCounterState):
        """Format the delta between two samples; returns (text, new_state).

        The new state is always ``now`` so a counter reset only costs one tick.
        """
        rx_rate = now.rx_bytes - previous.rx_bytes
        tx_rate = now.tx_bytes - previous.tx_bytes
        if rx_rate < 0 or tx_rate < 0:
            logger.debug(f"Counter regression rx={rx_rate} tx={tx_rate}")

        text = " ".join((
            format_rate(self.config.rx_sign, rx_rate, self.float_separator),
            format_rate(self.config.tx_sign, tx_rate, self.float_separator),
        ))
        return text, now
