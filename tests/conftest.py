"""
Pytest configuration and shared fixtures for the dwmstatus test suite.
"""

import sys
import tempfile
from pathlib import Path

import psutil
import pytest

# Ensure project root is on PYTHONPATH so 'dwmstatus' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dwmstatus.config import Config  # noqa: E402
from dwmstatus.config.cpu_config import CPUConfig  # noqa: E402
from dwmstatus.config.memory_config import MemoryConfig  # noqa: E402
from dwmstatus.config.network_config import NetworkConfig  # noqa: E402
from dwmstatus.config.power_config import PowerConfig  # noqa: E402


NET_DEV = """\
Inter-|   Receive                                                |  Transmit
 face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
    lo: 1000 10 0 0 0 0 0 0 1000 10 0 0 0 0 0 0
enp2s6: 5000 50 0 0 0 0 0 0 3000 30 0 0 0 0 0 0
 wlan0: 2000 20 0 0 0 0 0 0 1000 10 0 0 0 0 0 0
"""

MEMINFO = """\
MemTotal:           1000 kB
MemFree:             400 kB
MemAvailable:        600 kB
Buffers:             100 kB
Cached:              100 kB
SwapCached:            0 kB
"""


def write_net_dev(path: Path, rows):
    """Write a /proc/net/dev style file from (name, rx, tx) rows."""
    lines = NET_DEV.splitlines()[:2]
    for name, rx, tx in rows:
        lines.append(f"{name:>6}: {rx} 0 0 0 0 0 0 0 {tx} 0 0 0 0 0 0 0")
    path.write_text("\n".join(lines) + "\n")


def add_battery(supply: Path, name: str, full: int, now: int, unit: str = "energy"):
    """Create a battery entry exposing <unit>_full and <unit>_now."""
    battery = supply / name
    battery.mkdir()
    (battery / f"{unit}_full").write_text(f"{full}\n")
    (battery / f"{unit}_now").write_text(f"{now}\n")
    return battery


@pytest.fixture
def proc_dir(tmp_path):
    """Fake /proc holding net/dev and meminfo."""
    proc = tmp_path / "proc"
    (proc / "net").mkdir(parents=True)
    (proc / "net" / "dev").write_text(NET_DEV)
    (proc / "meminfo").write_text(MEMINFO)
    return proc


@pytest.fixture
def fake_loadavg(monkeypatch):
    """Replace psutil.getloadavg; set .value to change the reported load."""

    class FakeLoadAvg:
        value = (1.00, 0.80, 0.40)

        def __call__(self):
            if isinstance(self.value, Exception):
                raise self.value
            return self.value

    fake = FakeLoadAvg()
    monkeypatch.setattr(psutil, "getloadavg", fake)
    return fake


@pytest.fixture
def supply_dir(tmp_path):
    """Fake /sys/class/power_supply with a plugged adapter and one battery."""
    supply = tmp_path / "power_supply"
    supply.mkdir()
    (supply / "ADP1").mkdir()
    (supply / "ADP1" / "online").write_text("1\n")
    add_battery(supply, "BAT0", full=5000, now=2500)
    return supply


@pytest.fixture
def config(proc_dir, supply_dir, fake_loadavg):
    """Config pointing every collector at the fake trees."""
    return Config(
        network=NetworkConfig(dev_path=str(proc_dir / "net" / "dev")),
        cpu=CPUConfig(cores=4),
        memory=MemoryConfig(meminfo_path=str(proc_dir / "meminfo")),
        power=PowerConfig(supply_path=str(supply_dir)),
    )


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class RecordingSink:
    """Sink keeping every pushed line."""

    def __init__(self):
        self.lines = []

    def push(self, status: str):
        self.lines.append(status)


@pytest.fixture
def sink():
    return RecordingSink()
