"""Tests for the status line sinks."""

import io
import subprocess

from rich.console import Console

from dwmstatus.core import sink as sink_module
from dwmstatus.core.sink import ConsoleSink, XsetrootSink


def test_xsetroot_sink_appends_status(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(sink_module.subprocess, "run", fake_run)
    XsetrootSink().push("RX  00b | CPU 10%")

    assert calls == [["xsetroot", "-name", "RX  00b | CPU 10%"]]


def test_xsetroot_sink_ignores_failures(monkeypatch):
    monkeypatch.setattr(sink_module.subprocess, "run",
                        lambda args, **kwargs: subprocess.CompletedProcess(args, 1))
    XsetrootSink(["false"]).push("status")


def test_missing_command_is_ignored():
    XsetrootSink(["dwmstatus-no-such-command-xyz"]).push("status")


def test_console_sink_prints_verbatim():
    buffer = io.StringIO()
    ConsoleSink(Console(file=buffer, width=200)).push("[b]RX[/b] ⚡ 50% | CPU 10%")
    assert buffer.getvalue() == "[b]RX[/b] ⚡ 50% | CPU 10%\n"
