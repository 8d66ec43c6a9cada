"""Tests for status-bar rendering."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from models import FanStatus, HostReport, MemorySnapshot
from report import REFRESH_LINE, render, render_detail, render_summary


def _report(fan: FanStatus | None = None) -> HostReport:
    return HostReport(
        model="MacBookPro18,2",
        cpu_percent=12.345,
        memory=MemorySnapshot(used_gb=750000 * 4096 / 2**30, total_gb=16.0),
        temperature="45.2°C",
        fan=fan or FanStatus(),
    )


def test_summary_line() -> None:
    assert render_summary(_report()) == "🌡️ 45.2°C | 💻 12.3% CPU | 🧠 2.861 / 16.000 GB"


def test_summary_with_unavailable_temperature() -> None:
    r = _report()
    r.temperature = "N/A"
    assert render_summary(r).startswith("🌡️ N/A | ")


def test_detail_without_fan() -> None:
    lines = render_detail(_report()).splitlines()
    assert lines == [
        "---",
        "🌡️ Temp: 45.2°C",
        "💻 CPU: 12.35%",
        "💾 Memory: 2.861 / 16.000 GB",
        REFRESH_LINE,
    ]


def test_detail_with_fan() -> None:
    fan = FanStatus(present=True, rpm=2160.0, max_rpm=7200.0, percent=2160.0 / 7200.0 * 100.0)
    lines = render_detail(_report(fan)).splitlines()
    assert lines[4] == "🌀 Fan: 2160 RPM (30.0% of 7200 RPM)"
    assert lines[-1] == "Refresh Now | refresh=true"


def test_render_puts_summary_first() -> None:
    out = render(_report())
    assert out.endswith("refresh=true\n")
    first, second = out.splitlines()[:2]
    assert first == render_summary(_report())
    assert second == "---"
