"""Tests for models."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from models import TEMPERATURE_UNAVAILABLE, FanStatus, HostReport, MemorySnapshot


def test_fan_status_defaults_not_present() -> None:
    f = FanStatus()
    assert f.present is False
    assert f.rpm == 0.0
    assert f.max_rpm == 0.0
    assert f.percent == 0.0


def test_memory_snapshot_to_dict() -> None:
    d = MemorySnapshot(used_gb=2.5, total_gb=16.0).to_dict()
    assert d == {"used_gb": 2.5, "total_gb": 16.0}


def test_host_report_defaults() -> None:
    r = HostReport()
    assert r.model == "Unknown"
    assert r.temperature == TEMPERATURE_UNAVAILABLE
    assert r.cpu_percent == 0.0
    assert r.fan.present is False


def test_host_report_to_dict_nests() -> None:
    r = HostReport(
        model="MacBookPro18,2",
        cpu_percent=12.5,
        memory=MemorySnapshot(1.0, 8.0),
        temperature="45.2°C",
        fan=FanStatus(present=True, rpm=2160.0, max_rpm=7200.0, percent=30.0),
    )
    d = r.to_dict()
    assert d["model"] == "MacBookPro18,2"
    assert d["memory"]["total_gb"] == 8.0
    assert d["fan"]["rpm"] == 2160.0
    assert d["temperature"] == "45.2°C"
