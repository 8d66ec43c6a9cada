"""
Data models for sysbar: memory snapshot, fan status and the assembled host report.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

TEMPERATURE_UNAVAILABLE = "N/A"


@dataclass
class MemorySnapshot:
    """Used (active + wired + compressed) and total physical memory in GB.

    used_gb may exceed total_gb under compression edge cases; it is not clamped.
    """
    used_gb: float = 0.0
    total_gb: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"used_gb": self.used_gb, "total_gb": self.total_gb}


@dataclass
class FanStatus:
    """Fan reading. When present is False the numeric fields are zero."""
    present: bool = False
    rpm: float = 0.0
    max_rpm: float = 0.0
    percent: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "present": self.present,
            "rpm": self.rpm,
            "max_rpm": self.max_rpm,
            "percent": self.percent,
        }


@dataclass
class HostReport:
    """One reporting cycle's worth of extracted values, ready for rendering."""
    model: str = "Unknown"
    cpu_percent: float = 0.0
    memory: MemorySnapshot = field(default_factory=MemorySnapshot)
    temperature: str = TEMPERATURE_UNAVAILABLE
    fan: FanStatus = field(default_factory=FanStatus)
    timestamp: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "cpu_percent": self.cpu_percent,
            "memory": self.memory.to_dict(),
            "temperature": self.temperature,
            "fan": self.fan.to_dict(),
            "timestamp": self.timestamp,
        }
