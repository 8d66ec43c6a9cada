"""
Collectors package: one extractor per host metric, all behind a command-runner seam.
"""
from __future__ import annotations

from collectors.base import BaseCollector
from collectors.cpu import CpuCollector
from collectors.host import HostProbe
from collectors.istats import FanCollector, TemperatureCollector
from collectors.memory import MemoryCollector
from collectors.runner import CommandRunner, run_command

__all__ = [
    "BaseCollector",
    "CommandRunner",
    "CpuCollector",
    "FanCollector",
    "HostProbe",
    "MemoryCollector",
    "TemperatureCollector",
    "run_command",
]
