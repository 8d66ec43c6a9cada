"""
Gather host health for the status bar: CPU load, memory, temperature, fan speed.
Each extractor shells out through an injectable command runner and degrades to a
zero / "N/A" / not-present value instead of raising.
"""
from __future__ import annotations

import time
from typing import Iterable

from collectors.cpu import CpuCollector
from collectors.host import HostProbe
from collectors.istats import FanCollector, TemperatureCollector
from collectors.memory import MemoryCollector
from collectors.runner import CommandRunner, run_command
from config import Settings
from models import FanStatus, HostReport, MemorySnapshot


def get_cpu_usage_percent(cores: int, runner: CommandRunner = run_command) -> float:
    return CpuCollector(cores, runner=runner).collect_safe()


def get_memory_gb(
    total_bytes: int,
    page_size: int,
    runner: CommandRunner = run_command,
) -> MemorySnapshot:
    return MemoryCollector(total_bytes, page_size, runner=runner).collect_safe()


def get_temperature(istats_path: str, runner: CommandRunner = run_command) -> str:
    return TemperatureCollector(istats_path, runner=runner).collect_safe()


def get_fan_info(
    model: str,
    istats_path: str,
    fanless_models: Iterable[str] = ("MacBookAir",),
    runner: CommandRunner = run_command,
) -> FanStatus:
    return FanCollector(model, istats_path, fanless_models, runner=runner).collect_safe()


def collect(
    settings: Settings | None = None,
    runner: CommandRunner = run_command,
    probe: HostProbe | None = None,
) -> HostReport:
    """Run one sequential extraction cycle. Never raises."""
    settings = settings or Settings()
    probe = probe or HostProbe(runner)

    model = probe.hw_model()
    return HostReport(
        model=model,
        cpu_percent=get_cpu_usage_percent(probe.logical_cores(), runner),
        memory=get_memory_gb(probe.total_memory_bytes(), probe.page_size(), runner),
        temperature=get_temperature(settings.istats_path, runner),
        fan=get_fan_info(model, settings.istats_path, settings.fanless_models, runner),
        timestamp=time.time(),
    )
