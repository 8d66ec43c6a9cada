"""
iStats collectors: CPU temperature and fan speed scraped from the iStats CLI.

Both parsers are best-effort scrapes of free-form text. They never raise; a
format change in iStats shows up as "N/A" or as a missing fan line.
"""
from __future__ import annotations

import re
import shlex
from typing import Iterable

from collectors.base import BaseCollector
from collectors.runner import CommandRunner, run_command
from models import TEMPERATURE_UNAVAILABLE, FanStatus
from utils import clamp, get_logger

logger = get_logger(__name__)

# e.g. "CPU temp: 45.2°C"
TEMP_RE = re.compile(r"CPU temp:\s+([\d.]+°C)")

# e.g. "Fan 0: 2160 RPM  (min: 1200 max: 7200)"; min is captured but unused
FAN_RE = re.compile(
    r"Fan\s+\d+.*?(\d+(?:\.\d+)?)\s*RPM.*?min:\s*(\d+(?:\.\d+)?).*?max:\s*(\d+(?:\.\d+)?)",
    re.I,
)


def istats_command(istats_path: str, *args: str) -> str:
    return " ".join([shlex.quote(istats_path), *args])


def parse_temperature(text: str) -> str | None:
    """Return the '<number>°C' token verbatim, or None if absent."""
    m = TEMP_RE.search(text or "")
    return m.group(1) if m else None


def fan_percent(current: float, max_rpm: float) -> float:
    """current as a share of max, clamped to [0, 100]. max_rpm must be > 0."""
    return clamp((current / max_rpm) * 100.0, 0.0, 100.0)


def parse_fan(text: str) -> FanStatus:
    m = FAN_RE.search(text or "")
    if m is None:
        return FanStatus()
    try:
        current = float(m.group(1))
        max_rpm = float(m.group(3))
    except ValueError:
        return FanStatus()
    if max_rpm <= 0.0:
        return FanStatus()
    return FanStatus(
        present=True,
        rpm=current,
        max_rpm=max_rpm,
        percent=fan_percent(current, max_rpm),
    )


def is_fanless(model: str, fanless_models: Iterable[str]) -> bool:
    return any(marker and marker in model for marker in fanless_models)


class TemperatureCollector(BaseCollector[str]):
    name = "temperature"

    def __init__(self, istats_path: str, runner: CommandRunner = run_command) -> None:
        self.istats_path = istats_path
        self.runner = runner

    def collect(self) -> str:
        out = self.runner(istats_command(self.istats_path, "cpu", "temp"))
        logger.debug("istats output = [%s]", out)
        return parse_temperature(out) or TEMPERATURE_UNAVAILABLE

    def fallback(self) -> str:
        return TEMPERATURE_UNAVAILABLE


class FanCollector(BaseCollector[FanStatus]):
    """Fan speed, skipped entirely on fanless models."""

    name = "fan"

    def __init__(
        self,
        model: str,
        istats_path: str,
        fanless_models: Iterable[str] = ("MacBookAir",),
        runner: CommandRunner = run_command,
    ) -> None:
        self.model = model
        self.istats_path = istats_path
        self.fanless_models = tuple(fanless_models)
        self.runner = runner

    def collect(self) -> FanStatus:
        if is_fanless(self.model, self.fanless_models):
            logger.debug("%s is fanless; skipping fan probe", self.model)
            return FanStatus()
        out = self.runner(istats_command(self.istats_path, "fan", "speed"))
        if not out:
            return FanStatus()
        return parse_fan(out)

    def fallback(self) -> FanStatus:
        return FanStatus()
