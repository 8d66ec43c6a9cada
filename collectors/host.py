"""
Host probe: hardware model, logical cores, physical memory size and VM page size.
"""
from __future__ import annotations

import resource
from functools import lru_cache

import psutil

from collectors.runner import CommandRunner, run_command
from utils import get_logger

logger = get_logger(__name__)

UNKNOWN_MODEL = "Unknown"
DEFAULT_PAGE_SIZE = 4096


@lru_cache(maxsize=1)
def system_page_size() -> int:
    """VM page size; read once for the process lifetime."""
    try:
        size = resource.getpagesize()
    except (OSError, ValueError):
        return DEFAULT_PAGE_SIZE
    return size if size > 0 else DEFAULT_PAGE_SIZE


class HostProbe:
    """Single-shot native queries, each with a safe default."""

    def __init__(self, runner: CommandRunner = run_command) -> None:
        self.runner = runner

    def hw_model(self) -> str:
        model = self.runner("sysctl -n hw.model").strip()
        return model or UNKNOWN_MODEL

    def logical_cores(self) -> int:
        try:
            cores = psutil.cpu_count(logical=True)
        except (OSError, psutil.Error):
            cores = None
        return cores if cores and cores > 0 else 1

    def total_memory_bytes(self) -> int:
        try:
            return int(psutil.virtual_memory().total)
        except (OSError, psutil.Error) as e:
            logger.warning("Total memory query failed: %s", e)
            return 0

    def page_size(self) -> int:
        return system_page_size()
