"""
CPU collector: sum of per-process %CPU from ps, normalized by logical core count.
"""
from __future__ import annotations

import math

from collectors.base import BaseCollector
from collectors.runner import CommandRunner, run_command

PS_CPU_COMMAND = "ps -A -o %cpu"


def sum_cpu_column(text: str) -> float:
    """Sum every finite numeric line of ps %cpu output. Header, junk and nan/inf lines are skipped."""
    total = 0.0
    for line in text.splitlines():
        token = line.strip().replace(",", ".")
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        if math.isfinite(value):
            total += value
    return total


def normalize_cpu(total_percent: float, cores: int) -> float:
    """Divide by cores (at least 1). Not clamped: a busy multi-core host can exceed 100."""
    return total_percent / max(1, cores)


class CpuCollector(BaseCollector[float]):
    name = "cpu"

    def __init__(self, cores: int, runner: CommandRunner = run_command) -> None:
        self.cores = cores
        self.runner = runner

    def collect(self) -> float:
        out = self.runner(PS_CPU_COMMAND)
        if not out:
            return 0.0
        return normalize_cpu(sum_cpu_column(out), self.cores)

    def fallback(self) -> float:
        return 0.0
