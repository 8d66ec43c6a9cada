"""
Memory collector: used = (active + wired + compressed) pages from vm_stat, total from the OS.
"""
from __future__ import annotations

from collectors.base import BaseCollector
from collectors.runner import CommandRunner, run_command
from models import MemorySnapshot
from utils import bytes_to_gb, get_logger

logger = get_logger(__name__)

VM_STAT_COMMAND = "vm_stat"

PAGES_ACTIVE = "Pages active"
PAGES_WIRED = "Pages wired down"
PAGES_COMPRESSED = "Pages occupied by compressor"
USED_PAGE_LABELS = (PAGES_ACTIVE, PAGES_WIRED, PAGES_COMPRESSED)


def parse_page_count(label: str, fragment: str) -> int:
    """Parse a vm_stat counter such as ' 500000.' into an int.

    The trailing period and all whitespace are dropped first. Unparsable text
    is logged and counts as 0.
    """
    cleaned = fragment.strip()
    if cleaned.endswith("."):
        cleaned = cleaned[:-1]
    cleaned = "".join(cleaned.split())
    if not cleaned:
        return 0
    try:
        return int(cleaned)
    except ValueError:
        logger.warning("Failed to parse page count for %r (raw = [%s])", label, fragment)
        return 0


def find_counter(vm_stat: str, label: str) -> str:
    """Return the raw text after '<label>:' in vm_stat output, or '' if absent."""
    prefix = f"{label}:"
    for line in vm_stat.splitlines():
        line = line.strip()
        if line.startswith(prefix):
            return line[len(prefix):]
    return ""


def used_pages(vm_stat: str) -> int:
    return sum(parse_page_count(label, find_counter(vm_stat, label)) for label in USED_PAGE_LABELS)


class MemoryCollector(BaseCollector[MemorySnapshot]):
    name = "memory"

    def __init__(
        self,
        total_bytes: int,
        page_size: int,
        runner: CommandRunner = run_command,
    ) -> None:
        self.total_bytes = total_bytes
        self.page_size = page_size
        self.runner = runner

    def collect(self) -> MemorySnapshot:
        pages = used_pages(self.runner(VM_STAT_COMMAND))
        return MemorySnapshot(
            used_gb=bytes_to_gb(pages * self.page_size),
            total_gb=bytes_to_gb(max(0, self.total_bytes)),
        )

    def fallback(self) -> MemorySnapshot:
        return MemorySnapshot(used_gb=0.0, total_gb=bytes_to_gb(max(0, self.total_bytes)))
