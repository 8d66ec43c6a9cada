"""
Base collector interface: every metric extractor implements this.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseCollector(ABC, Generic[T]):
    """Abstract base for all metric collectors."""

    name: str = "base"

    @abstractmethod
    def collect(self) -> T:
        """Run extraction and return the typed value. Should degrade rather than raise."""
        ...

    @abstractmethod
    def fallback(self) -> T:
        """Value reported when extraction fails outright."""
        ...

    def collect_safe(self) -> T:
        """Wrapper that logs unexpected exceptions and returns the fallback value."""
        try:
            return self.collect()
        except Exception:
            logger.exception("%s collector failed; using fallback", self.name)
            return self.fallback()
