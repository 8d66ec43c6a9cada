"""
Shared utilities: logging to the diagnostic channel, env helpers, unit math, formatting.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | int = "INFO",
    log_file: str | Path | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = LOG_DATE_FORMAT,
) -> None:
    """Configure root logger on stderr (stdout belongs to the status bar) and optional file."""
    log_level = getattr(logging, level.upper(), logging.INFO) if isinstance(level, str) else level
    if not isinstance(log_level, int):
        log_level = logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Exception | None = None
    if log_file:
        try:
            path = Path(log_file).expanduser()
            path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(path, encoding="utf-8"))
        except (OSError, TypeError) as e:
            file_error = e
    logging.basicConfig(
        level=log_level,
        format=format_string,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )
    if file_error is not None:
        logging.getLogger(__name__).warning("Log file %r unusable, logging to stderr only: %s", log_file, file_error)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# -----------------------------------------------------------------------------
# Config / env helpers
# -----------------------------------------------------------------------------

def env_str(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


# -----------------------------------------------------------------------------
# Units
# -----------------------------------------------------------------------------

BYTES_PER_GB = 1024**3


def bytes_to_gb(n: int | float) -> float:
    return n / BYTES_PER_GB


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------

def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_gb_pair(used: float, total: float, decimals: int = 3) -> str:
    """e.g. '2.861 / 16.000 GB'."""
    return f"{used:.{decimals}f} / {total:.{decimals}f} GB"


def format_rpm(rpm: float) -> str:
    return f"{rpm:.0f} RPM"
