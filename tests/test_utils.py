"""Tests for utils."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils import (
    bytes_to_gb,
    clamp,
    format_gb_pair,
    format_percent,
    format_rpm,
    setup_logging,
)


def test_bytes_to_gb() -> None:
    assert bytes_to_gb(0) == 0.0
    assert bytes_to_gb(1024**3) == 1.0
    assert bytes_to_gb(17179869184) == 16.0


def test_clamp() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_format_helpers() -> None:
    assert format_percent(12.345) == "12.3%"
    assert format_percent(12.345, 2) == "12.35%"
    assert format_gb_pair(2.86102294921875, 16.0) == "2.861 / 16.000 GB"
    assert format_rpm(2160.0) == "2160 RPM"


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "logs" / "sysbar.log"
    try:
        setup_logging("WARNING", log_file)
        logging.getLogger("sysbar.test").warning("disk says hi")
        for h in root.handlers:
            h.flush()
        assert "disk says hi" in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_unusable_file_falls_back_to_stderr(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        # a directory, then a non-path value from YAML
        for bad in (tmp_path, ["not", "a", "path"]):
            setup_logging("INFO", bad)  # type: ignore[arg-type]
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0], logging.StreamHandler)
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
