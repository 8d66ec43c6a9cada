"""
Central configuration for sysbar.
Supports defaults, optional config file (YAML), and environment overrides.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from utils import env_str, get_logger

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULTS: dict[str, Any] = {
    "sensors": {
        "istats_path": "/usr/local/bin/iStats",
        "fanless_models": ["MacBookAir"],
    },
    "logging": {
        "level": "DEBUG",
        "file": None,
    },
}

# -----------------------------------------------------------------------------
# Config file loading (optional YAML)
# -----------------------------------------------------------------------------

_config_overrides: dict[str, Any] = {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _candidate_paths() -> tuple[Path, ...]:
    return (
        Path(os.getcwd()) / "config.yaml",
        Path(os.getcwd()) / "config.yml",
        Path(__file__).parent / "config.yaml",
        Path.home() / ".sysbar" / "config.yaml",
    )


def load_config_file(path: str | Path | None = None) -> bool:
    """Load optional YAML config. Returns True if loaded."""
    if path is None:
        for p in _candidate_paths():
            if p.exists():
                path = p
                break
    if path is None:
        return False
    path = Path(path).expanduser()
    if not path.exists():
        return False
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring config file %s: %s", path, e)
        return False
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level is not a mapping", path)
        return False
    global _config_overrides
    _config_overrides = _deep_merge(_config_overrides, data)
    return True


def reset_overrides() -> None:
    global _config_overrides
    _config_overrides = {}


# -----------------------------------------------------------------------------
# Environment overrides (take precedence over file)
# -----------------------------------------------------------------------------

def _env_overrides() -> dict[str, Any]:
    env: dict[str, Any] = {}
    istats = env_str("SYSBAR_ISTATS_PATH")
    if istats:
        env.setdefault("sensors", {})["istats_path"] = istats
    level = env_str("SYSBAR_LOG_LEVEL")
    if level:
        env.setdefault("logging", {})["level"] = level
    log_file = env_str("SYSBAR_LOG_FILE")
    if log_file:
        env.setdefault("logging", {})["file"] = log_file
    return env


def get(key_path: str, default: Any = None) -> Any:
    """Get config value by dot path, e.g. 'sensors.istats_path'."""
    merged: Any = _deep_merge(_deep_merge(DEFAULTS, _config_overrides), _env_overrides())
    for k in key_path.split("."):
        if isinstance(merged, dict) and k in merged:
            merged = merged[k]
        else:
            return default
    return merged


# -----------------------------------------------------------------------------
# Resolved settings passed into collectors
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Settings:
    istats_path: str = DEFAULTS["sensors"]["istats_path"]
    fanless_models: tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULTS["sensors"]["fanless_models"]))
    log_level: str = DEFAULTS["logging"]["level"]
    log_file: str | None = None


def load_settings(path: str | Path | None = None) -> Settings:
    load_config_file(path)
    fanless = get("sensors.fanless_models") or []
    if isinstance(fanless, str):
        fanless = [fanless]
    return Settings(
        istats_path=str(get("sensors.istats_path", DEFAULTS["sensors"]["istats_path"])),
        fanless_models=tuple(str(m) for m in fanless),
        log_level=str(get("logging.level", "DEBUG")),
        log_file=get("logging.file"),
    )
