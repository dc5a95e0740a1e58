"""Engine configuration loading."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Tunable limits for one orchestration cycle."""

    max_recommendations: int = 2
    max_focus_tasks: int = 2
    log_level: str = "INFO"


def get_default_config() -> EngineConfig:
    return EngineConfig()


def load_config(config_path: str) -> EngineConfig:
    """Load configuration from a YAML or JSON file, defaults filling the gaps."""

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as handle:
        if path.suffix.lower() in (".yaml", ".yml"):
            payload = yaml.safe_load(handle)
        elif path.suffix.lower() == ".json":
            payload = json.load(handle)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    if payload is None:
        logger.warning("Config file %s is empty, using defaults", path)
        return get_default_config()
    if not isinstance(payload, dict):
        raise ValueError("Config payload must be a mapping")

    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"Unknown config keys {unknown}")

    config = EngineConfig(**{**asdict(get_default_config()), **payload})
    for name in ("max_recommendations", "max_focus_tasks"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"{name} must be a non-negative integer")
    if not isinstance(config.log_level, str) or not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"Unknown log_level {config.log_level!r}")
    return config
