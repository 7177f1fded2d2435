from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .utils import resolve_home_path

OUTPUT_FILENAME = ".winget-monitor"
LOG_FILENAME = ".winget-monitor.log"

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        # null means a file directly under the user's home directory.
        "output_file": None,
        "log_file": None,
    },
    "command": {
        "line": "winget upgrade --accept-source-agreements --accept-package-agreements",
        "shell": ["powershell.exe", "-Command"],
    },
    "runtime": {
        "log_level": "WARNING",
    },
}


def _deep_update(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: str | Path | None) -> dict[str, Any]:
    cfg = json.loads(json.dumps(DEFAULT_CONFIG))
    if not config_path:
        return cfg
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError("Config root must be a mapping")
    _deep_update(cfg, payload)
    return cfg


def apply_cli_overrides(cfg: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    def _drop_none(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: _drop_none(v) for k, v in value.items() if v is not None}
        if isinstance(value, list):
            return [_drop_none(v) for v in value if v is not None]
        return value

    cleaned = _drop_none(overrides)
    _deep_update(cfg, cleaned)
    return cfg


def output_path(cfg: dict[str, Any]) -> Path:
    return resolve_home_path((cfg.get("paths") or {}).get("output_file"), OUTPUT_FILENAME)


def log_path(cfg: dict[str, Any]) -> Path:
    return resolve_home_path((cfg.get("paths") or {}).get("log_file"), LOG_FILENAME)
