"""Config I/O utilities."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..core.category_db import executable_dir
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

USER_CONFIG_NAMES = ("nogal.yaml", "nogal.yml", "nogal.json")


def get_config_path() -> Path:
    """Packaged defaults shipped next to the package modules."""
    return Path(__file__).resolve().parents[1] / "config.json"


def load_config_data(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    if config_path is None:
        config_path = get_config_path()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Default config unavailable (%s): %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _parse_config_file(path: Path, raw: str) -> Dict[str, Any]:
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            f"Could not parse config file {path}: {exc}", "CONFIG_PARSE_ERROR", file_path=str(path)
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping", "CONFIG_PARSE_ERROR", file_path=str(path)
        )
    return data


def load_user_config(path: Union[str, Path]) -> Dict[str, Any]:
    path_obj = Path(path).expanduser()
    if not path_obj.is_file():
        raise ConfigurationError(
            f"Config file not found: {path_obj}", "CONFIG_NOT_FOUND", file_path=str(path_obj)
        )
    try:
        raw = path_obj.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"Error reading config file {path_obj}: {exc}", "CONFIG_UNREADABLE", file_path=str(path_obj)
        ) from exc
    return _parse_config_file(path_obj, raw)


def find_user_config(base_dir: Optional[Path] = None) -> Optional[Path]:
    base = base_dir or executable_dir()
    for name in USER_CONFIG_NAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
