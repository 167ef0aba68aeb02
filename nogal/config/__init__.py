#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""NoGAL - Configuration Package

Packaged defaults (``nogal/config.json``) merged with an optional user file
(JSON or YAML) and validated with pydantic before use.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .io import find_user_config, get_config_path, load_config_data, load_user_config, merge_config
from .models import ConfigModel, validate_config

logger = logging.getLogger(__name__)


class Config:
    """Merged configuration data plus its validated model."""

    def __init__(self, config_data: Optional[Dict[str, Any]] = None, source: Optional[Path] = None):
        self.config_data = config_data or {}
        self.source = source
        self.model: ConfigModel = validate_config(self.config_data, str(source) if source else None)


def load_config(user_config_path: Optional[Union[str, Path]] = None) -> Config:
    """Load defaults, overlay the user config file and validate the result.

    Without an explicit path, ``nogal.yaml``/``nogal.json`` next to the
    executable is used when present.
    """
    data = load_config_data()
    source: Optional[Path] = None

    if user_config_path is not None:
        source = Path(user_config_path).expanduser()
    else:
        source = find_user_config()

    if source is not None:
        data = merge_config(data, load_user_config(source))
        logger.debug("User configuration loaded from %s", source)

    return Config(data, source=source)


__all__ = [
    'Config',
    'ConfigModel',
    'find_user_config',
    'get_config_path',
    'load_config',
    'load_config_data',
    'load_user_config',
    'merge_config',
    'validate_config',
]
