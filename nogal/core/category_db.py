"""Category database (catver.ini) loading.

The parser is a pure function of the file text so it can be exercised
without touching the filesystem; ``load_category_file`` adds the I/O and
maps failures onto the project's configuration errors.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import CategoryFileNotFoundError, CategoryFileUnreadableError

logger = logging.getLogger(__name__)

CATEGORY_SECTION = "Category"
DEFAULT_CATEGORY_FILENAME = "catver.ini"
CATEGORY_PATH_ENV = "NOGAL_CATVER"

CategoryMap = Mapping[str, str]


def parse_category_text(text: str, section: str = CATEGORY_SECTION) -> CategoryMap:
    """Parse catver.ini text into a read-only ``{rom: category}`` mapping.

    Only the first ``[<section>]`` block is consumed. The block ends at the
    next header of any kind, and nothing after it is read, even a repeated
    ``[<section>]`` header.
    """
    header = f"[{section}]"
    categories: Dict[str, str] = {}
    in_section = False

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line == header and not in_section:
            in_section = True
            continue
        if line.startswith("["):
            if in_section:
                break
            continue
        if not in_section or not line or line.startswith(";"):
            continue

        # Split on the first "=" only; categories may contain "=" themselves.
        equal_index = line.find("=")
        if equal_index <= 0:
            continue
        categories[line[:equal_index]] = line[equal_index + 1:]

    return MappingProxyType(categories)


def load_category_file(
    path: Union[str, Path],
    *,
    encoding: str = "utf-8",
    section: str = CATEGORY_SECTION,
) -> CategoryMap:
    """Read and parse a category file.

    Raises:
        CategoryFileNotFoundError: ``path`` is not an existing file.
        CategoryFileUnreadableError: the file cannot be read or decoded.
    """
    path_obj = Path(path)
    if not path_obj.is_file():
        raise CategoryFileNotFoundError(
            f"{path_obj.name} not found in the expected location",
            file_path=str(path_obj),
        )

    try:
        text = path_obj.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise CategoryFileUnreadableError(
            f"Error reading {path_obj.name}: {exc}",
            file_path=str(path_obj),
            details={"cause": type(exc).__name__},
        ) from exc

    categories = parse_category_text(text, section=section)
    logger.debug("Loaded %d entries from %s", len(categories), path_obj)
    return categories


def executable_dir() -> Path:
    """Directory of the running executable (frozen build) or of start_nogal.py."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def default_category_path(filename: str = DEFAULT_CATEGORY_FILENAME) -> Path:
    return executable_dir() / filename


def _get_cfg(cfg: Optional[Mapping[str, Any]], *keys: str, default: Any = None) -> Any:
    if cfg is None:
        return default
    current: Any = cfg
    for key in keys:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def resolve_category_path(
    cli_path: Optional[str] = None,
    cfg: Optional[Mapping[str, Any]] = None,
) -> Path:
    """Pick the category file: CLI flag, then $NOGAL_CATVER, then config, then default."""
    if cli_path:
        return Path(cli_path).expanduser()

    env_path = os.environ.get(CATEGORY_PATH_ENV, "").strip()
    if env_path:
        return Path(env_path).expanduser()

    configured = _get_cfg(cfg, "category_file", "path")
    if configured:
        return Path(str(configured)).expanduser()

    filename = _get_cfg(cfg, "category_file", "filename", default=DEFAULT_CATEGORY_FILENAME)
    return default_category_path(str(filename))
