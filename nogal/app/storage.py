"""Filesystem mutations used by the curation engine."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StorageProtocol(Protocol):
    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def ensure_dir(self, path: Path) -> None: ...

    def delete(self, path: Path) -> None: ...

    def move(self, src: Path, dst: Path) -> None: ...


class LocalStorage:
    """Direct local filesystem access. Errors propagate as ``OSError``."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def delete(self, path: Path) -> None:
        path.unlink()
        logger.debug("Deleted %s", path)

    def move(self, src: Path, dst: Path) -> None:
        # Plain rename: moving across devices fails with EXDEV and is reported by the caller.
        os.rename(str(src), str(dst))
        logger.debug("Renamed %s -> %s", src, dst)
