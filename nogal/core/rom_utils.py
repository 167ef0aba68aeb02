#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
NoGAL - ROM Filesystem Functions

Discovery of ROM archives in a MAME directory and of the preview videos
that belong to them.
"""

import os
import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

logger = logging.getLogger(__name__)

ROM_EXTENSIONS = frozenset({'.zip', '.7z', '.chd'})
VIDEO_DIR_NAME = 'video'
VIDEO_SUFFIX = '-video'

LogCallback = Callable[[str], None]


def _report(log_cb: Optional[LogCallback], message: str) -> None:
    logger.error(message)
    if log_cb is not None:
        log_cb(message)


def rom_identifier(filename: str) -> str:
    """Return the ROM name for a filename; only the final extension is stripped."""
    return os.path.splitext(os.path.basename(filename))[0]


def is_rom_filename(filename: str) -> bool:
    return os.path.splitext(filename)[1].lower() in ROM_EXTENSIONS


def video_stem(identifier: str) -> str:
    return f"{identifier}{VIDEO_SUFFIX}"


def list_rom_files(directory: Union[str, Path], log_cb: Optional[LogCallback] = None) -> List[str]:
    """
    List ROM filenames directly inside ``directory``.

    Args:
        directory: MAME ROM directory (not searched recursively)
        log_cb: Optional sink for failure messages

    Returns:
        Sorted filenames with a ROM extension; empty if the directory cannot be read
    """
    try:
        with os.scandir(directory) as entries:
            names = [
                entry.name for entry in entries
                if is_rom_filename(entry.name) and entry.is_file()
            ]
    except OSError as exc:
        _report(log_cb, f"Error reading directory {directory}: {exc}")
        return []

    names.sort()
    return names


def list_video_files(
    directory: Union[str, Path],
    identifier: str,
    log_cb: Optional[LogCallback] = None,
) -> List[Path]:
    """
    Find the companion videos of a ROM.

    Videos live in ``<directory>/video`` and are named ``<identifier>-video.<ext>``;
    any extension is accepted so several formats can exist for one ROM.
    """
    video_dir = Path(directory) / VIDEO_DIR_NAME
    if not video_dir.is_dir():
        return []

    wanted = video_stem(identifier)
    try:
        with os.scandir(video_dir) as entries:
            matches = [
                video_dir / entry.name for entry in entries
                if os.path.splitext(entry.name)[0] == wanted and entry.is_file()
            ]
    except OSError as exc:
        _report(log_cb, f"Error reading video directory {video_dir}: {exc}")
        return []

    matches.sort()
    return matches
