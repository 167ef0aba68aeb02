from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CATVER_TEXT = """;; catver.ini 0.250 / 01-Jan-25 ;;

[FOLDER_SETTINGS]
RootFolderIcon mame
SubFolderIcon folder

[Category]
pacman=Maze / Collect
galaga=Shooter / Flying Vertical
sexyparo=Tabletop / Mahjong * Mature *
strippkr=Casino / Cards * Mature *
dkong=Platform / Run Jump

[VerAdded]
pacman=0.30
"""


@pytest.fixture
def catver_text() -> str:
    return CATVER_TEXT


@pytest.fixture
def catver_file(tmp_path: Path) -> Path:
    path = tmp_path / "catver.ini"
    path.write_text(CATVER_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def make_rom_dir(tmp_path: Path) -> Callable[..., Path]:
    """Build a ROM directory with the given archives and video files."""

    def _make(roms: Iterable[str], videos: Iterable[str] = (), name: str = "roms") -> Path:
        rom_dir = tmp_path / name
        rom_dir.mkdir()
        for rom in roms:
            (rom_dir / rom).write_bytes(b"rom")
        videos = list(videos)
        if videos:
            video_dir = rom_dir / "video"
            video_dir.mkdir()
            for video in videos:
                (video_dir / video).write_bytes(b"video")
        return rom_dir

    return _make


@pytest.fixture(autouse=True)
def _restore_root_level():
    """setup_logging() changes the root level; reset it between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
