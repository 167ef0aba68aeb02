from __future__ import annotations

import os
from pathlib import Path
from typing import List

import pytest

from nogal.core.rom_utils import is_rom_filename, list_rom_files, list_video_files, rom_identifier


def test_rom_identifier_strips_final_extension_only() -> None:
    assert rom_identifier("pacman.zip") == "pacman"
    assert rom_identifier("weird.name.7z") == "weird.name"
    assert rom_identifier("/roms/sf2.chd") == "sf2"


@pytest.mark.parametrize(
    "name, expected",
    [("a.zip", True), ("a.ZIP", True), ("a.7z", True), ("a.Chd", True), ("a.rar", False), ("zip", False)],
)
def test_is_rom_filename(name: str, expected: bool) -> None:
    assert is_rom_filename(name) is expected


def test_list_rom_files_filters_and_sorts(make_rom_dir) -> None:
    rom_dir = make_rom_dir(["mk.zip", "readme.txt", "dkong.7Z", "area51.chd"])
    (rom_dir / "folder.zip").mkdir()
    assert list_rom_files(rom_dir) == ["area51.chd", "dkong.7Z", "mk.zip"]


def test_list_rom_files_is_not_recursive(make_rom_dir) -> None:
    rom_dir = make_rom_dir(["top.zip"])
    (rom_dir / "sub").mkdir()
    (rom_dir / "sub" / "nested.zip").write_bytes(b"")
    assert list_rom_files(rom_dir) == ["top.zip"]


def test_list_rom_files_unreadable_directory_reports(tmp_path: Path) -> None:
    messages: List[str] = []
    assert list_rom_files(tmp_path / "missing", log_cb=messages.append) == []
    assert len(messages) == 1
    assert messages[0].startswith("Error reading directory")


def test_list_video_files(make_rom_dir) -> None:
    rom_dir = make_rom_dir(
        ["mk.zip"],
        videos=["mk-video.mp4", "mk-video.avi", "mk2-video.mp4", "mk.mp4"],
    )
    found = list_video_files(rom_dir, "mk")
    assert [p.name for p in found] == ["mk-video.avi", "mk-video.mp4"]
    assert all(p.parent == rom_dir / "video" for p in found)


def test_list_video_files_without_video_dir(make_rom_dir) -> None:
    rom_dir = make_rom_dir(["mk.zip"])
    assert list_video_files(rom_dir, "mk") == []


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_list_video_files_unreadable_reports(make_rom_dir) -> None:
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("root bypasses directory permissions")
    rom_dir = make_rom_dir(["mk.zip"], videos=["mk-video.mp4"])
    video_dir = rom_dir / "video"
    video_dir.chmod(0o000)
    messages: List[str] = []
    try:
        assert list_video_files(rom_dir, "mk", log_cb=messages.append) == []
    finally:
        video_dir.chmod(0o755)
    assert messages and "video directory" in messages[0]
