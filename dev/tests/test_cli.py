from __future__ import annotations

import json
from pathlib import Path

import pytest

import start_nogal
from nogal.core.category_db import CATEGORY_PATH_ENV
from nogal.version import load_version

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def _no_env_catver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CATEGORY_PATH_ENV, raising=False)
    monkeypatch.delenv("NOGAL_LOG_JSON", raising=False)


def test_version(capsys) -> None:
    assert start_nogal.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"NoGAL v{load_version()}"


def test_directory_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        start_nogal.parse_arguments([])
    assert excinfo.value.code == 2


def test_parse_arguments_short_flags() -> None:
    args = start_nogal.parse_arguments(["-d", "roms", "-c", "Shooter", "-i", "-l", "-o", "-b", "bk"])
    assert (args.directory, args.category, args.backup) == ("roms", "Shooter", "bk")
    assert args.case_insensitive and args.list and args.video


def test_missing_catver(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "catver.ini"
    code = start_nogal.main(["-d", str(tmp_path), "--catver", str(missing)])
    err = capsys.readouterr().err
    assert code == 1
    assert "Error: catver.ini not found in the same directory as the executable." in err
    assert f"Looked for: {missing}" in err


def test_unreadable_catver(tmp_path: Path, capsys) -> None:
    catver = tmp_path / "catver.ini"
    catver.write_bytes(b"[Category]\nx=\xff\n")
    code = start_nogal.main(["-d", str(tmp_path), "--catver", str(catver)])
    assert code == 1
    assert "Error reading catver.ini:" in capsys.readouterr().err


def test_catver_from_environment(make_rom_dir, catver_file: Path, monkeypatch, capsys) -> None:
    rom_dir = make_rom_dir(["sexyparo.zip", "pacman.zip"])
    monkeypatch.setenv(CATEGORY_PATH_ENV, str(catver_file))
    assert start_nogal.main(["-d", str(rom_dir), "-l"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Found 1 matching games:", "sexyparo.zip - Tabletop / Mahjong * Mature *"]


def test_list_run(make_rom_dir, catver_file: Path, capsys) -> None:
    rom_dir = make_rom_dir(["galaga.zip", "dkong.zip", "strippkr.zip"])
    code = start_nogal.main(
        ["-d", str(rom_dir), "--catver", str(catver_file), "-l", "-c", "SHOOTER", "-i"]
    )
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Found 1 matching games:", "galaga.zip - Shooter / Flying Vertical"]
    assert (rom_dir / "galaga.zip").exists()


def test_move_run_with_report(make_rom_dir, catver_file: Path, tmp_path: Path, capsys) -> None:
    rom_dir = make_rom_dir(["strippkr.zip", "pacman.zip"], videos=["strippkr-video.mp4"])
    backup = tmp_path / "backup"
    report_path = tmp_path / "report.json"

    code = start_nogal.main([
        "-d", str(rom_dir), "--catver", str(catver_file),
        "-o", "-b", str(backup), "--report", str(report_path),
    ])

    assert code == 0
    assert (backup / "strippkr.zip").exists()
    assert (backup / "video" / "strippkr-video.mp4").exists()
    assert capsys.readouterr().out.splitlines()[-1] == "Successfully moved 1 games."
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["disposition"] == "move"
    assert payload["succeeded"] == 1


def test_missing_directory_exit_code(catver_file: Path, tmp_path: Path, capsys) -> None:
    code = start_nogal.main(["-d", str(tmp_path / "nope"), "--catver", str(catver_file)])
    assert code == 1
    assert f"Directory not found: {tmp_path / 'nope'}" in capsys.readouterr().err


def test_partial_failure_exit_code(make_rom_dir, catver_file: Path, monkeypatch, capsys) -> None:
    rom_dir = make_rom_dir(["strippkr.zip", "sexyparo.zip"])
    real_unlink = Path.unlink

    def _unlink(self, *args, **kwargs):
        if self.name == "sexyparo.zip":
            raise PermissionError(13, "Permission denied", str(self))
        return real_unlink(self, *args, **kwargs)

    monkeypatch.setattr(Path, "unlink", _unlink)
    code = start_nogal.main(["-d", str(rom_dir), "--catver", str(catver_file)])
    captured = capsys.readouterr()
    assert code == 2
    assert "Error deleting sexyparo.zip:" in captured.err
    assert captured.out.splitlines()[-1] == "Successfully deleted 1 games."


def test_bad_user_config(tmp_path: Path, capsys) -> None:
    config = tmp_path / "nogal.yaml"
    config.write_text("logging:\n  level: chatty\n", encoding="utf-8")
    assert start_nogal.main(["-d", str(tmp_path), "--config", str(config)]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_log_dir_writes_files(make_rom_dir, catver_file: Path, tmp_path: Path) -> None:
    rom_dir = make_rom_dir(["pacman.zip"])
    log_dir = tmp_path / "logs"
    assert start_nogal.main(["-d", str(rom_dir), "--catver", str(catver_file), "-l",
                             "--log-dir", str(log_dir), "--log-json"]) == 0
    lines = (log_dir / "nogal.log").read_text(encoding="utf-8").splitlines()
    assert any(json.loads(line)["message"].startswith("Starting NoGAL") for line in lines)


def test_log_dir_that_is_a_file_exits_with_error(make_rom_dir, catver_file: Path, tmp_path: Path, capsys) -> None:
    rom_dir = make_rom_dir(["pacman.zip"])
    blocker = tmp_path / "logs"
    blocker.write_text("not a directory", encoding="utf-8")

    code = start_nogal.main(["-d", str(rom_dir), "--catver", str(catver_file), "-l",
                             "--log-dir", str(blocker)])

    captured = capsys.readouterr()
    assert code == 1
    assert f"Error: cannot create log directory {blocker}:" in captured.err
    assert captured.out == ""
    assert blocker.read_text(encoding="utf-8") == "not a directory"
