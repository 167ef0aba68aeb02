"""Curation engine: scan, classify, filter and act on ROMs and their videos."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from ..core.category_db import CategoryMap
from ..core.matching import describe_filter, matches
from ..core.rom_utils import VIDEO_DIR_NAME, list_rom_files, list_video_files, rom_identifier
from ..exceptions import BackupDirectoryError, DirectoryNotFoundError, FileOperationError, NoGalError
from .models import (
    CurationOptions,
    CurationReport,
    Disposition,
    FileActionResult,
    FileKind,
    LogCallback,
    MatchedRom,
)
from .storage import LocalStorage, StorageProtocol

logger = logging.getLogger(__name__)


def select_matches(
    rom_files: List[str],
    category_map: CategoryMap,
    category_filter: Optional[str] = None,
    case_insensitive: bool = False,
) -> List[MatchedRom]:
    """Return the ROMs whose catver.ini category satisfies the filter.

    ROMs without an entry in ``category_map`` are never selected.
    """
    selected: List[MatchedRom] = []
    for filename in rom_files:
        identifier = rom_identifier(filename)
        category = category_map.get(identifier)
        if category is None:
            continue
        if matches(category, category_filter, case_insensitive):
            selected.append(MatchedRom(filename=filename, identifier=identifier, category=category))
    return selected


class CurationEngine:
    """Runs one list/delete/move pass over a MAME ROM directory.

    The category map is handed in once and treated as read-only. Filesystem
    mutations go through ``storage`` so a fake can stand in during tests.
    Informational lines are sent to ``log_cb`` and failures to ``error_cb``.
    """

    def __init__(
        self,
        category_map: CategoryMap,
        storage: Optional[StorageProtocol] = None,
        log_cb: Optional[LogCallback] = None,
        error_cb: Optional[LogCallback] = None,
    ) -> None:
        self._categories = category_map
        self._storage: StorageProtocol = storage or LocalStorage()
        self._log_cb = log_cb
        self._error_cb = error_cb

    def _info(self, message: str) -> None:
        logger.info(message)
        if self._log_cb is not None:
            self._log_cb(message)

    def _fail(self, report: CurationReport, message: str) -> None:
        report.errors.append(message)
        if self._error_cb is not None:
            self._error_cb(message)

    def run(self, options: CurationOptions) -> CurationReport:
        report = CurationReport(directory=options.directory, disposition=options.disposition)
        logger.debug(
            "Curating %s (%s, filter: %s, videos: %s)",
            options.directory,
            options.disposition,
            describe_filter(options.category, options.case_insensitive),
            options.include_videos,
        )

        try:
            self._validate(options)
        except NoGalError as exc:
            logger.error("Run aborted: %s", exc.to_dict())
            report.status = "aborted"
            self._fail(report, str(exc))
            return report

        directory = Path(options.directory)
        rom_files = list_rom_files(directory, log_cb=lambda msg: self._fail(report, msg))
        report.scanned = len(rom_files)
        if not rom_files:
            report.notice = f"No ROM files found in {options.directory}."
            self._info(report.notice)
            return report

        report.matches = select_matches(
            rom_files, self._categories, options.category, options.case_insensitive
        )

        if options.disposition == "list":
            self._report_listing(report)
        else:
            self._execute(report, options)
        return report

    def _validate(self, options: CurationOptions) -> None:
        if not Path(options.directory).is_dir():
            raise DirectoryNotFoundError(
                f"Directory not found: {options.directory}", directory=options.directory
            )

        if options.disposition != "move":
            return

        backup_root = Path(str(options.backup_dir))
        if self._storage.exists(backup_root):
            if not self._storage.is_dir(backup_root):
                raise BackupDirectoryError(
                    f"Backup path is not a directory: {backup_root}", directory=str(backup_root)
                )
            return
        try:
            self._storage.ensure_dir(backup_root)
        except Exception as exc:
            raise BackupDirectoryError(
                f"Error creating backup directory {backup_root}: {exc}",
                directory=str(backup_root),
            ) from exc
        self._info(f"Created backup directory: {backup_root}")

    def _report_listing(self, report: CurationReport) -> None:
        if not report.matches:
            self._info("No matching games found.")
            return
        self._info(f"Found {len(report.matches)} matching games:")
        for match in report.matches:
            self._info(f"{match.filename} - {match.category}")

    def _execute(self, report: CurationReport, options: CurationOptions) -> None:
        disposition = report.disposition
        if not report.matches:
            self._info("No games to delete.")
            return

        directory = Path(options.directory)
        backup_root = Path(options.backup_dir) if disposition == "move" else None
        video_backup = backup_root / VIDEO_DIR_NAME if backup_root is not None else None

        verb = "Moving" if disposition == "move" else "Deleting"
        self._info(f"{verb} {len(report.matches)} games...")

        for match in report.matches:
            result = self._apply(report, directory / match.filename, "rom", disposition, backup_root)
            report.actions.append(result)
            if not result.ok:
                continue
            report.succeeded += 1

            if not options.include_videos:
                continue
            videos = list_video_files(directory, match.identifier, log_cb=lambda msg: self._fail(report, msg))
            for video_path in videos:
                report.actions.append(self._apply(report, video_path, "video", disposition, video_backup))

        done = "moved" if disposition == "move" else "deleted"
        self._info(f"Successfully {done} {report.succeeded} games.")

    def _apply(
        self,
        report: CurationReport,
        source: Path,
        kind: FileKind,
        disposition: Disposition,
        target_dir: Optional[Path],
    ) -> FileActionResult:
        if disposition == "move" and target_dir is None:
            raise ValueError(f"move of {source} requires a target directory")

        label = " video" if kind == "video" else ""
        target: Optional[Path] = None
        try:
            if disposition == "move":
                if kind == "video" and not self._storage.exists(target_dir):
                    self._storage.ensure_dir(target_dir)
                target = target_dir / source.name
                self._storage.move(source, target)
                self._info(f"Moved{label}: {source.name} -> {target_dir}{os.sep}")
            else:
                self._storage.delete(source)
                self._info(f"Deleted{label}: {source.name}")
        except Exception as exc:
            verb = "moving" if disposition == "move" else "deleting"
            error = FileOperationError(
                f"Error {verb}{label} {source.name}: {exc}",
                file_path=str(source),
                operation=disposition,
                details={"cause": type(exc).__name__},
            )
            logger.error("File action failed: %s", error.to_dict())
            self._fail(report, str(error))
            return FileActionResult(
                path=str(source),
                kind=kind,
                action=disposition,
                status="error",
                target_path=str(target) if target is not None else None,
                error=str(exc),
            )

        return FileActionResult(
            path=str(source),
            kind=kind,
            action=disposition,
            status="done",
            target_path=str(target) if target is not None else None,
        )


def run_curation(
    options: CurationOptions,
    category_map: CategoryMap,
    *,
    storage: Optional[StorageProtocol] = None,
    log_cb: Optional[LogCallback] = None,
    error_cb: Optional[LogCallback] = None,
) -> CurationReport:
    return CurationEngine(category_map, storage=storage, log_cb=log_cb, error_cb=error_cb).run(options)
