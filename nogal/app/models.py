"""Shared type aliases and dataclasses for the curation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional

Disposition = Literal["list", "delete", "move"]
FileKind = Literal["rom", "video"]
RunStatus = Literal["completed", "aborted"]

LogCallback = Callable[[str], None]


@dataclass(frozen=True)
class CurationOptions:
    directory: str
    category: Optional[str] = None
    case_insensitive: bool = False
    list_only: bool = False
    include_videos: bool = False
    backup_dir: Optional[str] = None

    @property
    def disposition(self) -> Disposition:
        if self.list_only:
            return "list"
        if self.backup_dir:
            return "move"
        return "delete"


@dataclass(frozen=True)
class MatchedRom:
    filename: str
    identifier: str
    category: str


@dataclass(frozen=True)
class FileActionResult:
    path: str
    kind: FileKind
    action: Disposition
    status: str
    target_path: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "done"


@dataclass
class CurationReport:
    directory: str
    disposition: Disposition
    status: RunStatus = "completed"
    scanned: int = 0
    matches: List[MatchedRom] = field(default_factory=list)
    actions: List[FileActionResult] = field(default_factory=list)
    succeeded: int = 0
    errors: List[str] = field(default_factory=list)
    notice: Optional[str] = None

    @property
    def failed(self) -> int:
        return sum(1 for action in self.actions if action.kind == "rom" and not action.ok)

    @property
    def video_actions(self) -> List[FileActionResult]:
        return [action for action in self.actions if action.kind == "video"]
