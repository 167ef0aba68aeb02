"""Public controller API surface for the CLI and integrations.

Centralizes stable imports to keep callers decoupled from controller internals.
"""

from __future__ import annotations

from .controller import CurationEngine, run_curation, select_matches
from .models import (
    CurationOptions,
    CurationReport,
    Disposition,
    FileActionResult,
    LogCallback,
    MatchedRom,
)
from .report_export import report_payload, write_curation_report
from .storage import LocalStorage, StorageProtocol

__all__ = [
    "CurationEngine",
    "CurationOptions",
    "CurationReport",
    "Disposition",
    "FileActionResult",
    "LocalStorage",
    "LogCallback",
    "MatchedRom",
    "StorageProtocol",
    "report_payload",
    "run_curation",
    "select_matches",
    "write_curation_report",
]
