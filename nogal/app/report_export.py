"""JSON export of a curation run."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union

from .models import CurationReport

logger = logging.getLogger(__name__)


def report_payload(report: CurationReport) -> Dict[str, Any]:
    return {
        "kind": "curation_report",
        "created_at": datetime.now(timezone.utc).isoformat(),
        "directory": report.directory,
        "disposition": report.disposition,
        "status": report.status,
        "scanned": report.scanned,
        "matched": len(report.matches),
        "succeeded": report.succeeded,
        "failed": report.failed,
        "notice": report.notice,
        "matches": [
            {"filename": match.filename, "identifier": match.identifier, "category": match.category}
            for match in report.matches
        ],
        "actions": [
            {
                "path": action.path,
                "kind": action.kind,
                "action": action.action,
                "status": action.status,
                "target_path": action.target_path,
                "error": action.error,
            }
            for action in report.actions
        ],
        "errors": list(report.errors),
    }


def write_curation_report(report: CurationReport, path: Union[str, Path]) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(report_payload(report), handle, indent=2, ensure_ascii=False)
    logger.info("Report saved: %s", target)
    return target
