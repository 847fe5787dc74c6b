"""JSON report — the audit result in its camelCase wire format."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from saat.core.models import AuditResult

REPORT_FILENAME = "saat-audit.json"


def render_json_report(result: AuditResult, pretty: bool = True) -> str:
    return json.dumps(result.to_dict(), indent=2 if pretty else None, ensure_ascii=False)


def write_json_report(
    result: AuditResult,
    path: str | Path,
    pretty: bool = True,
) -> Path:
    """Write the report, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_json_report(result, pretty=pretty) + "\n", encoding="utf-8")
    return path


def load_json_report(path: str | Path) -> dict[str, Any]:
    """Read a previously written report back as plain data."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Audit report must be a JSON object: {path}")
    return data
