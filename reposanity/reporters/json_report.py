"""Machine-readable JSON output."""

from __future__ import annotations

import json

from reposanity.result import Report


def render_json_report(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2) + "\n"
