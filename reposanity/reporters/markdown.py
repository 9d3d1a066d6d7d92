"""Markdown output suitable for pull requests and docs."""

from __future__ import annotations

from typing import Dict, List

from reposanity.result import Finding, Report
from reposanity.severity import Severity

BADGE: Dict[Severity, str] = {
    Severity.FATAL: "FATAL",
    Severity.ERROR: "ERROR",
    Severity.WARNING: "WARNING",
    Severity.INFO: "INFO",
    Severity.OK: "OK",
}


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _files(finding: Finding) -> str:
    if not finding.files:
        return "-"
    return ", ".join(finding.files)


def render_markdown_report(report: Report) -> str:
    lines: List[str] = [
        "# Repo Sanity Report",
        "",
        f"- Target: `{report.target_path}`",
        f"- Generated at: `{report.generated_at}`",
        f"- Score: **{report.score}/100**",
        f"- Findings: **{len(report.findings)}**",
        "",
        "## Findings",
        "",
        "| Severity | Rule | Title | Summary | Files |",
        "| --- | --- | --- | --- | --- |",
    ]
    if not report.findings:
        lines.append("| OK | - | No findings | No issues detected | - |")
    for finding in report.findings:
        cells = (
            BADGE[finding.severity],
            finding.rule_id,
            finding.title,
            finding.summary,
            _files(finding),
        )
        lines.append("| " + " | ".join(_cell(value) for value in cells) + " |")
    lines.append("")
    return "\n".join(lines)
