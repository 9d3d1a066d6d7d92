"""Human-readable, optionally colourised console output."""

from __future__ import annotations

from typing import Dict, List

from reposanity.result import Finding, Report
from reposanity.severity import Severity

RESET = "\033[0m"
BOLD = "\033[1m"
GRAY = "\033[90m"
WHITE = "\033[97m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BANNER_BLUE = "\033[44;97;1m"
BANNER_CYAN = "\033[46;97;1m"
BANNER_RED = "\033[41;97;1m"

LABELS: Dict[Severity, str] = {
    Severity.FATAL: "FATAL",
    Severity.ERROR: "ERROR",
    Severity.WARNING: "WARN",
    Severity.INFO: "INFO",
    Severity.OK: "OK",
}

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.FATAL: BANNER_RED,
    Severity.ERROR: RED + BOLD,
    Severity.WARNING: YELLOW + BOLD,
    Severity.INFO: CYAN + BOLD,
    Severity.OK: GREEN + BOLD,
}


class _Painter:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(self, code: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{code}{text}{RESET}"


def _score_color(score: int) -> str:
    if score >= 90:
        return GREEN + BOLD
    if score >= 80:
        return YELLOW + BOLD
    return RED + BOLD


def _render_finding(finding: Finding, paint: _Painter) -> str:
    tag = paint(SEVERITY_COLORS[finding.severity], f"[{LABELS[finding.severity]:<5}]")
    lines = [
        f"{tag} {paint(WHITE, finding.title)}",
        f"  {paint(GRAY, finding.summary)}",
    ]
    if finding.files:
        lines.append(f"  files: {', '.join(finding.files)}")
    return "\n".join(lines)


def render_terminal_report(report: Report, color: bool = False) -> str:
    paint = _Painter(color)
    header = paint(BANNER_BLUE, " REPO ") + paint(BANNER_CYAN, " SANITY ")
    if report.findings:
        body = "\n".join(_render_finding(finding, paint) for finding in report.findings)
    else:
        body = f"{paint(GREEN + BOLD, '[OK]')} No findings."

    lines: List[str] = [
        header,
        paint(GRAY, "fast technical audit for JS/TS repositories"),
        "",
        f"{paint(BOLD, 'Target:')} {report.target_path}",
        f"{paint(BOLD, 'Generated:')} {report.generated_at}",
        f"{paint(BOLD, 'Score:')} {paint(_score_color(report.score), str(report.score))}/100",
        f"{paint(BOLD, 'Findings:')} {len(report.findings)}",
        "",
        body,
        "",
    ]
    return "\n".join(lines)
