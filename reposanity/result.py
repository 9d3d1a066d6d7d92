"""Core result data structures for the auditor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.FATAL,
    Severity.ERROR,
    Severity.WARNING,
    Severity.INFO,
    Severity.OK,
)

MAX_SCORE = 100


@dataclass(frozen=True)
class Finding:
    """Capture a single observation produced by a rule."""

    rule_id: str
    severity: Severity
    title: str
    summary: str
    files: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "ruleId": self.rule_id,
            "severity": self.severity.value,
            "title": self.title,
            "summary": self.summary,
        }
        if self.files:
            data["files"] = list(self.files)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Finding":
        return cls(
            rule_id=data["ruleId"],
            severity=Severity(data["severity"]),
            title=data["title"],
            summary=data["summary"],
            files=tuple(data.get("files") or ()),
        )


@dataclass(frozen=True)
class Report:
    """Terminal value of a scan: scored, severity-sorted findings for one target."""

    target_path: str
    generated_at: str
    score: int
    findings: Tuple[Finding, ...] = field(default_factory=tuple)

    @property
    def highest_severity(self) -> Severity:
        return highest_severity(self.findings)

    def counts_by_severity(self) -> Dict[str, int]:
        counts = {severity.value: 0 for severity in SEVERITY_ORDER}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "targetPath": self.target_path,
            "generatedAt": self.generated_at,
            "score": self.score,
            "findings": [finding.to_dict() for finding in self.findings],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Report":
        return cls(
            target_path=data["targetPath"],
            generated_at=data["generatedAt"],
            score=int(data["score"]),
            findings=tuple(Finding.from_dict(item) for item in data.get("findings", [])),
        )


def compute_score(findings: Iterable[Finding]) -> int:
    """Subtract each finding's penalty from 100, clamping at zero."""

    penalty = sum(finding.severity.penalty for finding in findings)
    return max(0, MAX_SCORE - penalty)


def sort_findings(findings: Iterable[Finding]) -> List[Finding]:
    """Order findings most severe first.

    ``sorted`` is stable, so findings of equal severity keep the order in
    which the rules emitted them.
    """

    return sorted(findings, key=lambda finding: -finding.severity.rank)


def highest_severity(findings: Iterable[Finding]) -> Severity:
    highest = Severity.OK
    for finding in findings:
        if finding.severity.rank > highest.rank:
            highest = finding.severity
    return highest


def timestamp(now: Optional[datetime] = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision."""

    moment = now or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_report(target_path: str, findings: Iterable[Finding], now: Optional[datetime] = None) -> Report:
    collected = list(findings)
    return Report(
        target_path=target_path,
        generated_at=timestamp(now),
        score=compute_score(collected),
        findings=tuple(sort_findings(collected)),
    )
