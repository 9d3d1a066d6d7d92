"""Run rules against a snapshot and aggregate their findings into a report."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .context import load_context
from .registry import load_rules
from .result import Finding, Report, build_report
from .rules import Rule, ScanContext

_LOG = logging.getLogger(__name__)


def _evaluate(rule: Rule, context: ScanContext) -> List[Finding]:
    findings = list(rule.evaluate(context))
    _LOG.debug("rule %s produced %d finding(s)", rule.name, len(findings))
    return findings


def run(
    context: ScanContext,
    rules: Sequence[Rule],
    max_workers: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Report:
    """Evaluate ``rules`` concurrently and build a severity-sorted, scored report.

    Results are gathered in registry order regardless of completion order, so
    ties between equal severities keep rule-emission order. An exception
    raised by a rule propagates to the caller.
    """

    collected: List[Finding] = []
    if rules:
        with ThreadPoolExecutor(max_workers=max_workers or len(rules)) as executor:
            for findings in executor.map(lambda rule: _evaluate(rule, context), rules):
                collected.extend(findings)
    return build_report(str(context.target_path), collected, now=now)


def scan_repository(target: Union[str, Path], rules: Optional[Sequence[Rule]] = None) -> Report:
    """Load ``target`` and run the registered rules (or ``rules``) against it."""

    context = load_context(target)
    return run(context, load_rules() if rules is None else rules)
