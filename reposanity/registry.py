"""Fixed, ordered list of the rules a scan runs."""

from __future__ import annotations

from typing import List

from .rules import Rule
from .rules.lint_coverage import LintCoverageRule
from .rules.tsconfig_safety import TsConfigSafetyRule


def load_rules() -> List[Rule]:
    return [
        TsConfigSafetyRule(),
        LintCoverageRule(),
    ]
