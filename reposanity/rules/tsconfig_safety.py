"""Check that the root TypeScript configuration keeps strict type checking on."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from reposanity.result import Finding
from reposanity.severity import Severity
from reposanity.utils import parse_jsonc, read_text_file

from . import Rule, ScanContext

_LOG = logging.getLogger(__name__)

RULE_ID = "tsconfig-safety"
TSCONFIG_FILENAME = "tsconfig.json"


class TsConfigSafetyRule:
    """Flag compiler options in ``tsconfig.json`` that weaken type safety."""

    name = RULE_ID

    def __init__(self, config_filename: str = TSCONFIG_FILENAME) -> None:
        self._config_filename = config_filename

    def evaluate(self, context: ScanContext) -> List[Finding]:
        if not context.has_file(self._config_filename):
            return [
                self._finding(
                    Severity.WARNING,
                    f"{self._config_filename} not found",
                    "No root TypeScript configuration was found. Type safety defaults may be inconsistent.",
                    with_file=False,
                )
            ]

        path = context.target_path / self._config_filename
        try:
            text = read_text_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            _LOG.debug("could not read %s: %s", path, exc)
            return [
                self._finding(
                    Severity.ERROR,
                    f"Unable to read {self._config_filename}",
                    f"The file exists but could not be read ({exc.__class__.__name__}).",
                )
            ]
        if not text:
            # An empty file yields no configuration text to inspect.
            return [
                self._finding(
                    Severity.ERROR,
                    f"Unable to read {self._config_filename}",
                    "The file exists but is empty.",
                )
            ]

        parsed, errors = parse_jsonc(text)
        if errors or not isinstance(parsed, dict):
            diagnostics = ", ".join(errors) if errors else "top-level value is not an object"
            return [
                self._finding(
                    Severity.ERROR,
                    f"Invalid {self._config_filename} syntax",
                    diagnostics,
                )
            ]

        findings = self._check_compiler_options(self._compiler_options(parsed))
        if not findings:
            findings.append(
                self._finding(
                    Severity.OK,
                    "TypeScript safety baseline looks good",
                    f"Core strictness flags are enabled in {self._config_filename}.",
                )
            )
        return findings

    # ------------------------------------------------------------------
    # Policy
    # ------------------------------------------------------------------
    def _check_compiler_options(self, options: Mapping[str, Any]) -> List[Finding]:
        findings: List[Finding] = []
        # Only a literal boolean true enables a flag; "true" and 1 do not.
        if options.get("strict") is not True:
            findings.append(
                self._finding(
                    Severity.ERROR,
                    "strict mode is disabled",
                    "Set compilerOptions.strict=true to avoid hidden type issues.",
                )
            )
        if options.get("noUncheckedIndexedAccess") is not True:
            findings.append(
                self._finding(
                    Severity.WARNING,
                    "noUncheckedIndexedAccess is not enabled",
                    "Index access can silently return undefined without explicit handling.",
                )
            )
        if options.get("exactOptionalPropertyTypes") is not True:
            findings.append(
                self._finding(
                    Severity.WARNING,
                    "exactOptionalPropertyTypes is not enabled",
                    "Optional property semantics may be looser than expected.",
                )
            )
        if options.get("allowJs") is True:
            findings.append(
                self._finding(
                    Severity.WARNING,
                    "allowJs is enabled",
                    "Mixed JS/TS projects need explicit boundaries to avoid type-safety blind spots.",
                )
            )
        if options.get("skipLibCheck") is True:
            findings.append(
                self._finding(
                    Severity.INFO,
                    "skipLibCheck is enabled",
                    "Builds are faster, but declaration issues in dependencies are not checked.",
                )
            )
        return findings

    def _compiler_options(self, config: Dict[str, Any]) -> Mapping[str, Any]:
        options = config.get("compilerOptions")
        if isinstance(options, dict):
            return options
        return {}

    def _finding(self, severity: Severity, title: str, summary: str, with_file: bool = True) -> Finding:
        return Finding(
            rule_id=self.name,
            severity=severity,
            title=title,
            summary=summary,
            files=(self._config_filename,) if with_file else (),
        )


def get_rule() -> Rule:
    return TsConfigSafetyRule()
