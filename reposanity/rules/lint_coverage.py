"""Check that a linter is configured, declared and wired into package scripts."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from reposanity.result import Finding
from reposanity.severity import Severity

from . import Rule, ScanContext

RULE_ID = "eslint-coverage"
LINT_TOOL = "eslint"
MANIFEST_FILENAME = "package.json"
ESLINT_CONFIG_FILES: Sequence[str] = (
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.cjs",
    "eslint.config.ts",
    ".eslintrc",
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.json",
    ".eslintrc.yaml",
    ".eslintrc.yml",
)


class LintCoverageRule:
    """Verify lint config presence, dependency declaration and the ``lint`` script.

    The three checks are independent and all of them always run. When none of
    them reports a problem a final rollup finding is appended on top of the
    per-check confirmations.
    """

    name = RULE_ID

    def __init__(
        self,
        tool: str = LINT_TOOL,
        config_files: Sequence[str] = ESLINT_CONFIG_FILES,
        rule_id: str = RULE_ID,
        display_name: str = "ESLint",
    ) -> None:
        self.name = rule_id
        self._tool = tool
        self._config_files = tuple(config_files)
        self._display_name = display_name

    def evaluate(self, context: ScanContext) -> List[Finding]:
        findings: List[Finding] = []
        findings.append(self._check_config(context))
        if not self._has_dependency(context.package_json):
            findings.append(
                self._finding(
                    Severity.WARNING,
                    f"{self._display_name} dependency not declared",
                    f"Add {self._tool} to dependencies/devDependencies to keep linting reproducible in CI.",
                    (MANIFEST_FILENAME,),
                )
            )
        script_finding = self._check_script(context.package_json)
        if script_finding is not None:
            findings.append(script_finding)

        if all(finding.severity is Severity.OK for finding in findings):
            findings.append(
                self._finding(
                    Severity.OK,
                    f"{self._display_name} coverage baseline looks good",
                    "Configuration, dependency, and script wiring are present.",
                    (MANIFEST_FILENAME,),
                )
            )
        return findings

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    def _check_config(self, context: ScanContext) -> Finding:
        config_file = context.first_present(self._config_files)
        if config_file is None:
            return self._finding(
                Severity.WARNING,
                f"{self._display_name} config not found",
                f"No {self._tool}.config.* or .{self._tool}rc.* file was detected at repository root.",
            )
        return self._finding(
            Severity.OK,
            f"{self._display_name} config detected",
            f"Using {config_file} as baseline lint configuration.",
            (config_file,),
        )

    def _check_script(self, manifest: Optional[Mapping[str, Any]]) -> Optional[Finding]:
        script = _get_script(manifest, "lint")
        if not script:
            return self._finding(
                Severity.WARNING,
                "lint script is missing",
                f"Add a lint script in {MANIFEST_FILENAME} to standardize local and CI usage.",
                (MANIFEST_FILENAME,),
            )
        if self._tool not in script:
            return self._finding(
                Severity.INFO,
                f"lint script does not call {self._tool}",
                f'Current lint script: "{script}". If intentional, keep this message as informational.',
                (MANIFEST_FILENAME,),
            )
        return None

    def _has_dependency(self, manifest: Optional[Mapping[str, Any]]) -> bool:
        merged: Dict[str, Any] = {}
        merged.update(_get_mapping(manifest, "dependencies"))
        merged.update(_get_mapping(manifest, "devDependencies"))
        return isinstance(merged.get(self._tool), str)

    def _finding(self, severity: Severity, title: str, summary: str, files: Sequence[str] = ()) -> Finding:
        return Finding(rule_id=self.name, severity=severity, title=title, summary=summary, files=tuple(files))


def _get_mapping(manifest: Optional[Mapping[str, Any]], key: str) -> Mapping[str, Any]:
    if not manifest:
        return {}
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


def _get_script(manifest: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    value = _get_mapping(manifest, "scripts").get(name)
    return value if isinstance(value, str) else None


def get_rule() -> Rule:
    return LintCoverageRule()
