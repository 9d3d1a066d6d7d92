from pathlib import Path

from reposanity.rules import ScanContext
from reposanity.rules.lint_coverage import LintCoverageRule
from reposanity.severity import Severity


def run_rule(files=(), package_json=None):
    context = ScanContext(target_path=Path("."), files=frozenset(files), package_json=package_json)
    return LintCoverageRule().evaluate(context)


def titles(findings):
    return [finding.title for finding in findings]


def test_flags_missing_config_and_script():
    findings = run_rule()

    assert any("config not found" in title for title in titles(findings))
    assert any("lint script is missing" in title for title in titles(findings))
    assert any("dependency not declared" in title for title in titles(findings))
    assert not any("baseline looks good" in title for title in titles(findings))


def test_healthy_baseline_emits_per_check_and_rollup_ok():
    findings = run_rule(
        files={"eslint.config.js"},
        package_json={"devDependencies": {"eslint": "^8.0.0"}, "scripts": {"lint": "eslint ."}},
    )

    assert all(finding.severity is Severity.OK for finding in findings)
    assert len(findings) == 2
    assert findings[0].files == ("eslint.config.js",)
    assert "baseline looks good" in findings[-1].title


def test_first_candidate_wins():
    findings = run_rule(files={".eslintrc.json", "eslint.config.mjs"})

    assert findings[0].severity is Severity.OK
    assert findings[0].files == ("eslint.config.mjs",)


def test_nested_config_does_not_count():
    findings = run_rule(files={"packages/app/eslint.config.js"})

    assert findings[0].severity is Severity.WARNING


def test_lint_script_without_tool_is_info():
    findings = run_rule(
        files={".eslintrc"},
        package_json={"dependencies": {"eslint": "8.57.0"}, "scripts": {"lint": "biome check ."}},
    )

    info = [finding for finding in findings if finding.severity is Severity.INFO]
    assert len(info) == 1
    assert "biome check ." in info[0].summary
    assert not any("baseline looks good" in title for title in titles(findings))


def test_dependency_must_be_a_string_entry():
    findings = run_rule(
        files={".eslintrc"},
        package_json={"devDependencies": {"eslint": {"version": "8"}}, "scripts": {"lint": "eslint ."}},
    )

    assert "ESLint dependency not declared" in titles(findings)


def test_malformed_manifest_fields_are_ignored():
    findings = run_rule(package_json={"dependencies": ["eslint"], "scripts": "eslint ."})

    assert "ESLint dependency not declared" in titles(findings)
    assert "lint script is missing" in titles(findings)


def test_rule_can_describe_another_linter():
    rule = LintCoverageRule(tool="stylelint", config_files=(".stylelintrc",), rule_id="stylelint-coverage", display_name="Stylelint")
    context = ScanContext(
        target_path=Path("."),
        files=frozenset({".stylelintrc"}),
        package_json={"devDependencies": {"stylelint": "^16"}, "scripts": {"lint": "stylelint '**/*.css'"}},
    )

    findings = rule.evaluate(context)

    assert {finding.rule_id for finding in findings} == {"stylelint-coverage"}
    assert all(finding.severity is Severity.OK for finding in findings)
