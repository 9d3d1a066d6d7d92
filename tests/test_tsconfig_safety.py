import pytest

from reposanity.rules import ScanContext
from reposanity.rules.tsconfig_safety import TsConfigSafetyRule
from reposanity.severity import Severity


def run_rule(root, files=frozenset({"tsconfig.json"})):
    context = ScanContext(target_path=root, files=frozenset(files))
    return TsConfigSafetyRule().evaluate(context)


def test_missing_tsconfig_is_single_warning(tmp_path):
    findings = run_rule(tmp_path, files=())

    assert len(findings) == 1
    assert findings[0].severity is Severity.WARNING
    assert findings[0].rule_id == "tsconfig-safety"
    assert findings[0].files == ()


def test_healthy_baseline_is_single_ok(write_repo):
    root = write_repo(
        {
            "tsconfig.json": '{"compilerOptions":{"strict":true,"noUncheckedIndexedAccess":true,'
            '"exactOptionalPropertyTypes":true}}'
        }
    )

    findings = run_rule(root)

    assert len(findings) == 1
    assert findings[0].severity is Severity.OK
    assert "baseline looks good" in findings[0].title


def test_loose_config_reports_every_condition(write_repo):
    root = write_repo(
        {
            "tsconfig.json": {
                "compilerOptions": {
                    "strict": False,
                    "allowJs": True,
                    "skipLibCheck": True,
                }
            }
        }
    )

    findings = run_rule(root)

    assert [finding.severity for finding in findings] == [
        Severity.ERROR,
        Severity.WARNING,
        Severity.WARNING,
        Severity.WARNING,
        Severity.INFO,
    ]
    assert all(finding.files == ("tsconfig.json",) for finding in findings)
    assert not any(finding.severity is Severity.OK for finding in findings)


def test_non_boolean_flags_do_not_count(write_repo):
    root = write_repo(
        {
            "tsconfig.json": {
                "compilerOptions": {
                    "strict": "true",
                    "noUncheckedIndexedAccess": 1,
                    "exactOptionalPropertyTypes": True,
                }
            }
        }
    )

    findings = run_rule(root)

    titles = [finding.title for finding in findings]
    assert "strict mode is disabled" in titles
    assert "noUncheckedIndexedAccess is not enabled" in titles


def test_missing_compiler_options_flags_strictness(write_repo):
    root = write_repo({"tsconfig.json": {"extends": "./base.json"}})

    findings = run_rule(root)

    assert len(findings) == 3
    assert findings[0].severity is Severity.ERROR


def test_jsonc_features_are_accepted(write_repo):
    root = write_repo(
        {
            "tsconfig.json": """{
  // project settings
  "compilerOptions": {
    "strict": true,
    "noUncheckedIndexedAccess": true,
    "exactOptionalPropertyTypes": true, /* trailing comma below */
  },
}
"""
        }
    )

    findings = run_rule(root)

    assert [finding.severity for finding in findings] == [Severity.OK]


def test_malformed_tsconfig_is_single_error(write_repo):
    root = write_repo({"tsconfig.json": '{"compilerOptions": {"strict": true'})

    findings = run_rule(root)

    assert len(findings) == 1
    assert findings[0].severity is Severity.ERROR
    assert findings[0].title == "Invalid tsconfig.json syntax"
    assert "line" in findings[0].summary


def test_non_object_tsconfig_is_error(write_repo):
    root = write_repo({"tsconfig.json": "[1, 2, 3]"})

    findings = run_rule(root)

    assert len(findings) == 1
    assert findings[0].severity is Severity.ERROR


def test_unreadable_tsconfig_is_error(tmp_path):
    # Listed in the snapshot but a directory on disk, so reading fails.
    (tmp_path / "tsconfig.json").mkdir()

    findings = run_rule(tmp_path)

    assert len(findings) == 1
    assert findings[0].severity is Severity.ERROR
    assert findings[0].title == "Unable to read tsconfig.json"


@pytest.mark.parametrize(
    "text",
    [
        '{"compilerOptions": {"strict": yes, "noUncheckedIndexedAccess": on, "exactOptionalPropertyTypes": True}}',
        '{compilerOptions: {"strict": true, "noUncheckedIndexedAccess": true, "exactOptionalPropertyTypes": true}}',
        '{"compilerOptions": {"strict": , "noUncheckedIndexedAccess": true, "exactOptionalPropertyTypes": true}}',
    ],
)
def test_non_json_literals_are_invalid_syntax(write_repo, text):
    root = write_repo({"tsconfig.json": text})

    findings = run_rule(root)

    assert len(findings) == 1
    assert findings[0].severity is Severity.ERROR
    assert findings[0].title == "Invalid tsconfig.json syntax"


def test_colon_on_next_line_is_healthy(write_repo):
    root = write_repo(
        {
            "tsconfig.json": '{"compilerOptions": {"strict"\n: true, "noUncheckedIndexedAccess": true, '
            '"exactOptionalPropertyTypes": true}}'
        }
    )

    findings = run_rule(root)

    assert [finding.severity for finding in findings] == [Severity.OK]


def test_empty_tsconfig_is_unreadable(write_repo):
    root = write_repo({"tsconfig.json": ""})

    findings = run_rule(root)

    assert len(findings) == 1
    assert findings[0].severity is Severity.ERROR
    assert findings[0].title == "Unable to read tsconfig.json"
