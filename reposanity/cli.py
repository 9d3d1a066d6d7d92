"""Command-line entry point for the Repo Sanity auditor."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .engine import scan_repository
from .errors import RepoSanityError
from .reporters import OUTPUT_FORMATS, render
from .result import Report
from .severity import FAIL_ON_CHOICES, Severity

PROG = "repo-sanity"

EPILOG = """\
Quick Start
  repo-sanity scan

Examples
  repo-sanity scan . --format markdown --output reports/sanity.md
  repo-sanity scan ../my-project --format json --fail-on error
  repo-sanity scan . --fail-on warning

Running repo-sanity without a command is equivalent to `repo-sanity scan .`.
"""

SCAN_EPILOG = """\
Output Formats
  terminal  Human-friendly colored report
  markdown  Shareable report for PRs/docs
  json      Machine-readable output for automation

Exit Behavior
  --fail-on info|warning|error|fatal
  Sets exit code to 1 when a finding reaches the selected severity.
"""


def parse_output_format(value: str) -> str:
    if value in OUTPUT_FORMATS:
        return value
    raise argparse.ArgumentTypeError(f'Invalid format "{value}". Use: {", ".join(OUTPUT_FORMATS)}')


def parse_fail_severity(value: str) -> Severity:
    choices = [severity.value for severity in FAIL_ON_CHOICES]
    if value in choices:
        return Severity(value)
    raise argparse.ArgumentTypeError(f'Invalid --fail-on severity "{value}". Use: {", ".join(choices)}')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Fast technical sanity audit for JavaScript/TypeScript repositories",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    scan_parser = subparsers.add_parser(
        "scan",
        help="Run sanity checks against a repository path.",
        epilog=SCAN_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    scan_parser.add_argument(
        "target",
        nargs="?",
        default=".",
        help="Repository directory to audit (defaults to the current directory).",
    )
    scan_parser.add_argument(
        "-f",
        "--format",
        dest="report_format",
        type=parse_output_format,
        default="terminal",
        help="Output format: terminal | markdown | json.",
    )
    scan_parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    scan_parser.add_argument(
        "--fail-on",
        type=parse_fail_severity,
        default=None,
        help="Exit with code 1 when the highest finding is >= this severity (info|warning|error|fatal).",
    )
    scan_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in terminal output.",
    )
    scan_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


def should_fail(report: Report, threshold: Optional[Severity]) -> bool:
    """Return whether the report's highest severity reaches ``threshold``."""

    if threshold is None:
        return False
    highest = report.highest_severity
    if highest is Severity.OK:
        return False
    return highest.rank >= threshold.rank


def use_color(output_path: Optional[str], no_color: bool) -> bool:
    if no_color or output_path or "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty()


def write_output(contents: str, output_path: str) -> Path:
    target = Path(output_path).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(contents, encoding="utf-8")
    return target


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def report_failure(exc: Exception) -> int:
    sys.stderr.write(f"Failed to run {PROG}: {exc}\n")
    sys.stderr.write(f'Tip: run "{PROG} scan --help" to see available commands.\n')
    return 1


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["scan"])
    configure_logging(args.verbose)

    try:
        report = scan_repository(args.target)
    except RepoSanityError as exc:
        return report_failure(exc)

    text = render(report, args.report_format, color=use_color(args.output_path, args.no_color))
    if args.output_path:
        try:
            written = write_output(text, args.output_path)
        except OSError as exc:
            return report_failure(exc)
        if args.report_format == "terminal":
            print(f"Report written to {written}")
    else:
        sys.stdout.write(text)

    return 1 if should_fail(report, args.fail_on) else 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
