"""Render reports as text."""

from __future__ import annotations

from typing import Callable, Dict

from reposanity.errors import InvalidFormatError
from reposanity.result import Report

from .json_report import render_json_report
from .markdown import render_markdown_report
from .terminal import render_terminal_report

OUTPUT_FORMATS = ("terminal", "markdown", "json")


def render(report: Report, report_format: str, color: bool = False) -> str:
    """Render ``report`` in one of ``OUTPUT_FORMATS``."""

    renderers: Dict[str, Callable[[Report], str]] = {
        "terminal": lambda value: render_terminal_report(value, color=color),
        "markdown": render_markdown_report,
        "json": render_json_report,
    }
    try:
        renderer = renderers[report_format]
    except KeyError:
        raise InvalidFormatError(
            f'Invalid format "{report_format}". Use: {", ".join(OUTPUT_FORMATS)}'
        ) from None
    return renderer(report)


__all__ = [
    "OUTPUT_FORMATS",
    "render",
    "render_json_report",
    "render_markdown_report",
    "render_terminal_report",
]
