"""Exceptions that abort a scan before a report can be produced."""

from __future__ import annotations


class RepoSanityError(Exception):
    """Base class for errors surfaced to the CLI caller."""


class InvalidTargetError(RepoSanityError):
    """Raised when the scan target is missing or is not a directory."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"{reason}: {target}")
        self.target = target
        self.reason = reason


class InvalidCliArgumentError(RepoSanityError, ValueError):
    """Raised for option values the CLI does not recognise."""


class InvalidSeverityError(InvalidCliArgumentError):
    pass


class InvalidFormatError(InvalidCliArgumentError):
    pass
