"""Severity definitions for audit findings."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidSeverityError


class Severity(str, Enum):
    """Enumerate the supported severity levels for findings."""

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    OK = "ok"

    @property
    def rank(self) -> int:
        """Return an integer ranking; higher is more severe and ``ok`` is zero."""

        ordering = {
            Severity.OK: 0,
            Severity.INFO: 1,
            Severity.WARNING: 2,
            Severity.ERROR: 3,
            Severity.FATAL: 4,
        }
        return ordering[self]

    @property
    def penalty(self) -> int:
        """Return the number of score points a finding of this severity costs."""

        penalties = {
            Severity.FATAL: 40,
            Severity.ERROR: 20,
            Severity.WARNING: 10,
            Severity.INFO: 0,
            Severity.OK: 0,
        }
        return penalties[self]

    @classmethod
    def parse(cls, value: str) -> "Severity":
        try:
            return cls(value)
        except ValueError:
            raise InvalidSeverityError(f'Unknown severity "{value}"') from None


# Thresholds accepted by ``--fail-on``; ``ok`` can never fail a build.
FAIL_ON_CHOICES = (Severity.INFO, Severity.WARNING, Severity.ERROR, Severity.FATAL)
