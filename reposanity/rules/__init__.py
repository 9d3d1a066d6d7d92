"""Rule contract and the snapshot shared across rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Protocol

from reposanity.result import Finding


@dataclass(frozen=True)
class ScanContext:
    """Read-only repository snapshot handed to every rule."""

    target_path: Path
    files: FrozenSet[str] = field(default_factory=frozenset)
    package_json: Optional[Mapping[str, Any]] = None

    def has_file(self, relative_path: str) -> bool:
        return relative_path in self.files

    def first_present(self, candidates: Iterable[str]) -> Optional[str]:
        """Return the first candidate that exists in the snapshot."""

        for candidate in candidates:
            if candidate in self.files:
                return candidate
        return None


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    name: str

    def evaluate(self, context: ScanContext) -> List[Finding]:
        """Inspect ``context`` and return findings without mutating anything."""
