"""Repository file discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, Generator

EXCLUDED_DIRS: FrozenSet[str] = frozenset({"node_modules", "dist", ".git", ".hg", ".svn"})


def iter_repo_files(root: Path, excluded_dirs: FrozenSet[str] = EXCLUDED_DIRS) -> Generator[str, None, None]:
    """Yield POSIX-style paths, relative to ``root``, of every regular file beneath it.

    Dotfiles are included. Directories named in ``excluded_dirs`` are pruned at
    any depth.
    """

    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name not in excluded_dirs]
        current_path = Path(current)
        for filename in filenames:
            path = current_path / filename
            if not path.is_file():
                continue
            yield path.relative_to(root).as_posix()
