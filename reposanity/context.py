"""Build the immutable repository snapshot consumed by every rule."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import InvalidTargetError
from .rules import ScanContext
from .utils import iter_repo_files, read_json_file

_LOG = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def load_package_json(root: Path) -> Optional[Dict[str, Any]]:
    """Return the root manifest as a mapping, or ``None`` when it is unusable."""

    data = read_json_file(root / MANIFEST_FILENAME)
    if data is None:
        return None
    if not isinstance(data, dict):
        _LOG.debug("ignoring %s: top-level value is not an object", MANIFEST_FILENAME)
        return None
    return data


def load_context(target: Union[str, Path]) -> ScanContext:
    """Snapshot ``target`` for a scan.

    Raises ``InvalidTargetError`` if the path does not exist or is not a
    directory. A missing or malformed ``package.json`` is not an error.
    """

    root = Path(target).expanduser().resolve()
    if not root.exists():
        raise InvalidTargetError(str(root), "Target path does not exist")
    if not root.is_dir():
        raise InvalidTargetError(str(root), "Target path is not a directory")

    files = frozenset(iter_repo_files(root))
    package_json = load_package_json(root)
    _LOG.debug(
        "loaded context for %s: %d files, manifest %s",
        root,
        len(files),
        "present" if package_json is not None else "absent",
    )
    return ScanContext(target_path=root, files=files, package_json=package_json)
