"""Basic file IO helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

_LOG = logging.getLogger(__name__)


def read_text_file(path: Path) -> str:
    """Return the file contents as UTF-8 text.

    Raises ``OSError`` or ``UnicodeDecodeError`` so callers can decide how an
    unreadable file is reported.
    """

    return path.read_text(encoding="utf-8")


def read_json_file(path: Path) -> Any:
    """Return the parsed JSON document, or ``None`` if it is missing or malformed."""

    if not path.is_file():
        _LOG.debug("json file not found: %s", path)
        return None
    try:
        return json.loads(read_text_file(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        _LOG.debug("ignoring unreadable json file %s: %s", path, exc)
        return None
