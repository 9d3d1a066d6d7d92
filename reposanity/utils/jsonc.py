"""Tolerant parsing for JSON-with-comments configuration files.

``tsconfig.json`` and friends allow ``//`` and ``/* */`` comments as well as
trailing commas. Both are blanked out character for character, so decoder
positions still match the source, and the remainder must be strict JSON.
"""

from __future__ import annotations

import json
from typing import Any, List, Tuple


def strip_comments(text: str) -> Tuple[str, List[str]]:
    """Blank out comments outside string literals."""

    out: List[str] = []
    errors: List[str] = []
    index = 0
    length = len(text)
    in_string = False
    while index < length:
        char = text[index]
        if in_string:
            out.append(char)
            if char == "\\" and index + 1 < length:
                out.append(text[index + 1])
                index += 2
                continue
            if char == '"':
                in_string = False
            index += 1
            continue

        nxt = text[index + 1] if index + 1 < length else ""
        if char == '"':
            in_string = True
            out.append(char)
            index += 1
        elif char == "/" and nxt == "/":
            end = text.find("\n", index)
            end = length if end == -1 else end
            out.append(" " * (end - index))
            index = end
        elif char == "/" and nxt == "*":
            end = text.find("*/", index + 2)
            if end == -1:
                errors.append(f"UnexpectedEndOfComment (line {text.count(chr(10), 0, index) + 1})")
                end = length
            else:
                end += 2
            out.append("".join("\n" if c == "\n" else " " for c in text[index:end]))
            index = end
        else:
            out.append(char)
            index += 1
    return "".join(out), errors


def strip_trailing_commas(text: str) -> str:
    """Blank out commas that directly precede a closing ``}`` or ``]``.

    Expects comments to have been removed already.
    """

    chars = list(text)
    in_string = False
    index = 0
    while index < len(chars):
        char = chars[index]
        if in_string:
            if char == "\\":
                index += 2
                continue
            if char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == ",":
            ahead = index + 1
            while ahead < len(chars) and chars[ahead] in " \t\r\n":
                ahead += 1
            if ahead < len(chars) and chars[ahead] in "}]":
                chars[index] = " "
        index += 1
    return "".join(chars)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid literal {name}")


def parse_jsonc(text: str) -> Tuple[Any, List[str]]:
    """Parse ``text`` and return ``(value, errors)``.

    Parser failures never raise; they are reported as diagnostics of the form
    ``"<message> (line L, column C)"`` and the value is ``None``. ``NaN`` and
    ``Infinity`` are rejected like any other non-JSON literal.
    """

    cleaned, errors = strip_comments(text.lstrip("\ufeff"))
    if errors:
        return None, errors
    try:
        return json.loads(strip_trailing_commas(cleaned), parse_constant=_reject_constant), []
    except json.JSONDecodeError as exc:
        return None, [f"{exc.msg} (line {exc.lineno}, column {exc.colno})"]
    except ValueError as exc:
        return None, [str(exc)]
