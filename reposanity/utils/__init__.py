"""Utility helpers for the auditor."""

from .discovery import iter_repo_files
from .fileio import read_json_file, read_text_file
from .jsonc import parse_jsonc

__all__ = [
    "iter_repo_files",
    "read_json_file",
    "read_text_file",
    "parse_jsonc",
]
