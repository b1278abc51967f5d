"""Utility helpers for slnpath."""

from .paths import (
    DIRECTORY_SEPARATORS,
    fix_file_path,
    normalize_path,
    normalize_path_no_throw,
)

__all__ = [
    "DIRECTORY_SEPARATORS",
    "fix_file_path",
    "normalize_path",
    "normalize_path_no_throw",
]
