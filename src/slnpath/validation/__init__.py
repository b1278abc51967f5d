"""Path and file name validation for slnpath."""

from .framework import (
    PathIssue,
    PathValidationResult,
    PathValidator,
    ValidationStatus,
)
from .path_rules import (
    INVALID_FILE_NAME_CHARS,
    INVALID_PATH_CHARS,
    CharacterRule,
    InvalidCharacter,
    find_invalid_character,
    get_file_name,
    is_path_invalid,
)

__all__ = [
    "PathIssue",
    "PathValidationResult",
    "PathValidator",
    "ValidationStatus",
    "INVALID_FILE_NAME_CHARS",
    "INVALID_PATH_CHARS",
    "CharacterRule",
    "InvalidCharacter",
    "find_invalid_character",
    "get_file_name",
    "is_path_invalid",
]
