"""Character rules for paths and file names.

Paths coming out of a solution file are checked against two fixed
blacklists: characters that may not appear anywhere in a path, and the
stricter set that may not appear inside a single path component.
"""

from dataclasses import dataclass
from enum import Enum

from ..constants import DIRECTORY_SEPARATORS

# Control characters 0-31 (NUL included) and the pipe.
# Append-only: extend the set rather than rebuilding it.
INVALID_PATH_CHARS = frozenset(
    {"|"} | {chr(code) for code in range(32)}
)

# Legal between components but never inside one.
INVALID_FILE_NAME_CHARS = INVALID_PATH_CHARS | frozenset(
    {'"', "<", ">", ":", "*", "?", "\\", "/"}
)


class CharacterRule(str, Enum):
    """Which blacklist an offending character belongs to."""
    PATH = "invalid-path-character"
    FILE_NAME = "invalid-file-name-character"


@dataclass(frozen=True)
class InvalidCharacter:
    """First offending character found in a path."""
    rule: CharacterRule
    character: str
    index: int

    @property
    def code_point(self) -> int:
        return ord(self.character)

    def describe(self) -> str:
        if self.character.isprintable():
            shown = repr(self.character)
        else:
            shown = f"U+{self.code_point:04X}"
        kind = "path" if self.rule is CharacterRule.PATH else "file name"
        return f"{kind} contains invalid character {shown} at index {self.index}"


def get_file_name(path: str) -> str:
    """Return the last path component.

    Scans backwards for either separator instead of using os.path or
    pathlib, which misparse malformed names ("a/b/foo:bar" is not a drive
    reference) and can fail on the very characters being checked.
    """
    index = len(path) - 1
    while index >= 0:
        if path[index] in DIRECTORY_SEPARATORS:
            return path[index + 1:]
        index -= 1
    return path


def find_invalid_character(path: str) -> InvalidCharacter | None:
    """Locate the first character that makes a path invalid.

    The whole path is checked against INVALID_PATH_CHARS first; only when it
    passes is the final component checked against INVALID_FILE_NAME_CHARS.

    Args:
        path: Path to check

    Returns:
        The offending character, or None if the path is valid
    """
    for index, char in enumerate(path):
        if char in INVALID_PATH_CHARS:
            return InvalidCharacter(CharacterRule.PATH, char, index)

    file_name = get_file_name(path)
    offset = len(path) - len(file_name)
    for index, char in enumerate(file_name):
        if char in INVALID_FILE_NAME_CHARS:
            return InvalidCharacter(CharacterRule.FILE_NAME, char, offset + index)

    return None


def is_path_invalid(path: str) -> bool:
    """Check whether a path contains characters illegal for the filesystem.

    Never raises. None and non-string values are reported as invalid.

    Examples:
        >>> is_path_invalid("/valid/path/name.txt")
        False
        >>> is_path_invalid("a/b/foo:bar")
        True
    """
    if not isinstance(path, str):
        return True

    return find_invalid_character(path) is not None
