"""Errors reported against a project or solution file.

Diagnostics point at a location in the file being ingested. The file path in
that location is rendered best-effort: a path that cannot be resolved is
shown as given rather than masking the error being reported.
"""

import logging
from dataclasses import dataclass

from slnpath.utils.paths import normalize_path_no_throw

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementLocation:
    """Position of an element inside a project or solution file.

    Line and column are 1-based; 0 means unknown.
    """
    file: str
    line: int = 0
    column: int = 0

    @property
    def location_string(self) -> str:
        path = normalize_path_no_throw(self.file)
        if self.line <= 0:
            return path
        if self.column <= 0:
            return f"{path} ({self.line})"
        return f"{path} ({self.line},{self.column})"

    def __str__(self) -> str:
        return self.location_string


class InternalError(Exception):
    """An internal invariant was broken. Indicates a bug, not bad input."""

    def __init__(self, message: str, inner: BaseException | None = None):
        super().__init__(message)
        self.inner = inner
        if inner is not None:
            self.__cause__ = inner


class InvalidProjectFileError(Exception):
    """A project or solution file is malformed."""

    def __init__(self, location: ElementLocation, message: str):
        self.location = location
        self.base_message = message
        super().__init__(f"{location.location_string}: {message}")


def _format(message: str, args: tuple) -> str:
    return message.format(*args) if args else message


def throw_invalid_project_file(location: ElementLocation, message: str, *args) -> None:
    """Raise InvalidProjectFileError for location.

    Args:
        location: Where in the file the problem was found
        message: str.format template
        *args: Values for the template

    Raises:
        InvalidProjectFileError: Always
    """
    error = InvalidProjectFileError(location, _format(message, args))
    logger.debug(f"Invalid project file: {error}")
    raise error


def verify_throw_invalid_project_file(
    condition: bool, location: ElementLocation, message: str, *args
) -> None:
    """Raise InvalidProjectFileError unless condition holds."""
    if not condition:
        throw_invalid_project_file(location, message, *args)


def verify_throw_internal_error(condition: bool, message: str, *args) -> None:
    """Raise InternalError unless condition holds."""
    if not condition:
        raise InternalError(_format(message, args))
