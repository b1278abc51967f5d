"""Failure classification and exceptions for slnpath.

Provides the closed failure taxonomy used to decide which errors may be
swallowed during best-effort path resolution.
"""

from .classifier import (
    IO_RELATED_KINDS,
    Failure,
    FailureKind,
    IoFailureKind,
    classify_failure,
    is_io_related,
)
from .exceptions import (
    ArgumentMissingError,
    DriveNotFoundError,
    PathResolutionError,
    SecurityDeniedError,
)

__all__ = [
    "IO_RELATED_KINDS",
    "Failure",
    "FailureKind",
    "IoFailureKind",
    "classify_failure",
    "is_io_related",
    "ArgumentMissingError",
    "DriveNotFoundError",
    "PathResolutionError",
    "SecurityDeniedError",
]
