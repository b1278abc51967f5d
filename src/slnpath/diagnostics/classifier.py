"""Classification of caught failures into a closed taxonomy.

Decides which failures count as expected I/O noise during best-effort path
resolution. The taxonomy is fixed: every exception maps onto exactly one
FailureKind, and only the kinds in IO_RELATED_KINDS may be suppressed.
"""

import errno
import io
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ArgumentMissingError, DriveNotFoundError, SecurityDeniedError

# ERROR_INVALID_DRIVE as reported through OSError.winerror
_WINERROR_INVALID_DRIVE = 15


class FailureKind(str, Enum):
    """Top-level failure categories."""
    PERMISSION_DENIED = "permission_denied"
    UNSUPPORTED = "unsupported"
    INVALID_ARGUMENT = "invalid_argument"
    SECURITY_DENIED = "security_denied"
    IO_FAILURE = "io_failure"
    ARGUMENT_MISSING = "argument_missing"
    OTHER = "other"


class IoFailureKind(str, Enum):
    """Members of the filesystem I/O failure family."""
    NOT_FOUND = "not_found"
    DRIVE_NOT_FOUND = "drive_not_found"
    END_OF_STREAM = "end_of_stream"
    LOAD_FAILURE = "load_failure"
    NAME_TOO_LONG = "name_too_long"
    BROKEN_PIPE = "broken_pipe"
    GENERIC = "generic"


IO_RELATED_KINDS = frozenset({
    FailureKind.PERMISSION_DENIED,
    FailureKind.UNSUPPORTED,
    FailureKind.INVALID_ARGUMENT,
    FailureKind.SECURITY_DENIED,
    FailureKind.IO_FAILURE,
})


@dataclass(frozen=True)
class Failure:
    """A classified failure. io_kind is only set for IO_FAILURE."""
    kind: FailureKind
    io_kind: IoFailureKind | None = None

    def __post_init__(self):
        if (self.kind is FailureKind.IO_FAILURE) != (self.io_kind is not None):
            raise ValueError(
                f"io_kind must be set exactly when kind is {FailureKind.IO_FAILURE.value}, "
                f"got kind={self.kind.value}, io_kind={self.io_kind}"
            )

    @property
    def is_io_related(self) -> bool:
        return self.kind in IO_RELATED_KINDS

    def __str__(self) -> str:
        if self.io_kind is not None:
            return f"{self.kind.value}/{self.io_kind.value}"
        return self.kind.value


def _io_failure(io_kind: IoFailureKind) -> Failure:
    return Failure(FailureKind.IO_FAILURE, io_kind)


def _classify_os_error(error: OSError) -> Failure:
    if isinstance(error, DriveNotFoundError):
        return _io_failure(IoFailureKind.DRIVE_NOT_FOUND)
    if getattr(error, "winerror", None) == _WINERROR_INVALID_DRIVE:
        return _io_failure(IoFailureKind.DRIVE_NOT_FOUND)
    if isinstance(error, (FileNotFoundError, NotADirectoryError, IsADirectoryError)):
        return _io_failure(IoFailureKind.NOT_FOUND)
    if isinstance(error, BrokenPipeError):
        return _io_failure(IoFailureKind.BROKEN_PIPE)
    if error.errno == errno.ENAMETOOLONG:
        return _io_failure(IoFailureKind.NAME_TOO_LONG)
    return _io_failure(IoFailureKind.GENERIC)


def classify_failure(error: Any) -> Failure:
    """Map a caught exception onto the failure taxonomy.

    Order matters: several builtin exceptions sit under more than one
    branch (io.UnsupportedOperation is both an OSError and a ValueError,
    PermissionError is an OSError), so the narrower categories are tested
    first.

    Args:
        error: The caught exception. Anything that is not an exception
            (including None) classifies as OTHER.

    Returns:
        Failure describing the category of the error
    """
    if not isinstance(error, BaseException):
        return Failure(FailureKind.OTHER)

    if isinstance(error, SecurityDeniedError):
        return Failure(FailureKind.SECURITY_DENIED)
    if isinstance(error, PermissionError):
        return Failure(FailureKind.PERMISSION_DENIED)
    if isinstance(error, (io.UnsupportedOperation, NotImplementedError)):
        return Failure(FailureKind.UNSUPPORTED)
    if isinstance(error, (ArgumentMissingError, TypeError)):
        return Failure(FailureKind.ARGUMENT_MISSING)
    if isinstance(error, OSError):
        return _classify_os_error(error)
    if isinstance(error, EOFError):
        return _io_failure(IoFailureKind.END_OF_STREAM)
    if isinstance(error, ImportError):
        return _io_failure(IoFailureKind.LOAD_FAILURE)
    if isinstance(error, ValueError):
        return Failure(FailureKind.INVALID_ARGUMENT)

    return Failure(FailureKind.OTHER)


def is_io_related(failure: Any) -> bool:
    """Determine whether a failure is file-IO related.

    Accepts an already classified Failure, a bare FailureKind, or the caught
    exception itself. Never raises.
    """
    if isinstance(failure, Failure):
        return failure.is_io_related
    if isinstance(failure, FailureKind):
        return failure in IO_RELATED_KINDS
    return classify_failure(failure).is_io_related
