"""Exceptions raised by the slnpath path-safety layer."""


class PathResolutionError(ValueError):
    """Raised when the host cannot resolve a malformed path (e.g. embedded NUL)."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve path {path!r}: {reason}")


class ArgumentMissingError(TypeError):
    """A required argument was None. Always a caller defect."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Argument '{name}' must not be None")


class SecurityDeniedError(Exception):
    """Access to a path was refused by a sandbox or security policy."""


class DriveNotFoundError(FileNotFoundError):
    """The drive or volume referenced by a path does not exist."""
