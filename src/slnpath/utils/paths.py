"""Path normalization utilities for cross-platform compatibility."""

import logging
import ntpath
import os
import posixpath

from slnpath.config import PathConfig, PathFlavor, get_default_path_config
from slnpath.constants import DIRECTORY_SEPARATORS
from slnpath.diagnostics.classifier import classify_failure
from slnpath.diagnostics.exceptions import PathResolutionError

logger = logging.getLogger(__name__)

_HOST_PATH_MODULES = {
    PathFlavor.POSIX: posixpath,
    PathFlavor.WINDOWS: ntpath,
}


def _resolve(path: str, config: PathConfig) -> str:
    """Make path absolute using the configured host semantics."""
    path = os.fspath(path)
    if "\0" in path:
        raise PathResolutionError(path, "embedded null character")

    host_path = _HOST_PATH_MODULES[PathFlavor(config.flavor)]
    try:
        return host_path.abspath(path)
    except ValueError as e:
        raise PathResolutionError(path, str(e)) from e


def fix_file_path(path: str, config: PathConfig | None = None) -> str:
    """Rewrite directory separators to the canonical separator.

    Only rewrites when the native separator differs from the canonical one;
    otherwise the path is returned as is. Doubled separators are left alone.

    Args:
        path: Path with any separator format
        config: Separator configuration (default: host defaults)

    Returns:
        Path using the canonical separator

    Examples:
        >>> windows = PathConfig(native_separator="\\\\", canonical_separator="/")
        >>> fix_file_path("C:\\\\Solutions\\\\App.sln", windows)
        'C:/Solutions/App.sln'
        >>> posix = PathConfig(native_separator="/", canonical_separator="/")
        >>> fix_file_path("src/App.csproj", posix)
        'src/App.csproj'
    """
    if not path:
        return path

    if config is None:
        config = get_default_path_config()
    if not config.rewrites_separators:
        return path

    canonical = config.canonical_separator
    for separator in DIRECTORY_SEPARATORS:
        if separator != canonical:
            path = path.replace(separator, canonical)
    return path


def normalize_path(path: str, config: PathConfig | None = None) -> str:
    """Resolve a path to its absolute canonical form.

    Handles `.`/`..` segments, relative paths and drive or root references
    the way the configured host does, then canonicalizes separators.

    Args:
        path: Absolute or relative path
        config: Path configuration (default: host defaults)

    Returns:
        Absolute path with canonical separators; empty or None input is
        returned unchanged

    Raises:
        PathResolutionError: If the host cannot resolve the path
        TypeError: If path is not a string or path-like object
    """
    if not path:
        return path

    if config is None:
        config = get_default_path_config()
    return fix_file_path(_resolve(path, config), config)


def normalize_path_no_throw(path: str, config: PathConfig | None = None) -> str:
    """Variant of normalize_path that returns the input instead of raising.

    Meant for rendering a path inside an error message: resolving the path
    must not fail when the error being reported was caused by that same path.
    Only I/O related failures are suppressed; caller defects and any other
    failure propagate unchanged.

    Args:
        path: Absolute or relative path
        config: Path configuration (default: host defaults)

    Returns:
        Normalized path, or the original input if it could not be resolved
    """
    try:
        return normalize_path(path, config)
    except Exception as e:
        failure = classify_failure(e)
        if not failure.is_io_related:
            raise
        logger.debug(f"Falling back to unresolved path {path!r} ({failure}): {e}")
        return path
