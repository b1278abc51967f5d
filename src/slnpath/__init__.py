"""slnpath - Path safety layer for solution-file ingestion.

slnpath turns raw path strings taken from solution and project files into
canonical, platform-neutral paths without failing on malformed input, and
rejects paths containing characters the filesystem cannot accept.
"""

__version__ = "0.1.0"
__author__ = "rpapub"
__email__ = "contact@rpapub.dev"
__description__ = "Path normalization and validation for solution-file ingestion"

from slnpath.config import PathConfig, SlnpathConfig, load_config
from slnpath.diagnostics import classify_failure, is_io_related
from slnpath.utils.paths import normalize_path, normalize_path_no_throw
from slnpath.validation.path_rules import is_path_invalid

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
    "PathConfig",
    "SlnpathConfig",
    "load_config",
    "classify_failure",
    "is_io_related",
    "normalize_path",
    "normalize_path_no_throw",
    "is_path_invalid",
]
