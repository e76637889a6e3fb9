"""bundlekit common utilities: errors, structured logging and shared constants."""

from .constants import (
    AVAILABLE_EXTENSIONS,
    CJS_CONDITION_KEYS,
    CJS_EXTENSIONS,
    DECLARATION_SUFFIX,
    DEFAULT_DIST_FILE,
    DIST_DIR,
    ESM_CONDITION_KEYS,
    ESM_EXTENSIONS,
    LOG_LEVELS,
    MANIFEST_FILENAME,
    MODULE_FORMATS,
    PACKAGE_TYPES,
    RUNTIME_VARIANTS,
    RUNTIMES,
    SRC_DIR,
    TYPES_CONDITION,
)
from .errors import BundlekitError, ManifestError, NotFoundError, ValidationError
from .logger import BundlekitLogger, configure_logging, get_logger

__all__ = [
    # Errors
    "BundlekitError",
    "ValidationError",
    "ManifestError",
    "NotFoundError",
    # Logging
    "BundlekitLogger",
    "get_logger",
    "configure_logging",
    # Constants
    "AVAILABLE_EXTENSIONS",
    "CJS_CONDITION_KEYS",
    "CJS_EXTENSIONS",
    "DECLARATION_SUFFIX",
    "DEFAULT_DIST_FILE",
    "DIST_DIR",
    "ESM_CONDITION_KEYS",
    "ESM_EXTENSIONS",
    "LOG_LEVELS",
    "MANIFEST_FILENAME",
    "MODULE_FORMATS",
    "PACKAGE_TYPES",
    "RUNTIME_VARIANTS",
    "RUNTIMES",
    "SRC_DIR",
    "TYPES_CONDITION",
]
