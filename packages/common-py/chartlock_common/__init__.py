"""
chartlock Common Package

Shared primitives used across all chartlock packages.

This package provides:
- Exception classes with stable error codes
- Constants for file names, suffixes and defaults
- Logger with structured keyword context
- Environment-driven settings

Usage:
    from chartlock_common import ConflictError, get_logger, get_settings

    logger = get_logger(__name__)
    settings = get_settings()
"""

# Error classes
from .errors import (
    ChartlockError,
    ValidationError,
    ConflictError,
    NotFoundError,
    MalformedReferenceError,
    MalformedLockError,
    FilesystemError,
    ExternalToolError,
)

# Constants
from .constants import (
    CHARTLOCK_VERSION,
    LOCK_FILE_SUFFIX,
    STATE_FILE_SUFFIXES,
    ANY_VERSION,
    CHART_METADATA_FILE,
    REQUIREMENTS_FILE,
    REQUIREMENTS_LOCK_FILE,
    DEFAULT_HELM_BINARY,
    LOG_LEVELS,
    EXIT_CODES,
)

# Logger
from .logger import (
    ChartlockLogger,
    get_logger,
    configure_logging,
)

# Settings
from .config import Settings, get_settings

__version__ = CHARTLOCK_VERSION

__all__ = [
    # Errors
    "ChartlockError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "MalformedReferenceError",
    "MalformedLockError",
    "FilesystemError",
    "ExternalToolError",
    # Constants
    "CHARTLOCK_VERSION",
    "LOCK_FILE_SUFFIX",
    "STATE_FILE_SUFFIXES",
    "ANY_VERSION",
    "CHART_METADATA_FILE",
    "REQUIREMENTS_FILE",
    "REQUIREMENTS_LOCK_FILE",
    "DEFAULT_HELM_BINARY",
    "LOG_LEVELS",
    "EXIT_CODES",
    # Logger
    "ChartlockLogger",
    "get_logger",
    "configure_logging",
    # Settings
    "Settings",
    "get_settings",
]
