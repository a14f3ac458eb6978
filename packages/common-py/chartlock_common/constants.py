"""
chartlock Shared Constants

Single source of truth for file names, suffixes and defaults used across
chartlock packages.

Usage:
    from chartlock_common.constants import LOCK_FILE_SUFFIX, ANY_VERSION
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

CHARTLOCK_VERSION = "0.1.0"
"""Current chartlock release"""


# =============================================================================
# LOCK FILES
# =============================================================================

LOCK_FILE_SUFFIX = ".lock"
"""Suffix appended to the state name to form the lock file name"""

STATE_FILE_SUFFIXES = (".gotmpl", ".yaml", ".yml")
"""Suffixes stripped, in order, from a state file's base name"""

ANY_VERSION = "*"
"""Constraint written for charts declared without a version"""


# =============================================================================
# EPHEMERAL CHART WORKSPACE (helm v2 layout)
# =============================================================================

CHART_METADATA_FILE = "Chart.yaml"
"""Descriptor naming the synthetic chart"""

REQUIREMENTS_FILE = "requirements.yaml"
"""Constraints handed to the external updater"""

REQUIREMENTS_LOCK_FILE = "requirements.lock"
"""Lock read and written by the external updater"""

DEFAULT_WORKSPACE_PREFIX = "chartlock-"
"""Prefix of ephemeral workspace directory names"""


# =============================================================================
# EXTERNAL TOOLS
# =============================================================================

DEFAULT_HELM_BINARY = "helm"
"""Helm executable used by the default dependency updater"""


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVELS = ["debug", "info", "warn", "error"]
"""Valid log levels"""

DEFAULT_LOG_LEVEL = "info"


# =============================================================================
# CLI EXIT CODES (one per error kind)
# =============================================================================

EXIT_CODES = {
    "VALIDATION_ERROR": 2,
    "CONFLICT": 3,
    "NOT_FOUND": 4,
    "MALFORMED_REFERENCE": 5,
    "MALFORMED_LOCK": 6,
    "IO_ERROR": 7,
    "EXTERNAL_TOOL_ERROR": 8,
}
"""Process exit code for each ChartlockError code"""

DEFAULT_EXIT_CODE = 1
