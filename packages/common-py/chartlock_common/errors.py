"""
chartlock Error Taxonomy

Every failure raised by chartlock packages derives from ChartlockError and
carries a stable, machine-readable ``code`` so callers (the CLI in
particular) can map each kind to a distinct exit condition.

Usage:
    from chartlock_common.errors import ConflictError, NotFoundError

    try:
        version = resolved.get("envoy")
    except NotFoundError as e:
        print(e.code, e.message)
"""

from typing import Any, Dict, Optional


class ChartlockError(Exception):
    """Base class for all chartlock errors."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(ChartlockError):
    """The state document is missing, unparsable or structurally invalid."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ConflictError(ChartlockError):
    """The same chart is declared or recorded twice with divergent data."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class NotFoundError(ChartlockError):
    """A referenced chart has no entry in the resolved dependency set."""

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")


class MalformedReferenceError(ChartlockError):
    """A chart reference looks remote but is not of the form ``repo/chart``."""

    def __init__(self, message: str, reference: Optional[str] = None):
        self.reference = reference
        super().__init__(message, code="MALFORMED_REFERENCE")


class MalformedLockError(ChartlockError):
    """A lock file failed to parse or contains duplicate entries."""

    def __init__(self, message: str, filename: Optional[str] = None):
        self.filename = filename
        super().__init__(message, code="MALFORMED_LOCK")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["filename"] = self.filename
        return data


class FilesystemError(ChartlockError):
    """Reading or writing a lock or workspace file failed.

    Absence of the lock file is never reported through this error.
    """

    def __init__(self, message: str, filename: Optional[str] = None):
        self.filename = filename
        super().__init__(message, code="IO_ERROR")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["filename"] = self.filename
        return data


class ExternalToolError(ChartlockError):
    """The external dependency updater failed. No lock was committed."""

    def __init__(self, message: str, stderr: Optional[str] = None):
        self.stderr = stderr
        super().__init__(message, code="EXTERNAL_TOOL_ERROR")


__all__ = [
    "ChartlockError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "MalformedReferenceError",
    "MalformedLockError",
    "FilesystemError",
    "ExternalToolError",
]
