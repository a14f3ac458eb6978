"""
chartlock Schema Package

Pydantic models for deployment-state documents and dependency lock files.

Usage:
    from chartlock_schema import HelmState, DependencySpec, LockedRequirements
"""

from chartlock_common import ValidationError

from .lockfile_v1 import (
    ChartMetadata,
    ChartRequirements,
    DependencySpec,
    LockedRequirements,
    ResolvedDependency,
)
from .state_v1 import HelmState, ReleaseSpec, RepositorySpec

__all__ = [
    # State document
    "HelmState",
    "ReleaseSpec",
    "RepositorySpec",
    # Dependency records
    "DependencySpec",
    "ResolvedDependency",
    # Workspace / lock documents
    "ChartMetadata",
    "ChartRequirements",
    "LockedRequirements",
    # Re-exported for convenience
    "ValidationError",
]
