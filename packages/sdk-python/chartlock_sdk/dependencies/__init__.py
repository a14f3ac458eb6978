"""
chartlock Dependency Management
===============================

Provides utilities for:
- Classifying release chart references (local / remote / malformed)
- Collecting declared chart constraints with conflict detection
- Resolving them through an external updater into a lock file
- Pinning release versions from the lock file
"""

from .lockfile import parse_lock, render_chart_metadata, render_lock, render_requirements
from .manager import ChartDependencyManager
from .merger import (
    get_unresolved_dependencies,
    lock_name_for,
    merge_locked_dependencies,
    update_dependencies,
)
from .reference import ChartReference, ReferenceKind, classify_chart_reference, is_local_chart
from .sets import ResolvedDependencySet, UnresolvedDependencySet
from .updater import DependencyUpdater, HelmDependencyUpdater

__all__ = [
    # Chart references
    "ChartReference",
    "ReferenceKind",
    "classify_chart_reference",
    "is_local_chart",
    # Sets
    "UnresolvedDependencySet",
    "ResolvedDependencySet",
    # Documents
    "parse_lock",
    "render_chart_metadata",
    "render_lock",
    "render_requirements",
    # Lock protocol
    "ChartDependencyManager",
    "DependencyUpdater",
    "HelmDependencyUpdater",
    # Orchestration
    "get_unresolved_dependencies",
    "lock_name_for",
    "merge_locked_dependencies",
    "update_dependencies",
]
