"""chartlock SDK - lock remote chart versions referenced by a state file.

This package provides tools for:
- Loading state documents
- Collecting the remote charts their releases reference
- Resolving chart versions through helm into a lock file
- Pinning release versions from the lock file

Example:
    >>> from chartlock_sdk import load_state, merge_locked_dependencies, update_dependencies, HelmDependencyUpdater
    >>> state = load_state("helmfile.yaml")
    >>> pinned = update_dependencies(state, HelmDependencyUpdater())  # writes helmfile.lock
    >>> pinned = merge_locked_dependencies(state)  # reads helmfile.lock

Package Structure:
    chartlock_sdk/
    ├── core/           - State loading
    ├── dependencies/   - Dependency sets, lock protocol, merge/update
    └── utils/          - File-system capability, ephemeral workspace
"""

# Core loading
from .core import dump_state, load_state

# Dependency management
from .dependencies import (
    ChartDependencyManager,
    ChartReference,
    DependencyUpdater,
    HelmDependencyUpdater,
    ReferenceKind,
    ResolvedDependencySet,
    UnresolvedDependencySet,
    classify_chart_reference,
    get_unresolved_dependencies,
    lock_name_for,
    merge_locked_dependencies,
    parse_lock,
    render_lock,
    update_dependencies,
)

# Utilities
from .utils import FileSystem, LocalFileSystem, ephemeral_workspace

__version__ = "0.1.0"

__all__ = [
    # Core functions
    "load_state",
    "dump_state",

    # Orchestration
    "merge_locked_dependencies",
    "update_dependencies",
    "get_unresolved_dependencies",
    "lock_name_for",

    # Dependency types
    "ChartReference",
    "ReferenceKind",
    "classify_chart_reference",
    "UnresolvedDependencySet",
    "ResolvedDependencySet",
    "parse_lock",
    "render_lock",

    # Lock protocol
    "ChartDependencyManager",
    "DependencyUpdater",
    "HelmDependencyUpdater",

    # Utilities
    "FileSystem",
    "LocalFileSystem",
    "ephemeral_workspace",
]
