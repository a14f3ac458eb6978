"""
Lock and Requirements Documents
===============================

YAML encoding of the documents staged in the ephemeral workspace and of the
persisted lock file.
"""

from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from chartlock_common.errors import ChartlockError, ConflictError, MalformedLockError
from chartlock_schema import ChartMetadata, LockedRequirements

from ..utils.yaml_loader import load_yaml
from .sets import ResolvedDependencySet, UnresolvedDependencySet


def _dump(data: Dict[str, Any]) -> bytes:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).encode("utf-8")


def render_chart_metadata(name: str) -> bytes:
    """Render the ``Chart.yaml`` of the synthetic chart."""
    return _dump(ChartMetadata(name=name).model_dump())


def render_requirements(unresolved: UnresolvedDependencySet) -> bytes:
    """Render ``requirements.yaml`` from declared constraints."""
    return _dump(unresolved.to_chart_requirements().model_dump(by_alias=True))


def render_lock(resolved: ResolvedDependencySet) -> bytes:
    """Render a lock document from a resolved set."""
    return _dump(resolved.to_locked_requirements().model_dump(by_alias=True))


def parse_lock(content: bytes, filename: Optional[str] = None) -> ResolvedDependencySet:
    """
    Parse a lock document into a ResolvedDependencySet.

    An empty document yields an empty set.

    Args:
        content: Raw lock file bytes
        filename: Lock file name, reported in errors

    Raises:
        MalformedLockError: Invalid YAML, unexpected structure or duplicate
            chart names
    """
    try:
        data = load_yaml(content)
    except yaml.YAMLError as e:
        raise MalformedLockError(
            f"Invalid YAML in lock file {filename}: {e}", filename=filename
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedLockError(
            f"Lock file {filename} must be a mapping with a 'dependencies' key, "
            f"got {type(data).__name__}",
            filename=filename,
        )

    try:
        locked = LockedRequirements.model_validate(data)
    except (PydanticValidationError, ChartlockError) as e:
        raise MalformedLockError(
            f"Invalid lock file {filename}: {e}", filename=filename
        ) from e

    try:
        return ResolvedDependencySet.from_dependencies(locked.dependencies)
    except ConflictError as e:
        raise MalformedLockError(
            f"Malformed lock file {filename}: {e.message}", filename=filename
        ) from e
