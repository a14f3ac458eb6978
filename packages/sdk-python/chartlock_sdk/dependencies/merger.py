"""
Locked Dependency Merger
========================

Entry points tying a state document to its lock file:

- merge_locked_dependencies: pin release versions from the existing lock
- update_dependencies: re-resolve through the external updater, commit the
  lock, then pin release versions from it

Both return a new HelmState; the caller's document and its release list are
never modified.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from chartlock_common.constants import DEFAULT_WORKSPACE_PREFIX, STATE_FILE_SUFFIXES
from chartlock_common.errors import MalformedReferenceError
from chartlock_common.logger import get_logger
from chartlock_schema import HelmState

from ..utils.workspace import FileSystem, PathLike, TempDirFactory, ephemeral_workspace
from .manager import ChartDependencyManager
from .reference import ChartReference, ReferenceKind, classify_chart_reference
from .sets import UnresolvedDependencySet
from .updater import DependencyUpdater

logger = get_logger(__name__)


def lock_name_for(file_path: str) -> str:
    """
    Derive the lock identity of a state file.

    Examples:
        >>> lock_name_for("/deploy/helmfile.yaml")
        'helmfile'
        >>> lock_name_for("helmfile.2.yaml.gotmpl")
        'helmfile.2'
    """
    name = os.path.basename(file_path)
    for suffix in STATE_FILE_SUFFIXES:
        if name.endswith(suffix):
            name = name[: -len(suffix)]
    return name


def _managed_reference(chart: str, repo_to_url: Dict[str, str]) -> Optional[ChartReference]:
    """Return the reference if the chart is under dependency management."""
    ref = classify_chart_reference(chart)
    if ref.kind == ReferenceKind.MALFORMED:
        raise MalformedReferenceError(
            f"unsupported format of chart name: {chart}", reference=chart
        )
    if ref.kind == ReferenceKind.LOCAL:
        return None
    # No matching repository: likely a local chart in a directory like charts/myapp
    if ref.repository not in repo_to_url:
        return None
    return ref


def get_unresolved_dependencies(state: HelmState) -> Tuple[str, UnresolvedDependencySet]:
    """
    Collect the remote charts referenced by a state's releases.

    Returns:
        (lock name, declared dependencies)

    Raises:
        MalformedReferenceError: A chart reference is neither local nor repo/chart
        ConflictError: Two releases declare the same chart differently
    """
    repo_to_url = state.repository_urls()
    unresolved = UnresolvedDependencySet()

    for release in state.releases:
        ref = _managed_reference(release.chart, repo_to_url)
        if ref is None:
            continue
        unresolved.add(ref.chart, repo_to_url[ref.repository], release.version)

    return lock_name_for(state.file_path), unresolved


def _default_lock_dir(state: HelmState) -> Path:
    return Path(state.file_path).parent if state.file_path else Path(".")


def _new_manager(
    state: HelmState,
    name: str,
    fs: Optional[FileSystem],
    lock_dir: Optional[PathLike],
) -> ChartDependencyManager:
    return ChartDependencyManager(
        name,
        lock_dir=lock_dir if lock_dir is not None else _default_lock_dir(state),
        fs=fs,
    )


def _resolve_dependencies(
    state: HelmState,
    manager: ChartDependencyManager,
    unresolved: UnresolvedDependencySet,
) -> HelmState:
    resolved, lock_exists = manager.resolve(unresolved)
    if not lock_exists:
        logger.debug("Lock file not found, leaving versions untouched", lock=manager.lock_file_name())
        return state

    repo_to_url = state.repository_urls()
    releases = []
    for release in state.releases:
        ref = _managed_reference(release.chart, repo_to_url)
        if ref is None:
            releases.append(release.model_copy(deep=True))
            continue
        version = resolved.get(ref.chart)
        releases.append(release.model_copy(update={"version": version}, deep=True))

    # The result shares no objects with the caller's document
    return state.model_copy(update={"releases": releases}, deep=True)


def merge_locked_dependencies(
    state: HelmState,
    fs: Optional[FileSystem] = None,
    lock_dir: Optional[PathLike] = None,
) -> HelmState:
    """
    Pin each dependency-managed release to the version recorded in the lock.

    Without a lock file the state is returned unchanged: the lock is produced
    by update_dependencies, which is expected to have run beforehand.

    Args:
        state: State document
        fs: File I/O capability (defaults to the local disk)
        lock_dir: Directory of the lock file (defaults to the state's directory)

    Returns:
        A new HelmState with resolved versions, or ``state`` itself when
        nothing needs to change

    Raises:
        NotFoundError: A referenced chart is missing from the lock
        ConflictError, MalformedReferenceError, MalformedLockError,
        FilesystemError
    """
    name, unresolved = get_unresolved_dependencies(state)
    if unresolved.is_empty():
        return state

    manager = _new_manager(state, name, fs, lock_dir)
    return _resolve_dependencies(state, manager, unresolved)


def update_dependencies(
    state: HelmState,
    updater: DependencyUpdater,
    temp_dir: Optional[TempDirFactory] = None,
    fs: Optional[FileSystem] = None,
    lock_dir: Optional[PathLike] = None,
    workspace_prefix: str = DEFAULT_WORKSPACE_PREFIX,
) -> HelmState:
    """
    Re-resolve the state's chart dependencies and rewrite the lock file.

    The ephemeral workspace is removed whether or not the update succeeds.

    Args:
        state: State document
        updater: External dependency updater
        temp_dir: Workspace directory factory (defaults to tempfile.mkdtemp)
        fs: File I/O capability (defaults to the local disk)
        lock_dir: Directory of the lock file (defaults to the state's directory)
        workspace_prefix: Name prefix of the ephemeral workspace directory

    Returns:
        A new HelmState with versions from the freshly committed lock

    Raises:
        ExternalToolError: The updater failed; the previous lock is intact
        ConflictError, NotFoundError, MalformedReferenceError,
        MalformedLockError, FilesystemError
    """
    name, unresolved = get_unresolved_dependencies(state)
    if unresolved.is_empty():
        logger.info("No remote chart dependencies to update", state=name)
        return state

    manager = _new_manager(state, name, fs, lock_dir)
    with ephemeral_workspace(temp_dir, prefix=workspace_prefix) as wd:
        manager.update(updater, wd, unresolved)
        return _resolve_dependencies(state, manager, unresolved)
