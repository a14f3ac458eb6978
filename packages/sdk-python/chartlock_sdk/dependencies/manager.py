"""
Chart Dependency Manager
========================

Owns the lock file of one state document.

Update protocol:
1. Stage a synthetic chart in a workspace: Chart.yaml, requirements.yaml and,
   when present, the previous lock as requirements.lock
2. Run the external updater against the workspace
3. Commit the updater's requirements.lock as ``<name>.lock``
4. Re-read the committed lock

The committed lock is never touched unless step 2 succeeded.
"""

from pathlib import Path
from typing import Optional, Tuple

from chartlock_common.constants import (
    CHART_METADATA_FILE,
    LOCK_FILE_SUFFIX,
    REQUIREMENTS_FILE,
    REQUIREMENTS_LOCK_FILE,
)
from chartlock_common.errors import ExternalToolError, FilesystemError
from chartlock_common.logger import ChartlockLogger, get_logger

from ..utils.workspace import FileSystem, LocalFileSystem, PathLike
from .lockfile import parse_lock, render_chart_metadata, render_requirements
from .sets import ResolvedDependencySet, UnresolvedDependencySet
from .updater import DependencyUpdater


class ChartDependencyManager:
    """
    Lock-file protocol for the state identified by ``name``.

    Args:
        name: Lock identity, usually the state file's base name
            (``helmfile`` for ``helmfile.yaml``)
        lock_dir: Directory holding the lock file (defaults to the
            current directory)
        fs: File I/O capability (defaults to the local disk)
        logger: Logger override
    """

    def __init__(
        self,
        name: str,
        lock_dir: Optional[PathLike] = None,
        fs: Optional[FileSystem] = None,
        logger: Optional[ChartlockLogger] = None,
    ):
        self.name = name
        self.lock_dir = Path(lock_dir) if lock_dir is not None else Path(".")
        self.fs: FileSystem = fs or LocalFileSystem()
        self.logger = logger or get_logger(__name__)

    def lock_file_name(self) -> str:
        return f"{self.name}{LOCK_FILE_SUFFIX}"

    def lock_file_path(self) -> Path:
        return self.lock_dir / self.lock_file_name()

    def resolve(
        self, unresolved: Optional[UnresolvedDependencySet] = None
    ) -> Tuple[Optional[ResolvedDependencySet], bool]:
        """
        Load the resolved dependencies from the lock file.

        Args:
            unresolved: The declared dependencies, used for logging only

        Returns:
            (resolved, True) when the lock exists, (None, False) when it does
            not. A missing lock means resolution has never run.

        Raises:
            FilesystemError: The lock exists but could not be read
            MalformedLockError: The lock could not be parsed or has duplicates
        """
        lock_path = self.lock_file_path()
        try:
            content = self._read_bytes(lock_path)
        except FileNotFoundError:
            self.logger.debug("No lock file found", path=lock_path)
            return None, False

        resolved = parse_lock(content, filename=str(lock_path))
        self.logger.debug(
            "Loaded lock file",
            path=lock_path,
            locked=len(resolved),
            declared=len(unresolved) if unresolved is not None else "n/a",
        )
        return resolved, True

    def update(
        self,
        updater: DependencyUpdater,
        workspace_dir: PathLike,
        unresolved: UnresolvedDependencySet,
    ) -> ResolvedDependencySet:
        """
        Resolve ``unresolved`` with the external updater and commit the lock.

        Args:
            updater: External dependency updater
            workspace_dir: Existing, empty directory to stage the chart in
            unresolved: Declared dependencies

        Returns:
            The resolved set read back from the committed lock

        Raises:
            ExternalToolError: The updater failed or was interrupted; the lock is unchanged
            FilesystemError: A lock or workspace file could not be accessed
            MalformedLockError: The updater produced an unparsable lock
        """
        wd = Path(workspace_dir)

        self._write_bytes(wd / CHART_METADATA_FILE, render_chart_metadata(self.name))
        self._write_bytes(wd / REQUIREMENTS_FILE, render_requirements(unresolved))

        # Seed the previous lock so unchanged constraints keep their versions
        lock_path = self.lock_file_path()
        try:
            previous = self._read_bytes(lock_path)
        except FileNotFoundError:
            previous = None
        if previous is not None:
            self._write_bytes(wd / REQUIREMENTS_LOCK_FILE, previous)

        self.logger.info(
            "Updating chart dependencies", state=self.name, dependencies=len(unresolved)
        )
        try:
            updater.update_deps(wd)
        except ExternalToolError:
            raise
        except KeyboardInterrupt as e:
            raise ExternalToolError(f"dependency update cancelled for {self.name}") from e
        except Exception as e:
            raise ExternalToolError(
                f"dependency update failed for {self.name}: {e}"
            ) from e

        updated = self._read_bytes(wd / REQUIREMENTS_LOCK_FILE, missing_is_error=True)

        self._write_bytes(lock_path, updated)
        self.logger.info("Committed lock file", path=lock_path)

        resolved, _ = self.resolve(unresolved)
        if resolved is None:
            raise FilesystemError(
                f"lock file {lock_path} vanished right after commit", filename=str(lock_path)
            )
        return resolved

    def _read_bytes(self, path: Path, missing_is_error: bool = False) -> bytes:
        try:
            data = self.fs.read_bytes(path)
        except FileNotFoundError as e:
            if missing_is_error:
                raise FilesystemError(f"file not found: {path}", filename=str(path)) from e
            raise
        except OSError as e:
            raise FilesystemError(f"unable to read {path}: {e}", filename=str(path)) from e
        self.logger.debug(f"read from {path}:\n{data.decode('utf-8', 'replace')}")
        return data

    def _write_bytes(self, path: Path, data: bytes) -> None:
        try:
            self.fs.write_bytes(path, data)
        except OSError as e:
            raise FilesystemError(f"unable to write {path}: {e}", filename=str(path)) from e
        self.logger.debug(f"wrote to {path}:\n{data.decode('utf-8', 'replace')}")
