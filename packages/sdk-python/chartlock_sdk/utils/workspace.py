"""
Workspace Utilities Module
==========================

Provides the file-system seams used by the dependency manager:
- FileSystem: the read-bytes / write-bytes capability the manager depends on
- LocalFileSystem: the default implementation backed by the real disk
- ephemeral_workspace: scoped creation and guaranteed removal of the
  temporary chart directory handed to the external updater
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, Protocol, Union

from chartlock_common.constants import DEFAULT_WORKSPACE_PREFIX
from chartlock_common.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

# Signature of tempfile.mkdtemp(suffix, prefix)
TempDirFactory = Callable[..., str]


# ============================================================================
# File System Capability
# ============================================================================


class FileSystem(Protocol):
    """
    Minimal file I/O capability.

    ``read_bytes`` must raise FileNotFoundError for a missing file so callers
    can tell absence apart from other failures.
    """

    def read_bytes(self, path: PathLike) -> bytes: ...

    def write_bytes(self, path: PathLike, data: bytes) -> None: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def read_bytes(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        Path(path).write_bytes(data)


# ============================================================================
# Ephemeral Workspace
# ============================================================================


@contextmanager
def ephemeral_workspace(
    temp_dir: Optional[TempDirFactory] = None,
    prefix: str = DEFAULT_WORKSPACE_PREFIX,
) -> Iterator[Path]:
    """
    Create a temporary directory and remove it on every exit path.

    Args:
        temp_dir: Factory returning a new directory path, called as
            ``temp_dir(suffix, prefix)`` (defaults to tempfile.mkdtemp)
        prefix: Directory name prefix passed to the factory

    Yields:
        Path to the created directory

    Example:
        >>> with ephemeral_workspace() as wd:
        ...     (wd / "Chart.yaml").write_text("name: app\\n")
        >>> wd.exists()
        False
    """
    factory = temp_dir or tempfile.mkdtemp
    path = Path(factory("", prefix))
    logger.debug("Created ephemeral workspace", path=path)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        logger.debug("Removed ephemeral workspace", path=path)


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "PathLike",
    "TempDirFactory",
    "ephemeral_workspace",
]
