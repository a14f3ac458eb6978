"""
Utilities Module
================

Shared utilities for the chartlock SDK:
- File-system capability (injectable for tests)
- Ephemeral workspace lifecycle
- YAML loading that keeps chart versions as written
"""

from .workspace import (
    FileSystem,
    LocalFileSystem,
    PathLike,
    TempDirFactory,
    ephemeral_workspace,
)
from .yaml_loader import VersionPreservingLoader, load_yaml

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "PathLike",
    "TempDirFactory",
    "ephemeral_workspace",
    "VersionPreservingLoader",
    "load_yaml",
]
