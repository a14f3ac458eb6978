"""Pytest configuration and fixtures for SDK tests.

Provides an in-memory file system and a scripted dependency updater so the
lock protocol can be exercised without helm or a real disk.
"""
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest
import yaml

package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))

from chartlock_schema import HelmState
from chartlock_sdk.utils import LocalFileSystem


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# ============================================================================
# Test doubles
# ============================================================================


class InMemoryFileSystem:
    """FileSystem keeping files in a dict, recording every access."""

    def __init__(self, files: Optional[Dict[str, bytes]] = None):
        self.files: Dict[str, bytes] = {str(Path(k)): v for k, v in (files or {}).items()}
        self.reads: List[str] = []
        self.writes: List[str] = []
        self.unreadable: set = set()
        self.unwritable: set = set()

    def read_bytes(self, path) -> bytes:
        key = str(Path(path))
        self.reads.append(key)
        if key in self.unreadable:
            raise PermissionError(13, "Permission denied", key)
        if key not in self.files:
            raise FileNotFoundError(2, "No such file or directory", key)
        return self.files[key]

    def write_bytes(self, path, data: bytes) -> None:
        key = str(Path(path))
        if key in self.unwritable:
            raise PermissionError(13, "Permission denied", key)
        self.writes.append(key)
        self.files[key] = data


class RecordingUpdater:
    """DependencyUpdater that writes a canned requirements.lock.

    The staged workspace files are captured before the lock is written so
    tests can inspect what the updater was given.
    """

    def __init__(self, fs, lock_content: Optional[bytes] = None, error: Optional[BaseException] = None):
        self.fs = fs
        self.lock_content = lock_content
        self.error = error
        self.calls: List[Path] = []
        self.staged: Dict[str, Optional[bytes]] = {}

    def update_deps(self, chart_dir: Path) -> None:
        self.calls.append(Path(chart_dir))
        for name in ("Chart.yaml", "requirements.yaml", "requirements.lock"):
            try:
                self.staged[name] = self.fs.read_bytes(Path(chart_dir) / name)
            except FileNotFoundError:
                self.staged[name] = None
        if self.error is not None:
            raise self.error
        if self.lock_content is not None:
            self.fs.write_bytes(Path(chart_dir) / "requirements.lock", self.lock_content)


def lock_yaml(**versions: str) -> bytes:
    """Build lock file content pinning each chart to a version."""
    return yaml.safe_dump(
        {
            "dependencies": [
                {"name": name, "repository": "https://example.com/charts", "version": version}
                for name, version in versions.items()
            ],
            "digest": "sha256:0000",
            "generated": "2024-01-01T00:00:00Z",
        },
        sort_keys=False,
    ).encode("utf-8")


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def memory_fs():
    """Empty in-memory file system."""
    return InMemoryFileSystem()


@pytest.fixture
def recording_updater():
    """Factory for RecordingUpdater instances."""
    def _make(fs=None, lock_content=None, error=None):
        return RecordingUpdater(fs or LocalFileSystem(), lock_content=lock_content, error=error)
    return _make


@pytest.fixture
def make_lock():
    """Expose lock_yaml to tests."""
    return lock_yaml


@pytest.fixture
def temp_dir_factory(tmp_path):
    """tempfile.mkdtemp replacement creating dirs under tmp_path and remembering them."""
    created: List[Path] = []

    def _mkdtemp(suffix="", prefix="tmp"):
        path = tmp_path / f"{prefix}{len(created)}{suffix}"
        path.mkdir()
        created.append(path)
        return str(path)

    _mkdtemp.created = created
    return _mkdtemp


@pytest.fixture
def sample_state():
    """State with two managed charts and one local chart."""
    return HelmState.model_validate(
        {
            "repositories": [
                {"name": "myrepo", "url": "https://example.com/charts"},
            ],
            "releases": [
                {"name": "proxy", "chart": "myrepo/envoy", "version": ""},
                {"name": "web", "chart": "myrepo/nginx", "version": ">=1.0"},
                {"name": "app", "chart": "./local/app"},
            ],
        }
    ).model_copy(update={"file_path": "/deploy/helmfile.yaml"})


@pytest.fixture
def sample_state_file(tmp_path):
    """Same state as sample_state, written to disk."""
    content = """
repositories:
  - name: myrepo
    url: https://example.com/charts
releases:
  - name: proxy
    chart: myrepo/envoy
  - name: web
    chart: myrepo/nginx
    version: ">=1.0"
  - name: app
    chart: ./local/app
"""
    path = tmp_path / "helmfile.yaml"
    path.write_text(content.strip())
    return path
