"""
Tests for the ChartDependencyManager lock protocol.

Tests cover:
- resolve with and without a lock file
- workspace staging (Chart.yaml, requirements.yaml, previous lock)
- commit only after the external updater succeeds
- error kinds for I/O, external tool and malformed lock failures
"""

from pathlib import Path

import pytest
import yaml

from chartlock_common.errors import (
    ExternalToolError,
    FilesystemError,
    MalformedLockError,
)
from chartlock_sdk.dependencies import ChartDependencyManager, UnresolvedDependencySet

URL = "https://example.com/charts"
LOCK_PATH = str(Path("/deploy/helmfile.lock"))


@pytest.fixture
def unresolved():
    deps = UnresolvedDependencySet()
    deps.add("envoy", URL, "")
    deps.add("nginx", URL, ">=1.0")
    return deps


@pytest.fixture
def manager(memory_fs):
    return ChartDependencyManager("helmfile", lock_dir="/deploy", fs=memory_fs)


class TestLockFileName:
    def test_lock_file_name(self):
        assert ChartDependencyManager("helmfile.2").lock_file_name() == "helmfile.2.lock"

    def test_lock_file_path_defaults_to_current_dir(self):
        assert ChartDependencyManager("helmfile").lock_file_path() == Path("helmfile.lock")

    def test_lock_file_path_in_lock_dir(self, manager):
        assert str(manager.lock_file_path()) == LOCK_PATH


class TestResolve:
    """Tests for reading the committed lock."""

    def test_missing_lock_is_not_an_error(self, manager, unresolved):
        resolved, exists = manager.resolve(unresolved)
        assert resolved is None
        assert exists is False

    def test_existing_lock(self, manager, memory_fs, make_lock, unresolved):
        memory_fs.files[LOCK_PATH] = make_lock(envoy="1.2.3", nginx="1.4.0")

        resolved, exists = manager.resolve(unresolved)

        assert exists is True
        assert resolved.get("envoy") == "1.2.3"
        assert resolved.get("nginx") == "1.4.0"

    def test_unreadable_lock_is_io_error(self, manager, memory_fs):
        memory_fs.files[LOCK_PATH] = b"dependencies: []\n"
        memory_fs.unreadable.add(LOCK_PATH)

        with pytest.raises(FilesystemError) as exc_info:
            manager.resolve()

        assert exc_info.value.code == "IO_ERROR"
        assert exc_info.value.filename == LOCK_PATH
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_duplicate_entries_are_malformed(self, manager, memory_fs):
        memory_fs.files[LOCK_PATH] = (
            b"dependencies:\n"
            b"- {name: envoy, repository: r, version: 1.0.0}\n"
            b"- {name: envoy, repository: r, version: 1.0.1}\n"
        )
        with pytest.raises(MalformedLockError) as exc_info:
            manager.resolve()
        assert exc_info.value.filename == LOCK_PATH


class TestUpdate:
    """Tests for the stage / update / commit / re-read sequence."""

    def test_stages_chart_and_requirements(
        self, manager, memory_fs, recording_updater, make_lock, unresolved, tmp_path
    ):
        updater = recording_updater(memory_fs, lock_content=make_lock(envoy="1.2.3", nginx="1.4.0"))

        manager.update(updater, tmp_path, unresolved)

        assert updater.calls == [tmp_path]
        assert yaml.safe_load(updater.staged["Chart.yaml"]) == {"name": "helmfile"}
        reqs = yaml.safe_load(updater.staged["requirements.yaml"])
        assert reqs["dependencies"] == [
            {"name": "envoy", "repository": URL, "version": "*"},
            {"name": "nginx", "repository": URL, "version": ">=1.0"},
        ]
        assert updater.staged["requirements.lock"] is None

    def test_previous_lock_is_seeded(
        self, manager, memory_fs, recording_updater, make_lock, unresolved, tmp_path
    ):
        previous = make_lock(envoy="1.2.0", nginx="1.3.0")
        memory_fs.files[LOCK_PATH] = previous
        updater = recording_updater(memory_fs, lock_content=make_lock(envoy="1.2.0", nginx="1.4.0"))

        manager.update(updater, tmp_path, unresolved)

        assert updater.staged["requirements.lock"] == previous

    def test_commits_and_returns_resolved(
        self, manager, memory_fs, recording_updater, make_lock, unresolved, tmp_path
    ):
        new_lock = make_lock(envoy="1.2.3", nginx="1.4.0")
        updater = recording_updater(memory_fs, lock_content=new_lock)

        resolved = manager.update(updater, tmp_path, unresolved)

        assert memory_fs.files[LOCK_PATH] == new_lock
        assert resolved.get("envoy") == "1.2.3"
        assert resolved.get("nginx") == "1.4.0"

    def test_updater_failure_keeps_lock(
        self, manager, memory_fs, recording_updater, make_lock, unresolved, tmp_path
    ):
        previous = make_lock(envoy="1.2.0", nginx="1.3.0")
        memory_fs.files[LOCK_PATH] = previous
        updater = recording_updater(memory_fs, error=RuntimeError("repo unreachable"))

        with pytest.raises(ExternalToolError) as exc_info:
            manager.update(updater, tmp_path, unresolved)

        assert "repo unreachable" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert memory_fs.files[LOCK_PATH] == previous
        assert LOCK_PATH not in memory_fs.writes

    def test_external_tool_error_passes_through(
        self, manager, memory_fs, recording_updater, unresolved, tmp_path
    ):
        original = ExternalToolError("helm failed", stderr="boom")
        updater = recording_updater(memory_fs, error=original)

        with pytest.raises(ExternalToolError) as exc_info:
            manager.update(updater, tmp_path, unresolved)

        assert exc_info.value is original

    def test_interrupted_updater_is_external_tool_error(
        self, manager, memory_fs, recording_updater, make_lock, unresolved, tmp_path
    ):
        previous = make_lock(envoy="1.2.0", nginx="1.3.0")
        memory_fs.files[LOCK_PATH] = previous
        updater = recording_updater(memory_fs, error=KeyboardInterrupt())

        with pytest.raises(ExternalToolError) as exc_info:
            manager.update(updater, tmp_path, unresolved)

        assert "cancelled" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, KeyboardInterrupt)
        assert memory_fs.files[LOCK_PATH] == previous
        assert LOCK_PATH not in memory_fs.writes

    def test_updater_writing_no_lock_is_io_error(
        self, manager, memory_fs, recording_updater, make_lock, unresolved, tmp_path
    ):
        previous = make_lock(envoy="1.2.0")
        memory_fs.files[LOCK_PATH] = previous
        updater = recording_updater(memory_fs, lock_content=None)
        # The seeded copy would otherwise be read back, so drop it
        updater.update_deps = lambda wd: memory_fs.files.pop(str(Path(wd) / "requirements.lock"))

        with pytest.raises(FilesystemError):
            manager.update(updater, tmp_path, unresolved)

        assert memory_fs.files[LOCK_PATH] == previous

    def test_malformed_updater_output_is_committed_then_reported(
        self, manager, memory_fs, recording_updater, unresolved, tmp_path
    ):
        updater = recording_updater(memory_fs, lock_content=b"dependencies: [oops")

        with pytest.raises(MalformedLockError):
            manager.update(updater, tmp_path, unresolved)

        assert memory_fs.files[LOCK_PATH] == b"dependencies: [oops"

    def test_unwritable_workspace_is_io_error(
        self, manager, memory_fs, recording_updater, unresolved, tmp_path
    ):
        memory_fs.unwritable.add(str(tmp_path / "Chart.yaml"))
        updater = recording_updater(memory_fs)

        with pytest.raises(FilesystemError):
            manager.update(updater, tmp_path, unresolved)

        assert updater.calls == []
