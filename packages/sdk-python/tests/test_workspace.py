"""Tests for workspace utilities."""
import pytest

from chartlock_sdk.utils import LocalFileSystem, ephemeral_workspace


class TestEphemeralWorkspace:
    """Tests for ephemeral_workspace."""

    def test_created_and_removed(self):
        with ephemeral_workspace() as wd:
            assert wd.is_dir()
            (wd / "Chart.yaml").write_text("name: x\n")
        assert not wd.exists()

    def test_removed_on_error(self, temp_dir_factory):
        with pytest.raises(RuntimeError):
            with ephemeral_workspace(temp_dir_factory) as wd:
                (wd / "requirements.yaml").write_text("dependencies: []\n")
                raise RuntimeError("boom")
        assert not wd.exists()

    def test_prefix_passed_to_factory(self, temp_dir_factory):
        with ephemeral_workspace(temp_dir_factory, prefix="lock-") as wd:
            assert wd.name.startswith("lock-")


class TestLocalFileSystem:
    def test_round_trip(self, tmp_path):
        fs = LocalFileSystem()
        fs.write_bytes(tmp_path / "a.lock", b"dependencies: []\n")
        assert fs.read_bytes(tmp_path / "a.lock") == b"dependencies: []\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocalFileSystem().read_bytes(tmp_path / "missing.lock")
