"""Unit tests for the library entry points."""

import os
import stat
from unittest.mock import patch

import pytest

import pyfsync
from pyfsync import (
    FileOverDirectoryError,
    FsyncError,
    SourceNotFoundError,
    SyncConfigError,
    SyncIOError,
    SyncPair,
)


def _perms(path) -> int:
    return stat.S_IMODE(os.stat(path).st_mode) & 0o777


@pytest.fixture
def source(tmp_path):
    """Create a source directory with two files."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "a").write_text("a")
    (src / "b").write_text("b")
    return src


class TestSynchronize:
    """Tests for synchronize and its sync/sync_del wrappers."""

    def test_idempotent(self, source, tmp_path):
        """A second run leaves the destination unchanged and copies nothing."""
        dst = tmp_path / "dst"

        first = pyfsync.synchronize(dst, source, False)
        second = pyfsync.synchronize(dst, source, False)

        assert first.files_copied == 2
        assert second.files_copied == 0
        assert second.changed is False
        assert (dst / "a").read_text() == "a"
        assert (dst / "b").read_text() == "b"

    def test_sync_keeps_extra_files(self, source, tmp_path):
        """sync never deletes destination entries missing from source."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "c").write_text("c")

        pyfsync.sync(dst, source)

        assert sorted(p.name for p in dst.iterdir()) == ["a", "b", "c"]

    def test_sync_del_removes_extra_files(self, source, tmp_path):
        """sync_del removes entries missing from source."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "a").write_text("a")
        (dst / "b").write_text("b")
        (dst / "c").write_text("c")

        stats = pyfsync.sync_del(dst, source)

        assert sorted(p.name for p in dst.iterdir()) == ["a", "b"]
        assert stats.files_copied == 0
        assert stats.entries_removed == 1

    def test_guard_rejects_without_side_effects(self, tmp_path):
        """A file never replaces a non-empty directory at the top level."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "x").write_text("x")
        src = tmp_path / "src"
        src.write_text("X")

        with pytest.raises(FileOverDirectoryError):
            pyfsync.synchronize(dst, src, False)

        assert dst.is_dir()
        assert (dst / "x").read_text() == "x"

    def test_guard_applies_in_deletion_mode(self, tmp_path):
        """The guard also runs when deletion mode is enabled."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "x").write_text("x")
        src = tmp_path / "src"
        src.write_text("X")

        with pytest.raises(FileOverDirectoryError):
            pyfsync.sync_del(dst, src)

        assert (dst / "x").exists()

    def test_empty_directory_replaced_by_file(self, tmp_path):
        """An empty destination directory may be replaced by a file."""
        dst = tmp_path / "dst"
        dst.mkdir()
        src = tmp_path / "src"
        src.write_text("X")

        pyfsync.sync(dst, src)

        assert dst.is_file()
        assert dst.read_text() == "X"

    def test_nested_directory_replaced_by_file(self, tmp_path):
        """Below the top level, directories are replaced by files."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "node").write_text("X")
        dst = tmp_path / "dst"
        (dst / "node").mkdir(parents=True)
        (dst / "node" / "old").write_text("old")

        pyfsync.sync(dst, src)

        assert (dst / "node").read_text() == "X"

    def test_permissions_only(self, tmp_path):
        """Same content, different mode: mode is fixed and nothing copied."""
        src = tmp_path / "src"
        dst = tmp_path / "dst"
        src.write_text("same")
        dst.write_text("same")
        os.chmod(src, 0o755)
        os.chmod(dst, 0o600)

        stats = pyfsync.sync(dst, src)

        assert _perms(dst) == 0o755
        assert stats.files_copied == 0
        assert stats.permissions_updated == 1

    def test_missing_source(self, tmp_path):
        """A missing source is reported before any change is made."""
        dst = tmp_path / "dst"

        with pytest.raises(SourceNotFoundError) as exc_info:
            pyfsync.sync(dst, tmp_path / "src")

        assert exc_info.value.source == tmp_path / "src"
        assert not dst.exists()

    def test_io_error_is_wrapped(self, source, tmp_path):
        """OS errors are re-raised as SyncIOError chained to the original."""
        error = OSError(28, "No space left on device", str(tmp_path / "dst" / "a"))

        with patch(
            "pyfsync.tree.operations.SyncOperations.copy_file", side_effect=error
        ):
            with pytest.raises(SyncIOError) as exc_info:
                pyfsync.sync(tmp_path / "dst", source)

        assert exc_info.value.__cause__ is error
        assert exc_info.value.errno == 28
        assert exc_info.value.path == tmp_path / "dst" / "a"
        assert "No space left on device" in str(exc_info.value)

    def test_errors_share_base_class(self):
        """Every library error derives from FsyncError."""
        for cls in (
            FileOverDirectoryError,
            SourceNotFoundError,
            SyncIOError,
            SyncConfigError,
        ):
            assert issubclass(cls, FsyncError)

    def test_explicit_chunk_size(self, source, tmp_path):
        """Test a custom chunk size is accepted."""
        stats = pyfsync.synchronize(tmp_path / "dst", source, chunk_size=1)
        assert stats.files_copied == 2

    def test_invalid_chunk_size(self, source, tmp_path):
        """Test a non-positive chunk size is rejected."""
        with pytest.raises(SyncConfigError):
            pyfsync.synchronize(tmp_path / "dst", source, chunk_size=0)

    def test_progress_callback(self, source, tmp_path):
        """Test decisions are passed to the progress callback."""
        seen = []

        pyfsync.sync(tmp_path / "dst", source, progress_callback=seen.append)

        assert [d.destination.name for d in seen] == ["dst", "a", "b"]


class TestSyncTo:
    """Tests for syncing several sources into a directory."""

    def test_sync_to_uses_basenames(self, tmp_path):
        """sync_to("a", "b", "c/d") syncs a/b and a/d."""
        (tmp_path / "b").mkdir()
        (tmp_path / "b" / "f").write_text("f")
        (tmp_path / "c").mkdir()
        (tmp_path / "c" / "d").write_text("d")
        target = tmp_path / "a"

        stats = pyfsync.sync_to(target, tmp_path / "b", tmp_path / "c" / "d")

        assert (target / "b" / "f").read_text() == "f"
        assert (target / "d").read_text() == "d"
        assert stats.files_copied == 2

    def test_sync_del_to_deletes_extra(self, tmp_path):
        """sync_del_to uses deletion mode for every source."""
        (tmp_path / "b").mkdir()
        (tmp_path / "b" / "f").write_text("f")
        target = tmp_path / "a"
        (target / "b").mkdir(parents=True)
        (target / "b" / "extra").write_text("extra")
        (target / "unrelated").write_text("u")

        pyfsync.sync_del_to(target, tmp_path / "b")

        assert not (target / "b" / "extra").exists()
        assert (target / "unrelated").exists()

    def test_sync_to_stops_at_first_error(self, tmp_path):
        """Later sources are not processed after a failure."""
        (tmp_path / "later").write_text("later")
        target = tmp_path / "a"

        with pytest.raises(SourceNotFoundError):
            pyfsync.sync_to(target, tmp_path / "missing", tmp_path / "later")

        assert not (target / "later").exists()


class TestSyncPair:
    """Tests for sync_pair."""

    def test_sync_pair_uses_delete_flag(self, source, tmp_path):
        """Test the pair's delete flag selects deletion mode."""
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "extra").write_text("e")

        pyfsync.sync_pair(SyncPair(destination=dst, source=source, delete=True))

        assert not (dst / "extra").exists()
        assert (dst / "a").exists()
