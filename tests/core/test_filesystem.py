"""
Tests for filesystem utilities: zip extraction and directory moves.
"""

import os
import stat
import zipfile

import pytest

from scannerkit.core.exceptions import (
    ArchiveExtractionError,
    InsecureArchiveError,
    InstallTargetExistsError,
    MoveError,
)
from scannerkit.core.filesystem import extract_zip, is_relative_to, move_directory
from tests.mocks import make_scanner_zip


class TestIsRelativeTo:
    """Tests for is_relative_to()."""

    def test_child_path(self, tmp_path):
        assert is_relative_to(tmp_path / "a" / "b", tmp_path)

    def test_sibling_path(self, tmp_path):
        assert not is_relative_to(tmp_path.parent / "other", tmp_path)


class TestExtractZip:
    """Tests for extract_zip()."""

    def test_extracts_top_level_directory(self, tmp_path):
        """Test the archive's top directory appears under destination."""
        archive = make_scanner_zip(tmp_path / "scanner.zip", "sonar-scanner-4.8.0.2856")
        destination = tmp_path / "out"

        result = extract_zip(archive, destination)

        assert result == destination
        assert (destination / "sonar-scanner-4.8.0.2856" / "bin" / "sonar-scanner").is_file()
        assert (
            destination / "sonar-scanner-4.8.0.2856" / "conf" / "sonar-scanner.properties"
        ).is_file()

    @pytest.mark.skipif(os.name == "nt", reason="Unix permissions")
    def test_restores_executable_bit(self, tmp_path):
        """Test launcher scripts stay executable."""
        archive = make_scanner_zip(tmp_path / "scanner.zip", "sonar-scanner")
        extract_zip(archive, tmp_path / "out")

        launcher = tmp_path / "out" / "sonar-scanner" / "bin" / "sonar-scanner"
        assert launcher.stat().st_mode & stat.S_IXUSR

    def test_missing_archive(self, tmp_path):
        """Test missing archive raises ArchiveExtractionError."""
        with pytest.raises(ArchiveExtractionError, match="not found"):
            extract_zip(tmp_path / "missing.zip", tmp_path / "out")

    def test_corrupt_archive(self, tmp_path):
        """Test a file that is not a zip raises ArchiveExtractionError."""
        archive = tmp_path / "broken.zip"
        archive.write_bytes(b"<html>not found</html>")

        with pytest.raises(ArchiveExtractionError, match="Failed to extract"):
            extract_zip(archive, tmp_path / "out")

    def test_blocks_directory_traversal(self, tmp_path):
        """Test members escaping the destination are rejected before writing."""
        archive = tmp_path / "evil.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("ok.txt", "fine")
            zf.writestr("../escaped.txt", "evil")

        with pytest.raises(InsecureArchiveError):
            extract_zip(archive, tmp_path / "out")

        assert not (tmp_path / "escaped.txt").exists()
        assert not (tmp_path / "out" / "ok.txt").exists()


class TestMoveDirectory:
    """Tests for move_directory()."""

    def test_moves_directory(self, tmp_path):
        """Test directory is moved with its contents."""
        source = tmp_path / "sonar-scanner-4.8.0.2856"
        (source / "bin").mkdir(parents=True)
        (source / "bin" / "sonar-scanner").write_text("launcher")
        destination = tmp_path / "sonar-scanner"

        move_directory(source, destination)

        assert not source.exists()
        assert (destination / "bin" / "sonar-scanner").read_text() == "launcher"

    def test_existing_destination_fails(self, tmp_path):
        """Test an existing install is never overwritten."""
        source = tmp_path / "new"
        source.mkdir()
        destination = tmp_path / "installed"
        destination.mkdir()
        (destination / "marker").write_text("old")

        with pytest.raises(InstallTargetExistsError) as exc_info:
            move_directory(source, destination)

        assert exc_info.value.target == destination
        assert source.exists()
        assert (destination / "marker").read_text() == "old"

    def test_missing_source_fails(self, tmp_path):
        """Test moving a directory that was never extracted."""
        with pytest.raises(MoveError, match="does not exist"):
            move_directory(tmp_path / "missing", tmp_path / "target")
