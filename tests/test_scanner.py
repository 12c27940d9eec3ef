"""
Unit tests for the file collection providers.
"""

import pytest
from datetime import datetime

from file_commands.collection.scanner import DirectoryScanner, sample_files
from file_commands.config.settings import ScannerConfig
from file_commands.interpreter.models import FileRecord
from file_commands.interpreter.operations import find_duplicates
from file_commands.utils.exceptions import ErrorCode, InvalidRecordError, ScanError


@pytest.fixture
def folder(tmp_path):
    """Directory with regular, hidden, ignored and nested files."""
    (tmp_path / "report.pdf").write_bytes(b"x" * 10)
    (tmp_path / "PHOTO.JPG").write_bytes(b"y" * 20)
    (tmp_path / ".hidden.txt").write_text("secret")
    (tmp_path / "download.tmp").write_text("partial")
    nested = tmp_path / "sub"
    nested.mkdir()
    (nested / "clip.mp4").write_bytes(b"z" * 30)
    return tmp_path


class TestDirectoryScanner:
    """Tests for DirectoryScanner."""

    def test_scan_top_level(self, folder):
        """Test non-recursive scan lists regular, visible, non-ignored files."""
        records = DirectoryScanner().scan(folder)

        assert sorted(r.name for r in records) == ["PHOTO.JPG", "report.pdf"]

    def test_record_fields(self, folder):
        """Test records carry size, lower-case extension and display path."""
        records = {r.name: r for r in DirectoryScanner().scan(folder)}
        photo = records["PHOTO.JPG"]

        assert photo.extension == "jpg"
        assert photo.size_bytes == 20
        assert photo.path == f"{folder.name}/PHOTO.JPG"
        assert isinstance(photo.modified_at, datetime)

    def test_unique_ids(self, folder):
        records = DirectoryScanner().scan(folder)

        assert len({r.id for r in records}) == len(records)

    def test_recursive(self, folder):
        """Test recursive scan includes nested files."""
        scanner = DirectoryScanner(ScannerConfig(recursive=True))

        records = {r.name: r for r in scanner.scan(folder)}

        assert "clip.mp4" in records
        assert records["clip.mp4"].path == f"{folder.name}/sub/clip.mp4"

    def test_include_hidden(self, folder):
        scanner = DirectoryScanner(ScannerConfig(include_hidden=True))

        names = [r.name for r in scanner.scan(folder)]

        assert ".hidden.txt" in names
        assert "download.tmp" not in names

    def test_missing_directory(self, tmp_path):
        """Test missing directory raises ScanError."""
        with pytest.raises(ScanError) as exc_info:
            DirectoryScanner().scan(tmp_path / "nope")

        assert exc_info.value.error_code == ErrorCode.DIRECTORY_NOT_FOUND

    def test_not_a_directory(self, folder):
        with pytest.raises(ScanError) as exc_info:
            DirectoryScanner().scan(folder / "report.pdf")

        assert exc_info.value.error_code == ErrorCode.NOT_A_DIRECTORY


class TestSampleFiles:
    """Tests for the placeholder collection."""

    def test_contents(self):
        files = sample_files("Demo")

        assert len(files) == 8
        assert files[0].path == "Demo/Document1.pdf"
        assert files[0].size_bytes == 2_621_440

    def test_contains_duplicate_pair(self):
        duplicates = find_duplicates(sample_files())

        assert [f.name for f in duplicates] == ["Image1.jpg", "Image1_copy.jpg"]


class TestFileRecord:
    """Tests for FileRecord validation."""

    def test_negative_size(self):
        with pytest.raises(InvalidRecordError) as exc_info:
            FileRecord("1", "a.txt", "txt", -1, datetime(2024, 1, 1))

        assert exc_info.value.details["field"] == "size_bytes"

    def test_extension_normalized(self):
        record = FileRecord("1", "a.PDF", ".PDF", 1, datetime(2024, 1, 1))

        assert record.extension == "pdf"

    def test_to_dict(self):
        record = FileRecord("1", "a.pdf", "pdf", 1, datetime(2024, 1, 1), "x/a.pdf")

        assert record.to_dict()["modified_at"] == "2024-01-01T00:00:00"
