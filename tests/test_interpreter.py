"""
Unit tests for the command interpreter.
"""

import pytest
from datetime import datetime, timedelta

from file_commands.config.settings import InterpreterConfig
from file_commands.interpreter.models import Action, FileRecord
from file_commands.interpreter.processor import (
    CommandInterpreter,
    NO_MATCH_MESSAGE,
    process_command,
)
from file_commands.interpreter.suggestions import HELP_MESSAGE

MB = 1024 * 1024


def make_record(name, size, modified=None):
    return FileRecord(
        id=name,
        name=name,
        extension=name.rsplit(".", 1)[-1],
        size_bytes=size,
        modified_at=modified or datetime(2024, 1, 1),
        path=f"test/{name}",
    )


@pytest.fixture
def files():
    """The three-file collection used throughout the scenarios."""
    return [
        make_record("a.pdf", 2_621_440, datetime(2024, 1, 3)),
        make_record("b.jpg", 524_288, datetime(2024, 1, 1)),
        make_record("c.jpg", 524_288, datetime(2024, 1, 2)),
    ]


@pytest.fixture
def interpreter():
    """Interpreter with a fixed clock."""
    return CommandInterpreter(clock=lambda: datetime(2024, 3, 9, 14, 5, 7))


def names(result):
    return [f.name for f in result.files]


class TestBasicOutcomes:
    """Blank, unknown and total-function behaviour."""

    def test_blank_command(self, interpreter, files):
        """Test whitespace-only command returns files unchanged."""
        result = interpreter.process("   ", files)

        assert result.action == Action.NONE
        assert result.files == files
        assert result.message is None

    def test_none_command(self, interpreter, files):
        """Test a missing command is treated as blank."""
        result = interpreter.process(None, files)

        assert result.action == Action.NONE

    def test_unknown_command(self, interpreter, files):
        """Test unrecognized command yields help text."""
        result = interpreter.process("frobnicate everything", files)

        assert result.action == Action.UNKNOWN
        assert result.files == files
        assert result.message == HELP_MESSAGE
        assert "Sort by size" in result.message

    @pytest.mark.parametrize("command", [
        "", "???", "[", "]]", "move", "sort", "name", "larger than",
        "show files larger than mb", "move [] to [ ]", "find name ''",
        "delete everything now", "12345", "z-a",
        "show files larger than 1" + "0" * 400 + " mb",
    ])
    def test_never_raises(self, interpreter, files, command):
        """Test every command produces a valid action."""
        result = interpreter.process(command, files)

        assert result.action in set(Action)

    def test_empty_collection(self, interpreter):
        """Test commands over no files."""
        assert interpreter.process("show pdf files", []).files == []
        assert interpreter.process("find duplicates", []).files == []
        assert interpreter.process("move pdfs to [X]", []).action == Action.NONE

    def test_input_not_mutated(self, interpreter, files):
        """Test sorting does not reorder the caller's list."""
        before = list(files)

        result = interpreter.process("sort by size descending", files)
        result.files.clear()

        assert files == before

    def test_module_level_helper(self, files):
        """Test process_command uses a default interpreter."""
        result = process_command("show all pdf files", files)

        assert names(result) == ["a.pdf"]


class TestMoveIntent:
    """Tests for move/relocate commands."""

    def test_move_images_larger_than(self, interpreter, files):
        """Test bracketed destination with size threshold."""
        result = interpreter.process("move images larger than 400kb to [Photos]", files)

        assert result.action == Action.MOVE
        assert names(result) == ["b.jpg", "c.jpg"]
        assert result.target_folder == "Photos"
        assert result.message == "Moving 2 file(s) to folder 'Photos'"

    def test_no_candidates(self, interpreter, files):
        """Test move with nothing to move returns the input unchanged."""
        result = interpreter.process("move videos to [Clips]", files)

        assert result.action == Action.NONE
        assert result.files == files
        assert result.message == NO_MATCH_MESSAGE
        assert result.target_folder is None

    def test_default_folder_screenshots(self, interpreter, files):
        """Test image moves default to Screenshots."""
        result = interpreter.process("move screenshots larger than 100kb", files)

        assert result.target_folder == "Screenshots"
        assert names(result) == ["b.jpg", "c.jpg"]

    def test_default_folder_documents(self, interpreter, files):
        """Test document moves default to Documents."""
        result = interpreter.process("move pdf files", files)

        assert result.target_folder == "Documents"
        assert names(result) == ["a.pdf"]

    def test_generated_folder_uses_clock(self, interpreter, files):
        """Test untyped moves get a timestamped folder."""
        result = interpreter.process("move everything larger than 1 mb", files)

        assert result.target_folder == "Organized_20240309140507"
        assert names(result) == ["a.pdf"]

    def test_new_folder_is_not_a_name(self, interpreter, files):
        """Test "into a new folder" falls back to the default name."""
        result = interpreter.process("copy pdf files into a new folder", files)

        assert result.target_folder == "Documents"

    def test_phrase_folder(self, interpreter, files):
        """Test folder named by a phrase."""
        result = interpreter.process("move pdfs to the tax reports folder", files)

        assert result.target_folder == "Tax reports"
        assert names(result) == ["a.pdf"]

    def test_phrase_folder_sentence_case(self, interpreter, files):
        """Test phrase names are sentence-cased whatever the input case."""
        result = interpreter.process("move pdfs to the TAX Reports folder", files)

        assert result.target_folder == "Tax reports"

    def test_bracket_beats_phrase(self, interpreter, files):
        """Test bracketed name has precedence over a folder phrase."""
        result = interpreter.process(
            "move pdfs to the reports folder [Archive 2024]", files
        )

        assert result.target_folder == "Archive 2024"

    def test_bracket_text_is_not_a_type(self, interpreter, files):
        """Test destination names do not add file types."""
        result = interpreter.process("move pdf files to [Videos]", files)

        assert names(result) == ["a.pdf"]
        assert result.target_folder == "Videos"

    def test_move_all_types(self, interpreter, files):
        """Test move without a type selects every file."""
        result = interpreter.process("transfer all files to [Everything]", files)

        assert names(result) == ["a.pdf", "b.jpg", "c.jpg"]

    def test_move_beats_duplicates(self, interpreter, files):
        """Test move has priority over duplicate detection."""
        result = interpreter.process("move duplicate images to [Dups]", files)

        assert result.action == Action.MOVE
        assert result.target_folder == "Dups"

    def test_move_beats_filter(self, interpreter, files):
        """Test move has priority over search."""
        result = interpreter.process("find and move pdfs to [Docs]", files)

        assert result.action == Action.MOVE
        assert names(result) == ["a.pdf"]


class TestFilterIntent:
    """Tests for search/filter commands."""

    def test_show_pdf_files(self, interpreter, files):
        """Test type filter."""
        result = interpreter.process("show all pdf files", files)

        assert result.action == Action.FILTER
        assert names(result) == ["a.pdf"]
        assert result.message == "Found 1 file(s) matching your criteria"

    def test_show_without_criteria(self, interpreter, files):
        """Test a bare search lists everything."""
        result = interpreter.process("show files", files)

        assert result.action == Action.FILTER
        assert len(result.files) == 3

    def test_binary_megabyte(self, interpreter):
        """Test 1 mb means 1,048,576 bytes."""
        collection = [
            make_record("decimal.bin", 1_000_001),
            make_record("exact.bin", 1_048_576),
            make_record("over.bin", 1_048_577),
        ]

        result = interpreter.process("show files larger than 1 mb", collection)

        assert names(result) == ["over.bin"]

    def test_smaller_than(self, interpreter, files):
        """Test less-than threshold."""
        result = interpreter.process("find files smaller than 600 KB", files)

        assert names(result) == ["b.jpg", "c.jpg"]

    def test_decimal_threshold(self, interpreter, files):
        """Test fractional sizes."""
        result = interpreter.process("list files bigger than 2.4 mb", files)

        assert names(result) == ["a.pdf"]

    def test_vague_large(self, interpreter):
        """Test "large" without a number uses the configured size."""
        collection = [
            make_record("big.mp4", 15 * MB),
            make_record("edge.mp3", 5 * MB),
            make_record("small.txt", 10),
        ]

        result = interpreter.process("show large files", collection)

        assert names(result) == ["big.mp4"]

    def test_vague_small(self, interpreter):
        """Test "small" without a number uses the configured size."""
        collection = [make_record("big.mp4", 15 * MB), make_record("small.txt", 10)]

        result = interpreter.process("find small files", collection)

        assert names(result) == ["small.txt"]

    @pytest.fixture
    def dated(self):
        base = datetime(2024, 1, 1)
        return [make_record(f"f{i:02}.txt", i, base + timedelta(days=i)) for i in range(12)]

    def test_spelled_out_unit_uses_vague_size(self, interpreter):
        """Test "megabytes" is not a unit, so "larger" means the large-file size."""
        collection = [make_record("mid.bin", 3 * MB), make_record("big.bin", 15 * MB)]

        larger = interpreter.process("show files larger than 2 megabytes", collection)
        smaller = interpreter.process("show files smaller than 2 megabytes", collection)

        assert names(larger) == ["big.bin"]
        assert names(smaller) == []

    def test_threshold_too_long_for_float(self, interpreter, files):
        """Test a huge explicit size matches nothing instead of failing."""
        result = interpreter.process("show files larger than 1" + "0" * 400 + " mb", files)

        assert result.action == Action.FILTER
        assert result.files == []

    def test_recent_truncates(self, interpreter, dated):
        """Test recent files are newest first, ten at most."""
        result = interpreter.process("show recent files", dated)

        assert names(result) == [f"f{i:02}.txt" for i in range(11, 1, -1)]

    def test_recent_all(self, interpreter, dated):
        """Test "all" disables truncation."""
        result = interpreter.process("show all recent files", dated)

        assert len(result.files) == 12
        assert result.files[0].name == "f11.txt"

    def test_oldest(self, interpreter, dated):
        """Test oldest files ascend."""
        result = interpreter.process("show oldest files", dated)

        assert names(result) == [f"f{i:02}.txt" for i in range(10)]

    def test_recent_limit_from_config(self, dated):
        """Test the truncation limit is configurable."""
        interpreter = CommandInterpreter(InterpreterConfig(recent_limit=3))

        result = interpreter.process("show latest files", dated)

        assert names(result) == ["f11.txt", "f10.txt", "f09.txt"]

    @pytest.fixture
    def named(self):
        return [
            make_record("Report-2023.pdf", 100),
            make_record("notes.txt", 200),
            make_record("annual_report.docx", 300),
        ]

    def test_name_contains(self, interpreter, named):
        """Test name substring filter."""
        result = interpreter.process("find files with name containing report", named)

        assert names(result) == ["Report-2023.pdf", "annual_report.docx"]

    def test_name_quoted(self, interpreter, named):
        """Test quoted name terms."""
        result = interpreter.process('show files where name contains "notes"', named)

        assert names(result) == ["notes.txt"]

    def test_name_with_type(self, interpreter, named):
        """Test name filter after type filter."""
        result = interpreter.process("show pdf files with name like report", named)

        assert names(result) == ["Report-2023.pdf"]

    def test_filter_idempotent(self, interpreter, files):
        """Test re-running a filter on its own output is stable."""
        first = interpreter.process("show jpg files smaller than 1 mb", files)
        second = interpreter.process("show jpg files smaller than 1 mb", first.files)

        assert second.files == first.files

    def test_search_defers_to_duplicates(self, interpreter, files):
        """Test "find duplicates" is duplicate detection."""
        result = interpreter.process("find duplicates", files)

        assert result.action == Action.FILTER
        assert names(result) == ["b.jpg", "c.jpg"]
        assert result.message == "Found 2 potential duplicate files"

    def test_search_defers_to_sort(self, interpreter, files):
        """Test a criterion-free search yields to a sort command."""
        result = interpreter.process("list files sorted by size", files)

        assert result.message == "Sorted 3 file(s)"
        assert names(result) == ["b.jpg", "c.jpg", "a.pdf"]


class TestSortIntent:
    """Tests for sort commands."""

    def test_size_ascending(self, interpreter, files):
        """Test sort by size ascends and keeps ties in order."""
        result = interpreter.process("sort by size", files)

        assert result.action == Action.FILTER
        assert names(result) == ["b.jpg", "c.jpg", "a.pdf"]
        assert result.message == "Sorted 3 file(s)"

    def test_size_descending(self, interpreter, files):
        """Test descending size keeps ties in original order."""
        result = interpreter.process("sort by size descending", files)

        assert names(result) == ["a.pdf", "b.jpg", "c.jpg"]

    def test_largest(self, interpreter, files):
        """Test "largest" implies descending."""
        result = interpreter.process("arrange by largest", files)

        assert names(result)[0] == "a.pdf"

    def test_date(self, interpreter, files):
        """Test date sort ascends by default."""
        result = interpreter.process("sort by date", files)

        assert names(result) == ["b.jpg", "c.jpg", "a.pdf"]

    def test_date_newest(self, interpreter, files):
        """Test newest first."""
        result = interpreter.process("order by newest", files)

        assert names(result) == ["a.pdf", "c.jpg", "b.jpg"]

    def test_name(self, interpreter):
        """Test alphabetical sort ignores case."""
        collection = [make_record("b.jpg", 1), make_record("A.pdf", 2), make_record("c.jpg", 3)]

        result = interpreter.process("sort alphabetically", collection)

        assert names(result) == ["A.pdf", "b.jpg", "c.jpg"]

    def test_name_reverse(self, interpreter):
        """Test z-a sort."""
        collection = [make_record("b.jpg", 1), make_record("A.pdf", 2), make_record("c.jpg", 3)]

        result = interpreter.process("sort by name z-a", collection)

        assert names(result) == ["c.jpg", "b.jpg", "A.pdf"]

    def test_no_key_keeps_order(self, interpreter, files):
        """Test sort without a key returns identity order."""
        result = interpreter.process("arrange these", files)

        assert result.files == files
        assert result.message == "Sorted 3 file(s)"

    def test_type_filter_before_sort(self, interpreter, files):
        """Test type words restrict what is sorted."""
        result = interpreter.process("sort images by size descending", files)

        assert names(result) == ["b.jpg", "c.jpg"]


class TestDuplicateIntent:
    """Tests for duplicate detection."""

    def test_same_size_different_type(self, interpreter):
        """Test a same-size file of another type is excluded."""
        collection = [
            make_record("one.png", 100),
            make_record("two.png", 100),
            make_record("three.gif", 100),
        ]

        result = interpreter.process("show identical files", collection)

        assert names(result) == ["one.png", "two.png"]

    def test_cluster_order(self, interpreter):
        """Test clusters appear in first-seen order."""
        collection = [
            make_record("x1.png", 100),
            make_record("y1.pdf", 200),
            make_record("x2.png", 100),
            make_record("y2.pdf", 200),
            make_record("z.pdf", 300),
        ]

        result = interpreter.process("find copies", collection)

        assert names(result) == ["x1.png", "x2.png", "y1.pdf", "y2.pdf"]
        assert result.message == "Found 4 potential duplicate files"

    def test_extension_case(self, interpreter):
        """Test extension comparison is case-insensitive."""
        collection = [make_record("A.JPG", 10), make_record("b.jpg", 10)]

        result = interpreter.process("duplicates", collection)

        assert len(result.files) == 2
