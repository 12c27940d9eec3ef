"""
Directory Scanner
=================

Builds the file collection the interpreter works on, either from the
regular files of a real directory or from a placeholder dataset when no
real entries are available.
"""

from datetime import datetime
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional

from file_commands.config.settings import ScannerConfig
from file_commands.interpreter.models import FileRecord
from file_commands.utils.exceptions import ErrorCode, ScanError
from file_commands.utils.logging_config import get_logger, Timer

logger = get_logger(__name__)


class DirectoryScanner:
    """Lists a directory as FileRecords.

    Filters entries by ignore patterns and hidden-file settings and skips
    entries that cannot be read instead of failing the whole scan.
    """

    def __init__(self, config: Optional[ScannerConfig] = None):
        """Initialize scanner.

        Args:
            config: Scanner settings. Uses defaults if None.
        """
        self.config = config or ScannerConfig()

    def _should_ignore(self, path: Path) -> bool:
        """Check if a file matches ignore patterns or is hidden."""
        name = path.name
        if not self.config.include_hidden and name.startswith("."):
            return True
        return any(fnmatch(name, pattern) for pattern in self.config.ignore_patterns)

    def scan(self, directory: Path) -> List[FileRecord]:
        """Scan a directory into file records.

        Args:
            directory: Directory to list.

        Returns:
            Records sorted by relative path.

        Raises:
            ScanError: If the directory is missing or not a directory.
        """
        directory = Path(directory).expanduser()
        if not directory.exists():
            raise ScanError(
                f"Directory not found: {directory}",
                directory=str(directory),
                error_code=ErrorCode.DIRECTORY_NOT_FOUND,
            )
        if not directory.is_dir():
            raise ScanError(
                f"Not a directory: {directory}",
                directory=str(directory),
                error_code=ErrorCode.NOT_A_DIRECTORY,
            )

        entries = directory.rglob("*") if self.config.recursive else directory.iterdir()
        records = []

        with Timer(logger, f"scan {directory}"):
            try:
                paths = sorted(entries)
            except OSError as e:
                raise ScanError(
                    f"Cannot list directory: {directory}",
                    directory=str(directory),
                    cause=e,
                )

            for path in paths:
                if self._should_ignore(path):
                    continue
                if not self.config.include_hidden and any(
                    part.startswith(".") for part in path.relative_to(directory).parts[:-1]
                ):
                    continue
                try:
                    if not path.is_file():
                        continue
                    records.append(FileRecord.from_path(path, display_root=directory))
                except OSError as e:
                    logger.warning(f"Skipping unreadable entry {path.name}: {e}")

        logger.info(
            f"Loaded {len(records)} files from {directory.name}",
            extra={"directory": str(directory), "file_count": len(records)},
        )
        return records


_KB = 1024
_MB = 1024 * 1024


def sample_files(folder: str = "Sample") -> List[FileRecord]:
    """Placeholder collection used when no real directory is available.

    Includes one size/type collision (Image1.jpg and Image1_copy.jpg) so
    duplicate detection has something to find.
    """
    rows = [
        ("1", "Document1.pdf", int(_MB * 2.5), datetime(2023, 4, 15)),
        ("2", "Image1.jpg", _KB * 512, datetime(2023, 5, 10)),
        ("3", "Video1.mp4", _MB * 15, datetime(2023, 6, 5)),
        ("4", "Document2.pdf", int(_MB * 1.2), datetime(2023, 4, 20)),
        ("5", "Image1_copy.jpg", _KB * 512, datetime(2023, 5, 11)),
        ("6", "Music1.mp3", _MB * 5, datetime(2023, 6, 20)),
        ("7", "Spreadsheet.xlsx", _KB * 800, datetime(2023, 7, 5)),
        ("8", "Presentation.pptx", int(_MB * 3.5), datetime(2023, 7, 20)),
    ]
    return [
        FileRecord(
            id=record_id,
            name=name,
            extension=name.rsplit(".", 1)[-1],
            size_bytes=size,
            modified_at=modified,
            path=f"{folder}/{name}",
        )
        for record_id, name, size, modified in rows
    ]
