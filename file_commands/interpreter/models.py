"""
Interpreter Data Model
======================

Input records, result bundles and the small value types produced by
entity extraction.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from file_commands.utils.exceptions import InvalidRecordError


class Action(str, Enum):
    """What the caller should do with a CommandResult."""
    NONE = "none"
    FILTER = "filter"
    MOVE = "move"
    UNKNOWN = "unknown"


class Comparator(Enum):
    """Direction of a size threshold."""
    GREATER_THAN = "gt"
    LESS_THAN = "lt"


@dataclass(frozen=True)
class FileRecord:
    """Metadata for one file in the collection.

    Attributes:
        id: Opaque identifier, stable within one session.
        name: Display name including extension.
        extension: Lower-case type token without the dot ("pdf").
        size_bytes: Size in bytes.
        modified_at: Last modification time.
        path: Display path; never interpreted.
    """
    id: str
    name: str
    extension: str
    size_bytes: int
    modified_at: datetime
    path: str = ""

    def __post_init__(self):
        if self.size_bytes < 0:
            raise InvalidRecordError(
                f"size_bytes must be non-negative for {self.name!r}",
                field_name="size_bytes",
                value=self.size_bytes,
            )
        normalized = self.extension.lower().lstrip(".")
        if normalized != self.extension:
            object.__setattr__(self, "extension", normalized)

    @classmethod
    def from_path(cls, path: Path, record_id: Optional[str] = None,
                  display_root: Optional[Path] = None) -> "FileRecord":
        """Build a record from a file on disk.

        Args:
            path: File to describe.
            record_id: Identifier to use; a random UUID when omitted.
            display_root: Directory the display path is made relative to.
        """
        stat = path.stat()
        if display_root is not None:
            display = f"{display_root.name}/{path.relative_to(display_root).as_posix()}"
        else:
            display = str(path)
        return cls(
            id=record_id or str(uuid.uuid4()),
            name=path.name,
            extension=path.suffix.lstrip("."),
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime),
            path=display,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "extension": self.extension,
            "size_bytes": self.size_bytes,
            "modified_at": self.modified_at.isoformat(),
            "path": self.path,
        }


@dataclass
class CommandResult:
    """Outcome of interpreting one command.

    Attributes:
        files: Selected and/or reordered records.
        action: What the caller should do with ``files``.
        message: Summary for the user; None only for blank commands.
        target_folder: Destination name, set only for moves.
    """
    files: List[FileRecord] = field(default_factory=list)
    action: Action = Action.NONE
    message: Optional[str] = None
    target_folder: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data: Dict[str, Any] = {
            "action": self.action.value,
            "message": self.message,
            "files": [f.to_dict() for f in self.files],
        }
        if self.target_folder is not None:
            data["target_folder"] = self.target_folder
        return data


@dataclass(frozen=True)
class SizeThreshold:
    """A "larger than 2 mb" style constraint, already converted to bytes."""
    comparator: Comparator
    size_bytes: int

    def matches(self, size_bytes: int) -> bool:
        if self.comparator is Comparator.GREATER_THAN:
            return size_bytes > self.size_bytes
        return size_bytes < self.size_bytes
