"""
Smart File Commands
===================

Rule-based natural-language commands over a collection of file records.

Features:
- Intent classification (move, filter, sort, find duplicates)
- Entity extraction for file types, size thresholds and folder names
- Relocation planning without touching the filesystem

Example:
    >>> from file_commands import process_command
    >>> result = process_command("sort by size descending", files)
"""

from file_commands.interpreter import (
    Action,
    CommandInterpreter,
    CommandResult,
    FileRecord,
    process_command,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "CommandInterpreter",
    "CommandResult",
    "FileRecord",
    "process_command",
]
