"""Natural-language command interpreter for file collections."""

from .models import Action, CommandResult, Comparator, FileRecord, SizeThreshold
from .intents import Intent
from .processor import CommandInterpreter, CommandEntities, process_command
from .suggestions import EXAMPLE_COMMANDS, suggest

__all__ = [
    "Action",
    "CommandResult",
    "Comparator",
    "FileRecord",
    "SizeThreshold",
    "Intent",
    "CommandInterpreter",
    "CommandEntities",
    "process_command",
    "EXAMPLE_COMMANDS",
    "suggest",
]
