"""
Command Suggestions
===================

Example commands offered to users who are typing a command or whose last
command was not understood.
"""

from typing import List, Sequence

EXAMPLE_COMMANDS = (
    "Show all PDF files",
    "Find duplicate files",
    "Sort by size",
    "Find large files",
    "Show most recent files",
    "Move screenshots larger than 2MB to [SCREENSHOTS]",
)

HELP_EXAMPLES = (
    "Show PDF files",
    "Find duplicates",
    "Sort by size",
    "Show recent files",
    "Move documents to new folder",
)


def help_message(examples: Sequence[str] = HELP_EXAMPLES) -> str:
    """Guidance shown when a command is not understood."""
    quoted = [f"'{e}'" for e in examples]
    if len(quoted) > 1:
        listing = ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
    else:
        listing = "".join(quoted)
    return f"I'm not sure how to process that command. Try phrases like {listing}."


def suggest(partial: str, commands: Sequence[str] = EXAMPLE_COMMANDS) -> List[str]:
    """Example commands containing ``partial``, excluding an exact match."""
    needle = partial.strip().lower()
    if not needle:
        return []
    return [
        command for command in commands
        if needle in command.lower() and needle != command.lower()
    ]


HELP_MESSAGE = help_message()
