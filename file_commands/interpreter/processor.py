"""
Command Interpreter
===================

Turns a free-text command into an operation over a file collection.

Intents are tried in a fixed order (move, filter, sort, duplicates) and the
first one that applies produces the result. A search command that names no
criterion ("find duplicates") defers to a later intent when one is present.
The interpreter never raises for bad input and never mutates or touches
the files it is given.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from file_commands.config.categories import TypeExpansionTable, TYPE_TABLE
from file_commands.config.settings import InterpreterConfig
from file_commands.interpreter.extractors import (
    contains_any,
    contains_word,
    default_folder_name,
    extract_folder_name,
    extract_name_term,
    extract_size_threshold,
    extract_type_tokens,
    strip_destination,
)
from file_commands.interpreter.intents import (
    ALL_WORD,
    LARGE_WORDS,
    OLD_WORDS,
    RECENT_WORDS,
    SMALL_WORDS,
    Intent,
    matching_intents,
)
from file_commands.interpreter.models import (
    Action,
    CommandResult,
    Comparator,
    FileRecord,
    SizeThreshold,
)
from file_commands.interpreter.operations import (
    choose_sort_key,
    filter_by_name,
    filter_by_size,
    filter_by_types,
    find_duplicates,
    sort_by_recency,
    sort_files,
)
from file_commands.interpreter.suggestions import HELP_MESSAGE
from file_commands.utils.logging_config import get_logger

logger = get_logger(__name__)

Clock = Callable[[], datetime]

NO_MATCH_MESSAGE = "No files matching your criteria were found"


@dataclass
class CommandEntities:
    """Values extracted once per command and shared by every branch.

    Attributes:
        type_tokens: Type words in order of first occurrence.
        size_threshold: Explicit "larger than N unit" constraint.
        folder_name: Bracketed or phrased destination, if the command has one.
        intents: Every intent whose trigger words appear, in priority order.
    """
    type_tokens: List[str] = field(default_factory=list)
    size_threshold: Optional[SizeThreshold] = None
    folder_name: Optional[str] = None
    intents: List[Intent] = field(default_factory=list)


class CommandInterpreter:
    """Rule-based interpreter for file commands.

    Holds only configuration and a clock, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        config: Optional[InterpreterConfig] = None,
        clock: Optional[Clock] = None,
        type_table: Optional[TypeExpansionTable] = None,
    ):
        """Initialize the interpreter.

        Args:
            config: Interpreter settings. Uses defaults if None.
            clock: Time source for generated folder names.
            type_table: Type-expansion table. Uses the built-in table,
                extended with ``config.extra_types``, if None.
        """
        self.config = config or InterpreterConfig()
        self.clock = clock or datetime.now
        if type_table is None:
            type_table = TYPE_TABLE
            if self.config.extra_types:
                type_table = type_table.with_extra(self.config.extra_types)
        self.type_table = type_table

    def process(self, command: Optional[str], files: Iterable[FileRecord]) -> CommandResult:
        """Interpret ``command`` against ``files``.

        Args:
            command: Raw command text; may be empty.
            files: Current file collection snapshot.

        Returns:
            CommandResult describing the selected files and what to do with them.
        """
        files = list(files)
        text = (command or "").strip().lower()
        if not text:
            return CommandResult(files=files, action=Action.NONE)

        logger.debug(f"Processing command: {text!r} over {len(files)} file(s)")
        entities = self.extract(command, text)

        result = None
        for intent in entities.intents:
            if intent is Intent.MOVE:
                result = self._move(files, entities)
            elif intent is Intent.FILTER:
                result = self._filter(text, files, entities)
            elif intent is Intent.SORT:
                result = self._sort(text, files, entities)
            elif intent is Intent.DUPLICATES:
                result = self._duplicates(files)
            if result is not None:
                break
        else:
            intent = Intent.UNKNOWN
            logger.info(f"Command not understood: {text!r}", extra={"intent": intent.value})
            return CommandResult(files=files, action=Action.UNKNOWN, message=HELP_MESSAGE)

        logger.info(
            result.message,
            extra={
                "intent": intent.value,
                "action": result.action.value,
                "file_count": len(result.files),
            },
        )
        return result

    def extract(self, command: Optional[str], text: Optional[str] = None) -> CommandEntities:
        """Run every entity matcher over a command.

        Args:
            command: Raw command, used where case matters (folder names).
            text: Normalized command; derived from ``command`` if None.
        """
        command = command or ""
        if text is None:
            text = command.strip().lower()
        intents = matching_intents(text)
        is_move = Intent.MOVE in intents
        type_text = strip_destination(text, include_phrase=is_move)
        return CommandEntities(
            type_tokens=extract_type_tokens(type_text, self.type_table),
            size_threshold=extract_size_threshold(text),
            folder_name=extract_folder_name(command.strip()),
            intents=intents,
        )

    def _move(self, files: List[FileRecord], entities: CommandEntities) -> CommandResult:
        extensions = self.type_table.expand(entities.type_tokens)
        candidates = filter_by_types(files, extensions)
        candidates = filter_by_size(candidates, entities.size_threshold)

        if not candidates:
            return CommandResult(files=files, action=Action.NONE, message=NO_MATCH_MESSAGE)

        target = entities.folder_name or default_folder_name(
            entities.type_tokens, self.clock(), self.type_table
        )
        return CommandResult(
            files=candidates,
            action=Action.MOVE,
            target_folder=target,
            message=f"Moving {len(candidates)} file(s) to folder '{target}'",
        )

    def _filter(
        self,
        text: str,
        files: List[FileRecord],
        entities: CommandEntities,
    ) -> Optional[CommandResult]:
        has_criteria = False
        candidates = files

        if entities.type_tokens:
            candidates = filter_by_types(candidates, self.type_table.expand(entities.type_tokens))
            has_criteria = True

        threshold = entities.size_threshold or self._vague_threshold(text)
        if threshold is not None:
            candidates = filter_by_size(candidates, threshold)
            has_criteria = True

        limit = None if contains_word(text, ALL_WORD) else self.config.recent_limit
        if contains_any(text, RECENT_WORDS):
            candidates = sort_by_recency(candidates, newest_first=True, limit=limit)
            has_criteria = True
        elif contains_any(text, OLD_WORDS):
            candidates = sort_by_recency(candidates, newest_first=False, limit=limit)
            has_criteria = True

        term = extract_name_term(text)
        if term:
            candidates = filter_by_name(candidates, term)
            has_criteria = True

        if not has_criteria and entities.intents[-1] is not Intent.FILTER:
            # "find duplicates", "list files sorted by size"
            return None

        candidates = list(candidates)
        return CommandResult(
            files=candidates,
            action=Action.FILTER,
            message=f"Found {len(candidates)} file(s) matching your criteria",
        )

    def _vague_threshold(self, text: str) -> Optional[SizeThreshold]:
        # Spelled-out units ("larger than 2 megabytes") are not an explicit
        # size, so "larger"/"smaller" land here as the vague large/small words.
        if contains_any(text, LARGE_WORDS):
            return SizeThreshold(Comparator.GREATER_THAN, self.config.large_file_bytes)
        if contains_any(text, SMALL_WORDS):
            return SizeThreshold(Comparator.LESS_THAN, self.config.small_file_bytes)
        return None

    def _sort(self, text: str, files: List[FileRecord], entities: CommandEntities) -> CommandResult:
        candidates = filter_by_types(files, self.type_table.expand(entities.type_tokens))
        key, descending = choose_sort_key(text)
        ordered = sort_files(candidates, key, descending)
        logger.debug(f"Sort key: {key.value if key else 'none'}, descending={descending}")
        return CommandResult(
            files=ordered,
            action=Action.FILTER,
            message=f"Sorted {len(ordered)} file(s)",
        )

    def _duplicates(self, files: List[FileRecord]) -> CommandResult:
        duplicates = find_duplicates(files)
        return CommandResult(
            files=duplicates,
            action=Action.FILTER,
            message=f"Found {len(duplicates)} potential duplicate files",
        )


_default_interpreter = CommandInterpreter()


def process_command(command: Optional[str], files: Iterable[FileRecord]) -> CommandResult:
    """Interpret ``command`` with the default interpreter."""
    return _default_interpreter.process(command, files)
