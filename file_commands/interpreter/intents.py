"""
Intent Resolution
=================

The closed set of command intents, their trigger words, and the keyword
tables that modify how a matched intent behaves.
"""

from enum import Enum
from typing import Dict, List, Tuple

from file_commands.interpreter.extractors import contains_any


class Intent(Enum):
    """Command intents, declared in dispatch priority order."""
    MOVE = "move"
    FILTER = "filter"
    SORT = "sort"
    DUPLICATES = "duplicates"
    UNKNOWN = "unknown"


INTENT_TRIGGERS: Dict[Intent, Tuple[str, ...]] = {
    Intent.MOVE: ("move", "copy", "transfer", "relocate"),
    Intent.FILTER: ("show", "find", "display", "list", "get", "search", "filter", "where"),
    Intent.SORT: ("sort", "order", "arrange"),
    Intent.DUPLICATES: ("duplicate", "duplicates", "same", "copies", "similar", "identical"),
}

# Filter modifiers
RECENT_WORDS = ("recent", "newest", "latest", "new", "last")
OLD_WORDS = ("old", "oldest", "earlier")
LARGE_WORDS = ("large", "big", "huge")
SMALL_WORDS = ("small", "tiny")
ALL_WORD = "all"

# Sort keys and their descending markers
SIZE_SORT_WORDS = ("size", "largest", "smallest")
SIZE_DESC_WORDS = ("large", "largest", "biggest", "desc")
DATE_SORT_WORDS = ("date", "time", "newest", "oldest", "recent")
DATE_DESC_WORDS = ("new", "newest", "recent", "latest", "desc")
NAME_SORT_WORDS = ("name", "alphabetical", "alpha")
NAME_DESC_WORDS = ("desc", "descending", "reverse", "z-a")


def matching_intents(text: str) -> List[Intent]:
    """Every intent whose triggers appear in ``text``, in priority order."""
    return [
        intent for intent, triggers in INTENT_TRIGGERS.items()
        if contains_any(text, triggers)
    ]


def classify(text: str) -> Intent:
    """Highest-priority intent for ``text``."""
    matched = matching_intents(text)
    return matched[0] if matched else Intent.UNKNOWN
