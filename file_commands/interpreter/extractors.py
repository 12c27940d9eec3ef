"""
Entity Extraction
=================

Small matchers that pull structured values out of a command: type words,
size thresholds, destination folder names and name-substring terms.

Every matcher returns None (or an empty list) when its pattern is absent,
so a missing entity simply means "no constraint".

Keyword matching is by word start: "image" matches "images" and "desc"
matches "descending", but "old" does not match "folder".
"""

import re
from datetime import datetime
from decimal import Decimal
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence

from file_commands.config.categories import TypeExpansionTable, TYPE_TABLE
from file_commands.interpreter.models import Comparator, SizeThreshold


UNIT_MULTIPLIERS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024 ** 2,
    "gb": 1024 ** 3,
}

GREATER_WORDS = {"larger", "bigger", "greater", "more"}
LESS_WORDS = {"smaller", "less"}

SIZE_PATTERN = re.compile(
    r"\b(larger|bigger|greater|more|smaller|less)\s+than\s+"
    r"(\d+(?:\.\d+)?)\s*(gb|mb|kb|b)\b",
    re.IGNORECASE,
)

BRACKET_PATTERN = re.compile(r"\[([^\[\]]*)\]")

FOLDER_PHRASE_PATTERN = re.compile(
    r"\b(?:to|into|in)\s+(?:(?:a|an|the)\s+)?(?:new\s+)?"
    r"(\w+(?:\s+\w+)?)\s+(?:folder|directory)\b",
    re.IGNORECASE,
)

NAME_PATTERN = re.compile(
    r"\bname\s+(?:contains|containing|with|having|like)?\s*[\"']?([a-z0-9_\s.-]+)[\"']?",
    re.IGNORECASE,
)

# Phrase captures that name no folder ("into a new folder")
_PLACEHOLDER_NAMES = {"new"}

GENERATED_FOLDER_PREFIX = "Organized_"


@lru_cache(maxsize=512)
def _keyword_pattern(word: str) -> re.Pattern:
    return re.compile(r"(?<!\w)" + re.escape(word.lower()))


def keyword_position(text: str, word: str) -> Optional[int]:
    """Index of the first word in ``text`` starting with ``word``."""
    match = _keyword_pattern(word).search(text)
    return match.start() if match else None


def contains_any(text: str, words: Iterable[str]) -> bool:
    """True if any word in ``text`` starts with one of ``words``."""
    return any(keyword_position(text, word) is not None for word in words)


def contains_word(text: str, word: str) -> bool:
    """True if ``word`` occurs in ``text`` as a whole word."""
    return re.search(r"\b" + re.escape(word) + r"\b", text) is not None


def extract_type_tokens(text: str, table: TypeExpansionTable = TYPE_TABLE) -> List[str]:
    """Distinct type tokens in order of first occurrence."""
    vocabulary: Sequence[str] = table.vocabulary
    found = []
    for index, token in enumerate(vocabulary):
        position = keyword_position(text, token)
        if position is not None:
            found.append((position, index, token))
    found.sort()
    return [token for _, _, token in found]


def extract_size_threshold(text: str) -> Optional[SizeThreshold]:
    """Parse "larger than 2 mb" into a byte threshold (binary units)."""
    match = SIZE_PATTERN.search(text)
    if not match:
        return None
    word, number, unit = match.groups()
    comparator = (
        Comparator.GREATER_THAN if word.lower() in GREATER_WORDS else Comparator.LESS_THAN
    )
    # exact for numbers too long for a float
    size_bytes = int(Decimal(number) * UNIT_MULTIPLIERS[unit.lower()])
    return SizeThreshold(comparator=comparator, size_bytes=size_bytes)


def extract_bracket_folder(command: str) -> Optional[str]:
    """Contents of the first non-empty ``[...]`` group, case preserved."""
    for match in BRACKET_PATTERN.finditer(command):
        name = match.group(1).strip()
        if name:
            return name
    return None


def extract_phrase_folder(command: str) -> Optional[str]:
    """Folder named by "to the <name> folder", sentence-cased."""
    for match in FOLDER_PHRASE_PATTERN.finditer(command):
        name = " ".join(match.group(1).split()).lower()
        if name and name not in _PLACEHOLDER_NAMES:
            return name[0].upper() + name[1:]
    return None


def default_folder_name(
    tokens: Iterable[str],
    now: datetime,
    table: TypeExpansionTable = TYPE_TABLE,
) -> str:
    """Folder chosen from the content type, else a timestamped name."""
    folder = table.folder_for(tokens)
    if folder:
        return folder
    return f"{GENERATED_FOLDER_PREFIX}{now.strftime('%Y%m%d%H%M%S')}"


def extract_folder_name(command: str) -> Optional[str]:
    """Explicit destination: bracketed text wins over a folder phrase."""
    return extract_bracket_folder(command) or extract_phrase_folder(command)


def strip_destination(text: str, include_phrase: bool = False) -> str:
    """Remove destination text so folder names are not read as type words."""
    text = BRACKET_PATTERN.sub(" ", text)
    if include_phrase:
        text = FOLDER_PHRASE_PATTERN.sub(" ", text)
    return text


def extract_name_term(text: str) -> Optional[str]:
    """Search term from "name contains <term>", quotes optional."""
    if "name" not in text:
        return None
    match = NAME_PATTERN.search(text)
    if not match:
        return None
    term = match.group(1).strip()
    return term or None
