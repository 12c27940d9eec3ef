"""
Collection Operations
=====================

Filters, sorts and duplicate detection over file records. Every function
returns a new list and leaves its input untouched.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence, Set, Tuple

from file_commands.interpreter.extractors import contains_any
from file_commands.interpreter.intents import (
    DATE_DESC_WORDS,
    DATE_SORT_WORDS,
    NAME_DESC_WORDS,
    NAME_SORT_WORDS,
    SIZE_DESC_WORDS,
    SIZE_SORT_WORDS,
)
from file_commands.interpreter.models import FileRecord, SizeThreshold


class SortKey(Enum):
    """Record attribute a sort command orders by."""
    SIZE = "size"
    DATE = "date"
    NAME = "name"


def filter_by_types(files: Sequence[FileRecord], extensions: Set[str]) -> List[FileRecord]:
    """Records whose extension is in ``extensions``; all records if it is empty."""
    if not extensions:
        return list(files)
    wanted = {e.lower() for e in extensions}
    return [f for f in files if f.extension.lower() in wanted]


def filter_by_size(files: Sequence[FileRecord], threshold: Optional[SizeThreshold]) -> List[FileRecord]:
    if threshold is None:
        return list(files)
    return [f for f in files if threshold.matches(f.size_bytes)]


def sort_by_recency(
    files: Sequence[FileRecord],
    newest_first: bool,
    limit: Optional[int] = None,
) -> List[FileRecord]:
    """Order by modification time, optionally keeping only the first ``limit``."""
    ordered = sorted(files, key=lambda f: f.modified_at, reverse=newest_first)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


def filter_by_name(files: Sequence[FileRecord], term: Optional[str]) -> List[FileRecord]:
    """Records whose name contains ``term``, case-insensitively."""
    if not term:
        return list(files)
    needle = term.lower()
    return [f for f in files if needle in f.name.lower()]


def choose_sort_key(text: str) -> Tuple[Optional[SortKey], bool]:
    """Pick the sort key and direction named in a sort command.

    Size beats date, date beats name. Returns (None, False) when the
    command names no key.

    Returns:
        Tuple of (key or None, descending).
    """
    if contains_any(text, SIZE_SORT_WORDS):
        return SortKey.SIZE, contains_any(text, SIZE_DESC_WORDS)
    if contains_any(text, DATE_SORT_WORDS):
        return SortKey.DATE, contains_any(text, DATE_DESC_WORDS)
    if contains_any(text, NAME_SORT_WORDS):
        return SortKey.NAME, contains_any(text, NAME_DESC_WORDS)
    return None, False


_SORT_ATTRIBUTES = {
    SortKey.SIZE: lambda f: f.size_bytes,
    SortKey.DATE: lambda f: f.modified_at,
    SortKey.NAME: lambda f: f.name.casefold(),
}


def sort_files(
    files: Sequence[FileRecord],
    key: Optional[SortKey],
    descending: bool = False,
) -> List[FileRecord]:
    """Stable sort by ``key``; identity order when ``key`` is None."""
    if key is None:
        return list(files)
    return sorted(files, key=_SORT_ATTRIBUTES[key], reverse=descending)


def find_duplicate_clusters(files: Sequence[FileRecord]) -> List[List[FileRecord]]:
    """Group records sharing (size, extension); keep groups of two or more.

    This is a heuristic: different files of equal size and type are
    reported together.
    """
    groups: Dict[Tuple[int, str], List[FileRecord]] = {}
    for record in files:
        groups.setdefault((record.size_bytes, record.extension.lower()), []).append(record)
    return [members for members in groups.values() if len(members) > 1]


def find_duplicates(files: Sequence[FileRecord]) -> List[FileRecord]:
    """Members of every duplicate cluster, clusters in first-seen order."""
    return [record for cluster in find_duplicate_clusters(files) for record in cluster]
