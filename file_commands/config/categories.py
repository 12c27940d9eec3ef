"""
Type Expansion Tables
=====================

Maps the file-type words a user may type ("documents", "pictures", "jpg")
to the concrete extensions they cover, and maps type words to the default
destination folder used when a move command names none.

New categories are added here as data; the interpreter has no per-category
control flow.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Set, Tuple


TABLE_VERSION = 1

DOCUMENT_EXTENSIONS = frozenset({"pdf", "doc", "docx", "txt", "rtf", "odt", "xlsx", "pptx"})
IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "svg", "webp"})
VIDEO_EXTENSIONS = frozenset({"mp4", "mov", "avi", "mkv", "webm"})
AUDIO_EXTENSIONS = frozenset({"mp3", "wav", "ogg", "flac", "aac"})


def _default_expansions() -> Dict[str, FrozenSet[str]]:
    return {
        # Documents
        "document": DOCUMENT_EXTENSIONS,
        "doc": frozenset({"doc", "docx"}),
        "pdf": frozenset({"pdf"}),
        "text": frozenset({"txt", "rtf"}),
        "txt": frozenset({"txt"}),
        # Images
        "image": IMAGE_EXTENSIONS,
        "picture": IMAGE_EXTENSIONS,
        "photo": IMAGE_EXTENSIONS,
        "screenshot": IMAGE_EXTENSIONS,
        "jpg": frozenset({"jpg", "jpeg"}),
        "jpeg": frozenset({"jpg", "jpeg"}),
        "png": frozenset({"png"}),
        "gif": frozenset({"gif"}),
        # Video
        "video": VIDEO_EXTENSIONS,
        "movie": VIDEO_EXTENSIONS,
        "mp4": frozenset({"mp4"}),
        # Audio
        "audio": AUDIO_EXTENSIONS,
        "music": AUDIO_EXTENSIONS,
        "mp3": frozenset({"mp3"}),
        "wav": frozenset({"wav"}),
    }


def _default_folders() -> Tuple[Tuple[str, FrozenSet[str]], ...]:
    # Checked in order; the first folder whose tokens intersect wins.
    return (
        ("Screenshots", frozenset({"screenshot", "image", "jpg", "png"})),
        ("Documents", frozenset({"document", "pdf", "doc"})),
        ("Videos", frozenset({"video", "mp4"})),
    )


@dataclass(frozen=True)
class TypeExpansionTable:
    """Type-word to extension-set mapping plus default folder names.

    Attributes:
        expansions: Type token -> extensions it selects. Keys are unique
            lower-case words; values are lower-case extensions without dots.
        default_folders: Ordered (folder name, trigger tokens) pairs.
        version: Table version, bumped when entries change meaning.
    """
    expansions: Dict[str, FrozenSet[str]] = field(default_factory=_default_expansions)
    default_folders: Tuple[Tuple[str, FrozenSet[str]], ...] = field(default_factory=_default_folders)
    version: int = TABLE_VERSION

    @property
    def vocabulary(self) -> Tuple[str, ...]:
        """Type tokens recognised in commands."""
        return tuple(self.expansions)

    def expand(self, tokens: Iterable[str]) -> Set[str]:
        """Union of the extensions covered by ``tokens``.

        Unknown tokens expand to themselves so a bare extension still works.
        """
        extensions: Set[str] = set()
        for token in tokens:
            token = token.lower()
            extensions |= self.expansions.get(token, frozenset({token}))
        return extensions

    def folder_for(self, tokens: Iterable[str]) -> Optional[str]:
        """Default destination folder for the given type tokens, if any."""
        token_set = {t.lower() for t in tokens}
        for folder, triggers in self.default_folders:
            if token_set & triggers:
                return folder
        return None

    def with_extra(self, extra: Dict[str, Iterable[str]]) -> "TypeExpansionTable":
        """Return a copy with additional or overriding type tokens."""
        merged = dict(self.expansions)
        for token, extensions in extra.items():
            merged[token.lower()] = frozenset(e.lower().lstrip(".") for e in extensions)
        return TypeExpansionTable(
            expansions=merged,
            default_folders=self.default_folders,
            version=self.version,
        )


# Global table instance
TYPE_TABLE = TypeExpansionTable()
