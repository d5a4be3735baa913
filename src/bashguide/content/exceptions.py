"""Exceptions raised while building the content store."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from bashguide.exceptions import BashGuideError
from bashguide.issues import DuplicatePath


class ContentError(BashGuideError):
    """Base exception for content store errors."""


class DuplicatePathError(ContentError):
    """Raised when several documents claim the same site path."""

    def __init__(self, duplicates: Sequence[DuplicatePath]) -> None:
        self.duplicates = list(duplicates)
        paths = ", ".join(duplicate.path for duplicate in self.duplicates)
        super().__init__(f"{len(self.duplicates)} duplicate document path(s): {paths}")


class MissingFrontmatterError(ContentError):
    """Raised when documents lack required front-matter fields."""

    def __init__(self, field: str, sources: Sequence[Path]) -> None:
        self.field = field
        self.sources = list(sources)
        files = ", ".join(str(source) for source in self.sources)
        super().__init__(f"{len(self.sources)} document(s) missing required '{field}': {files}")


class UnreadableContentError(ContentError):
    """Raised when content files cannot be read as UTF-8 text."""

    def __init__(self, sources: Sequence[Path]) -> None:
        self.sources = list(sources)
        files = ", ".join(str(source) for source in self.sources)
        super().__init__(f"{len(self.sources)} content file(s) could not be read: {files}")
