"""Documents and the content store they live in."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any

from bashguide.content.exceptions import DuplicatePathError
from bashguide.content.paths import normalize_path
from bashguide.issues import DuplicatePath


@dataclass(frozen=True, slots=True)
class Document:
    """A single content page.

    Attributes:
        path: Unique site path, normalized to ``/a/b/``.
        title: Display title from front-matter.
        description: One-line summary from front-matter.
        body: Page content, opaque to bashguide.
        source: File the document was read from, if any.
        metadata: Remaining front-matter keys.

    """

    path: str
    title: str
    description: str = ""
    body: str = field(default="", repr=False)
    source: Path | None = field(default=None, compare=False)
    metadata: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def sidebar_order(self) -> int | None:
        sidebar = self.metadata.get("sidebar")
        if isinstance(sidebar, Mapping):
            order = sidebar.get("order")
            if isinstance(order, int) and not isinstance(order, bool):
                return order
        return None


class ContentStore(Mapping[str, Document]):
    """Read-only mapping of site path to :class:`Document`."""

    __slots__ = ("_documents",)

    def __init__(self, documents: Mapping[str, Document] | None = None) -> None:
        self._documents: Mapping[str, Document] = MappingProxyType(dict(documents or {}))

    @classmethod
    def from_documents(cls, documents: Iterable[Document]) -> ContentStore:
        """Build a store, raising :class:`DuplicatePathError` listing every clash."""
        by_path: dict[str, list[Document]] = defaultdict(list)
        for document in documents:
            path = normalize_path(document.path)
            if path != document.path:
                document = replace(document, path=path)
            by_path[path].append(document)

        duplicates = [
            DuplicatePath(path=path, sources=tuple(doc.source or Path(doc.path) for doc in docs))
            for path, docs in sorted(by_path.items())
            if len(docs) > 1
        ]
        if duplicates:
            raise DuplicatePathError(duplicates)
        return cls({path: docs[0] for path, docs in by_path.items()})

    def __getitem__(self, path: str) -> Document:
        return self._documents[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self) -> str:
        return f"ContentStore({len(self)} documents)"

    def under(self, directory: str) -> list[Document]:
        """Return documents at or below ``directory``, sorted by sidebar order then path."""
        prefix = normalize_path(directory)
        matches = [doc for path, doc in self._documents.items() if path.startswith(prefix)]
        return sorted(matches, key=_sidebar_sort_key)


def _sidebar_sort_key(document: Document) -> tuple[int, int, str]:
    order = document.sidebar_order
    if order is None:
        return (1, 0, document.path)
    return (0, order, document.path)


__all__ = ["ContentStore", "Document"]
