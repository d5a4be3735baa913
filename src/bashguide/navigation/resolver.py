"""Resolve the sidebar tree against the content store.

:func:`resolve` is a pure pass over two immutable inputs. Every internal link is
looked up in the store; every document no link reaches is reported as
orphaned. All broken links are collected before failing so a single run
surfaces every problem.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, TypeAlias

from bashguide.content.documents import ContentStore, Document
from bashguide.exceptions import BashGuideError
from bashguide.issues import BrokenLink, Issue, OrphanedDocument
from bashguide.navigation.tree import Autogenerate, Group, Link, NavigationEntry, NavigationTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedLink:
    """A sidebar link bound to its document."""

    label: str
    document: Document

    @property
    def path(self) -> str:
        return self.document.path


@dataclass(frozen=True, slots=True)
class ExternalLink:
    """A sidebar link that leaves the site."""

    label: str
    url: str


@dataclass(frozen=True, slots=True)
class ResolvedGroup:
    """A sidebar section with resolved children."""

    label: str
    children: tuple[ResolvedEntry, ...] = field(default_factory=tuple)
    collapsed: bool = False


ResolvedEntry: TypeAlias = ResolvedLink | ExternalLink | ResolvedGroup


@dataclass(frozen=True, slots=True)
class ResolvedTree:
    """Render-ready sidebar, isomorphic to the tree it was resolved from."""

    entries: tuple[ResolvedEntry, ...] = field(default_factory=tuple)
    warnings: tuple[Issue, ...] = field(default_factory=tuple)

    def links(self) -> Iterator[ResolvedLink]:
        """Yield every resolved internal link in sidebar order."""
        yield from _walk_resolved(self.entries)

    def link_count(self) -> int:
        return sum(1 for _ in self.links())

    def to_dict(self) -> dict[str, Any]:
        return {"sidebar": [_resolved_to_dict(entry) for entry in self.entries]}


class NavigationResolutionError(BashGuideError):
    """Raised when the sidebar has broken links.

    Carries every error found in the run along with the warnings.
    """

    def __init__(self, errors: Sequence[Issue], warnings: Sequence[Issue] = ()) -> None:
        self.errors = tuple(errors)
        self.warnings = tuple(warnings)
        super().__init__(f"Sidebar navigation has {len(self.errors)} broken link(s)")


@dataclass(slots=True)
class _Resolution:
    store: ContentStore
    broken: dict[str, BrokenLink] = field(default_factory=dict)
    referenced: set[str] = field(default_factory=set)

    def entries(self, entries: Sequence[NavigationEntry], location: str) -> tuple[ResolvedEntry, ...]:
        resolved: list[ResolvedEntry] = []
        for index, entry in enumerate(entries):
            item = self.entry(entry, f"{location}[{index}]")
            if item is not None:
                resolved.append(item)
        return tuple(resolved)

    def entry(self, entry: NavigationEntry, location: str) -> ResolvedEntry | None:
        if isinstance(entry, Group):
            return ResolvedGroup(
                label=entry.label,
                children=self.entries(entry.children, f"{location}.items"),
                collapsed=entry.collapsed,
            )
        if isinstance(entry, Autogenerate):
            return self.autogenerate(entry, location)
        return self.link(entry, location)

    def link(self, link: Link, location: str) -> ResolvedEntry | None:
        if link.external:
            return ExternalLink(label=link.label or link.path, url=link.path)
        document = self.store.get(link.path)
        if document is None:
            self.record_broken(link.label, link.path, location)
            return None
        self.referenced.add(link.path)
        return ResolvedLink(label=link.label or document.title, document=document)

    def autogenerate(self, entry: Autogenerate, location: str) -> ResolvedGroup:
        documents = self.store.under(entry.directory)
        if not documents:
            self.record_broken(entry.label, entry.directory, location)
        self.referenced.update(document.path for document in documents)
        return ResolvedGroup(
            label=entry.label,
            children=tuple(ResolvedLink(label=doc.title, document=doc) for doc in documents),
            collapsed=entry.collapsed,
        )

    def record_broken(self, label: str | None, path: str, location: str) -> None:
        existing = self.broken.get(path)
        if existing is None:
            self.broken[path] = BrokenLink(label=label, path=path, locations=(location,))
        else:
            self.broken[path] = replace(existing, locations=(*existing.locations, location))

    @property
    def errors(self) -> list[Issue]:
        return list(self.broken.values())


def normalized_store(store: Mapping[str, Document]) -> ContentStore:
    """Re-key ``store`` by normalized path.

    Raises:
        DuplicatePathError: If several keys normalize to the same path.

    """
    return ContentStore.from_documents(replace(document, path=path) for path, document in store.items())


def orphaned_documents(store: Mapping[str, Document], referenced: set[str]) -> list[OrphanedDocument]:
    """Return one warning per document not in ``referenced``, sorted by path."""
    return [OrphanedDocument(path=path) for path in sorted(store) if path not in referenced]


def resolve(tree: NavigationTree, store: Mapping[str, Document]) -> ResolvedTree:
    """Bind every sidebar link to its document.

    Args:
        tree: The sidebar navigation tree.
        store: Mapping of site path to document.

    Returns:
        The resolved tree, carrying one :class:`OrphanedDocument` warning per
        unreachable document.

    Raises:
        NavigationResolutionError: If any link points to a missing document.
            The exception lists every broken link, not only the first.
        DuplicatePathError: If two store keys normalize to the same path.

    """
    documents = normalized_store(store)
    resolution = _Resolution(store=documents)
    entries = resolution.entries(tree.entries, "sidebar")
    warnings = tuple(orphaned_documents(documents, resolution.referenced))

    if resolution.errors:
        logger.debug("Resolution found %d broken link(s)", len(resolution.errors))
        raise NavigationResolutionError(resolution.errors, warnings)

    resolved = ResolvedTree(entries=entries, warnings=warnings)
    logger.debug("Resolved %d sidebar link(s), %d orphaned document(s)", resolved.link_count(), len(warnings))
    return resolved


def _walk_resolved(entries: Sequence[ResolvedEntry]) -> Iterator[ResolvedLink]:
    for entry in entries:
        if isinstance(entry, ResolvedLink):
            yield entry
        elif isinstance(entry, ResolvedGroup):
            yield from _walk_resolved(entry.children)


def _resolved_to_dict(entry: ResolvedEntry) -> dict[str, Any]:
    if isinstance(entry, ResolvedLink):
        return {
            "type": "link",
            "label": entry.label,
            "href": entry.path,
            "description": entry.document.description,
        }
    if isinstance(entry, ExternalLink):
        return {"type": "link", "label": entry.label, "href": entry.url, "external": True}
    return {
        "type": "group",
        "label": entry.label,
        "collapsed": entry.collapsed,
        "entries": [_resolved_to_dict(child) for child in entry.children],
    }


__all__ = [
    "ExternalLink",
    "NavigationResolutionError",
    "ResolvedEntry",
    "ResolvedGroup",
    "ResolvedLink",
    "ResolvedTree",
    "orphaned_documents",
    "resolve",
]
