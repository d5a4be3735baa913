"""Sidebar navigation tree.

The tree is an explicit value: build it with :meth:`NavigationTree.from_config`
from the ``sidebar`` list of ``site.yml`` (Starlight-style items) or construct
the entries directly. Entries are immutable and ``children`` keep the order
they were authored in.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from bashguide.config.exceptions import InvalidNavigationEntryError
from bashguide.content.paths import is_external, normalize_path


@dataclass(frozen=True, slots=True)
class Link:
    """A labeled link to a document path or an external URL.

    A ``label`` of ``None`` takes the linked document's title on resolution.
    """

    label: str | None
    path: str

    def __post_init__(self) -> None:
        target = self.path.strip()
        object.__setattr__(self, "path", target if is_external(target) else normalize_path(target))

    @property
    def external(self) -> bool:
        return is_external(self.path)


@dataclass(frozen=True, slots=True)
class Group:
    """A labeled section holding an ordered sequence of entries."""

    label: str
    children: tuple[NavigationEntry, ...] = field(default_factory=tuple)
    collapsed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class Autogenerate:
    """A section whose links are generated from every document under ``directory``."""

    label: str
    directory: str
    collapsed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "directory", normalize_path(self.directory))


NavigationEntry: TypeAlias = Link | Group | Autogenerate


@dataclass(frozen=True, slots=True)
class NavigationTree:
    """Ordered top-level sidebar entries."""

    entries: tuple[NavigationEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    @classmethod
    def from_config(cls, items: Sequence[Any] | None) -> NavigationTree:
        """Build a tree from Starlight-style sidebar items.

        Raises:
            InvalidNavigationEntryError: If an item has an unsupported shape.

        """
        if items is None:
            return cls()
        if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
            raise InvalidNavigationEntryError("sidebar", "expected a list of items")
        return cls(tuple(_parse_entry(item, f"sidebar[{index}]") for index, item in enumerate(items)))

    def __iter__(self) -> Iterator[NavigationEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def links(self) -> Iterator[Link]:
        """Yield every :class:`Link` in authored order, depth first."""
        yield from _walk_links(self.entries)

    def to_config(self) -> list[Any]:
        """Return the tree as Starlight-style sidebar items."""
        return [_entry_to_config(entry) for entry in self.entries]


def _walk_links(entries: Sequence[NavigationEntry]) -> Iterator[Link]:
    for entry in entries:
        if isinstance(entry, Link):
            yield entry
        elif isinstance(entry, Group):
            yield from _walk_links(entry.children)


def _label(item: Mapping[str, Any], location: str, *, required: bool) -> str | None:
    label = item.get("label")
    if label is None:
        if required:
            raise InvalidNavigationEntryError(location, "missing 'label'")
        return None
    if not isinstance(label, str) or not label.strip():
        raise InvalidNavigationEntryError(location, "'label' must be a non-empty string")
    return label.strip()


def _collapsed(item: Mapping[str, Any], location: str) -> bool:
    collapsed = item.get("collapsed", False)
    if not isinstance(collapsed, bool):
        raise InvalidNavigationEntryError(location, "'collapsed' must be true or false")
    return collapsed


def _parse_entry(item: Any, location: str) -> NavigationEntry:
    if isinstance(item, str):
        if not item.strip():
            raise InvalidNavigationEntryError(location, "empty slug")
        return Link(label=None, path=item)

    if not isinstance(item, Mapping):
        raise InvalidNavigationEntryError(location, f"unsupported item type {type(item).__name__}")

    keys = {"link", "slug", "items", "autogenerate"} & set(item)
    if len(keys) != 1:
        raise InvalidNavigationEntryError(
            location, "expected exactly one of 'link', 'slug', 'items' or 'autogenerate'"
        )
    (kind,) = keys

    if kind == "link":
        target = item["link"]
        if not isinstance(target, str) or not target.strip():
            raise InvalidNavigationEntryError(location, "'link' must be a non-empty string")
        return Link(label=_label(item, location, required=True), path=target)

    if kind == "slug":
        slug = item["slug"]
        if not isinstance(slug, str):
            raise InvalidNavigationEntryError(location, "'slug' must be a string")
        return Link(label=_label(item, location, required=False), path=slug)

    if kind == "items":
        children = item["items"]
        if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
            raise InvalidNavigationEntryError(location, "'items' must be a list")
        return Group(
            label=_label(item, location, required=True) or "",
            children=tuple(
                _parse_entry(child, f"{location}.items[{index}]") for index, child in enumerate(children)
            ),
            collapsed=_collapsed(item, location),
        )

    autogenerate = item["autogenerate"]
    directory = autogenerate.get("directory") if isinstance(autogenerate, Mapping) else None
    if not isinstance(directory, str):
        raise InvalidNavigationEntryError(location, "'autogenerate' needs a 'directory' string")
    return Autogenerate(
        label=_label(item, location, required=True) or "",
        directory=directory,
        collapsed=_collapsed(item, location),
    )


def _entry_to_config(entry: NavigationEntry) -> Any:
    if isinstance(entry, Link):
        if entry.label is None:
            return entry.path
        return {"label": entry.label, "link": entry.path}
    if isinstance(entry, Group):
        data: dict[str, Any] = {"label": entry.label, "items": [_entry_to_config(c) for c in entry.children]}
    else:
        data = {"label": entry.label, "autogenerate": {"directory": entry.directory}}
    if entry.collapsed:
        data["collapsed"] = True
    return data


__all__ = ["Autogenerate", "Group", "Link", "NavigationEntry", "NavigationTree"]
