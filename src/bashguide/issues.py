"""Validation issues reported while checking a site.

Issues are plain values: errors halt the build, warnings are reported and the
build continues. Collecting them as data lets a single run surface every
problem at once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    """How an issue affects the build."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Issue(ABC):
    """Base class for every reported issue."""

    @property
    @abstractmethod
    def severity(self) -> Severity: ...

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @property
    @abstractmethod
    def message(self) -> str: ...

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.ERROR


@dataclass(frozen=True, slots=True)
class BrokenLink(Issue):
    """Sidebar entries pointing at a path no document provides.

    One issue per missing path; ``locations`` lists every entry that names it
    in sidebar order.
    """

    label: str | None
    path: str
    locations: tuple[str, ...] = ()

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def kind(self) -> str:
        return "broken-link"

    @property
    def message(self) -> str:
        label = f"'{self.label}'" if self.label else "Unlabeled link"
        where = f" ({', '.join(self.locations)})" if self.locations else ""
        return f"{label} points to missing document {self.path}{where}"


@dataclass(frozen=True, slots=True)
class OrphanedDocument(Issue):
    """A document no sidebar entry links to."""

    path: str

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def kind(self) -> str:
        return "orphaned-document"

    @property
    def message(self) -> str:
        return f"Document {self.path} is not reachable from the sidebar"


@dataclass(frozen=True, slots=True)
class DuplicatePath(Issue):
    """Two or more files claim the same site path."""

    path: str
    sources: tuple[Path, ...]

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def kind(self) -> str:
        return "duplicate-path"

    @property
    def message(self) -> str:
        files = ", ".join(str(source) for source in self.sources)
        return f"Path {self.path} is claimed by several documents: {files}"


@dataclass(frozen=True, slots=True)
class MissingDescription(Issue):
    """A document has no ``description`` in its front-matter."""

    path: str

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def kind(self) -> str:
        return "missing-description"

    @property
    def message(self) -> str:
        return f"Document {self.path} has no description"


def errors_of(issues: Iterable[Issue]) -> list[Issue]:
    return [issue for issue in issues if issue.severity is Severity.ERROR]


def warnings_of(issues: Iterable[Issue]) -> list[Issue]:
    return [issue for issue in issues if issue.severity is Severity.WARNING]


__all__ = [
    "BrokenLink",
    "DuplicatePath",
    "Issue",
    "MissingDescription",
    "OrphanedDocument",
    "Severity",
    "errors_of",
    "warnings_of",
]
