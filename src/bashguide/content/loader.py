"""Build the content store by scanning the content directory."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from bashguide.config.exceptions import SiteStructureError
from bashguide.content.documents import ContentStore, Document
from bashguide.content.exceptions import MissingFrontmatterError, UnreadableContentError
from bashguide.content.frontmatter import parse_frontmatter, text_field
from bashguide.content.paths import CONTENT_SUFFIXES, path_for_file
from bashguide.issues import Issue, MissingDescription

logger = logging.getLogger(__name__)

IGNORED_PREFIX = "_"
_CORE_FIELDS = frozenset({"title", "description"})


@dataclass(frozen=True, slots=True)
class LoadedContent:
    """Content store plus the non-fatal issues found while loading it."""

    store: ContentStore
    warnings: tuple[Issue, ...] = field(default_factory=tuple)


def iter_content_files(content_dir: Path) -> Iterator[Path]:
    """Yield Markdown files under ``content_dir`` in sorted order.

    Files and directories starting with ``_`` are skipped.
    """
    for path in sorted(content_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in CONTENT_SUFFIXES:
            continue
        relative = path.relative_to(content_dir)
        if any(part.startswith(IGNORED_PREFIX) for part in relative.parts):
            logger.debug("Skipping ignored content file %s", relative)
            continue
        yield path


def load_document(path: Path, content_dir: Path) -> Document:
    """Read a single content file into a :class:`Document`.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8.

    """
    metadata, body = parse_frontmatter(path.read_text(encoding="utf-8"))
    relative = PurePosixPath(path.relative_to(content_dir).as_posix())
    extra = {key: value for key, value in metadata.items() if key not in _CORE_FIELDS}
    return Document(
        path=path_for_file(relative),
        title=text_field(metadata, "title"),
        description=text_field(metadata, "description"),
        body=body,
        source=path,
        metadata=extra,
    )


def load_content_store(content_dir: Path) -> LoadedContent:
    """Scan ``content_dir`` and build a :class:`ContentStore`.

    Raises:
        SiteStructureError: If the content directory does not exist.
        UnreadableContentError: If any file cannot be read as UTF-8 text.
        MissingFrontmatterError: If any document has no title.
        DuplicatePathError: If several files map to the same site path.

    """
    if not content_dir.is_dir():
        raise SiteStructureError(str(content_dir), "content directory does not exist")

    documents: list[Document] = []
    unreadable: list[Path] = []
    for path in iter_content_files(content_dir):
        try:
            documents.append(load_document(path, content_dir))
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s: %s", path, exc)
            unreadable.append(path)
    if unreadable:
        raise UnreadableContentError(unreadable)

    untitled = [doc.source for doc in documents if not doc.title and doc.source is not None]
    if untitled:
        raise MissingFrontmatterError("title", untitled)

    store = ContentStore.from_documents(documents)
    warnings = tuple(MissingDescription(path) for path in sorted(store) if not store[path].description)
    logger.debug("Loaded %d documents from %s", len(store), content_dir)
    return LoadedContent(store=store, warnings=warnings)


__all__ = ["LoadedContent", "iter_content_files", "load_content_store", "load_document"]
