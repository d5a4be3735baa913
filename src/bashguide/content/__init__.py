"""Content store: documents discovered in the site's content directory."""

from bashguide.content.documents import ContentStore, Document
from bashguide.content.exceptions import (
    ContentError,
    DuplicatePathError,
    MissingFrontmatterError,
    UnreadableContentError,
)
from bashguide.content.loader import LoadedContent, load_content_store
from bashguide.content.paths import is_external, normalize_path

__all__ = [
    "ContentError",
    "ContentStore",
    "Document",
    "DuplicatePathError",
    "LoadedContent",
    "MissingFrontmatterError",
    "UnreadableContentError",
    "is_external",
    "load_content_store",
    "normalize_path",
]
