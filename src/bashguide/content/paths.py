"""Site path helpers shared by the content loader and the sidebar model."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "//")
CONTENT_SUFFIXES = (".md", ".mdx")
INDEX_STEM = "index"

_WHITESPACE_RE = re.compile(r"\s+")


def is_external(target: str) -> bool:
    """Return True for links that leave the site."""
    return target.strip().lower().startswith(EXTERNAL_PREFIXES)


def _slugify_segment(segment: str) -> str:
    return _WHITESPACE_RE.sub("-", segment.strip()).lower()


def normalize_path(value: str) -> str:
    """Normalize a slug or URL path to the ``/a/b/`` form.

    ``""``, ``"/"`` and ``"index"`` all map to the site root ``"/"``. Query
    strings and fragments are dropped.

    >>> normalize_path("Guides/Intro")
    '/guides/intro/'
    """
    cleaned = value.split("#", 1)[0].split("?", 1)[0]
    segments = [_slugify_segment(part) for part in cleaned.split("/") if part.strip() not in ("", ".")]
    if segments and segments[-1] == INDEX_STEM:
        segments.pop()
    if not segments:
        return "/"
    return "/" + "/".join(segments) + "/"


def path_for_file(relative: PurePosixPath) -> str:
    """Derive the site path of a content file from its path inside the content directory."""
    parts = list(relative.parts[:-1])
    stem = relative.name
    for suffix in CONTENT_SUFFIXES:
        if stem.lower().endswith(suffix):
            stem = stem[: -len(suffix)]
            break
    parts.append(stem)
    return normalize_path("/".join(parts))


__all__ = [
    "CONTENT_SUFFIXES",
    "is_external",
    "normalize_path",
    "path_for_file",
]
