"""Front-matter parsing for content pages."""

from __future__ import annotations

import logging
from typing import Any

import frontmatter
import yaml

logger = logging.getLogger(__name__)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split ``content`` into its front-matter mapping and Markdown body.

    Malformed or non-mapping front-matter yields ``{}`` so the page is later
    reported as untitled rather than aborting the scan.
    """
    try:
        post = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        logger.warning("Ignoring malformed front-matter: %s", exc)
        return {}, content

    if not isinstance(post.metadata, dict):
        logger.warning("Ignoring front-matter of type %s", type(post.metadata).__name__)
        return {}, post.content
    return {str(key): value for key, value in post.metadata.items()}, post.content


def text_field(metadata: dict[str, Any], key: str) -> str:
    value = metadata.get(key)
    return "" if value is None else str(value).strip()
