"""Exceptions for the site initialization and scaffolding process."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bashguide.exceptions import BashGuideError

if TYPE_CHECKING:
    from pathlib import Path


class ScaffoldingError(BashGuideError):
    """Base exception for scaffolding errors."""


class ScaffoldingExecutionError(ScaffoldingError):
    """Raised when writing the starter site fails."""

    def __init__(self, site_root: Path, original_exception: Exception) -> None:
        self.site_root = site_root
        super().__init__(f"Failed to scaffold site at root '{site_root}': {original_exception}")
        self.__cause__ = original_exception
