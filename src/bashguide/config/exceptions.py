"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from bashguide.exceptions import BashGuideError


class ConfigError(BashGuideError):
    """Base exception for all configuration-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the site configuration file cannot be found."""

    def __init__(self, search_path: Path) -> None:
        self.search_path = search_path
        super().__init__(f"Could not find site.yml in or above {search_path}")


class ConfigValidationError(ConfigError):
    """Raised when the site configuration file fails validation."""

    def __init__(self, errors: Sequence[dict[str, Any]] | None = None, path: Path | None = None) -> None:
        self.errors = list(errors or [])
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Configuration validation failed{where} with {len(self.errors)} error(s).")


class InvalidNavigationEntryError(ConfigError):
    """Raised when a sidebar item cannot be turned into a navigation entry."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Invalid sidebar entry at {location}: {reason}")


class SiteStructureError(ConfigError):
    """Raised when required site files or directories are missing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid site structure at '{path}': {reason}")
