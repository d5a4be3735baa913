"""Centralized logging configuration for bashguide."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

_LOG_LEVEL_ENV: Final[str] = "BASHGUIDE_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "INFO"
_MANAGED_ATTR: Final[str] = "_bashguide_managed"

console = Console(stderr=True)


def _resolve_level(level_name: str | None = None) -> int:
    name = (level_name or os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME)).upper()
    level = getattr(logging, name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _is_managed(handler: logging.Handler) -> bool:
    return isinstance(handler, RichHandler) and getattr(handler, _MANAGED_ATTR, False)


def configure_logging(level_name: str | None = None) -> None:
    """Install one Rich handler on the root logger and set its level.

    Repeated calls only adjust the level. ``level_name`` wins over
    ``BASHGUIDE_LOG_LEVEL``; unknown names fall back to INFO.
    """
    root_logger = logging.getLogger()

    if not any(_is_managed(handler) for handler in root_logger.handlers):
        root_logger.handlers.clear()
        handler = RichHandler(console=console, rich_tracebacks=True, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(handler, _MANAGED_ATTR, True)
        root_logger.addHandler(handler)

    root_logger.setLevel(_resolve_level(level_name))
    logging.captureWarnings(True)
