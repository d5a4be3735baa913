"""Configuration facade.

Consumers import everything configuration-related from here:

    from bashguide.config import SiteConfig, load_site_config
"""

from bashguide.config.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    InvalidNavigationEntryError,
    SiteStructureError,
)
from bashguide.config.settings import (
    CONFIG_FILENAMES,
    DEFAULT_CONTENT_DIR,
    DEFAULT_TITLE,
    HighlightThemes,
    MarkdownSettings,
    RuntimeSettings,
    SiteConfig,
    SocialLink,
    check_site_assets,
    dump_site_config,
    find_site_config,
    load_runtime_settings,
    load_site_config,
    parse_site_config,
)

__all__ = [
    "CONFIG_FILENAMES",
    "DEFAULT_CONTENT_DIR",
    "DEFAULT_TITLE",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "HighlightThemes",
    "InvalidNavigationEntryError",
    "MarkdownSettings",
    "RuntimeSettings",
    "SiteConfig",
    "SiteStructureError",
    "SocialLink",
    "check_site_assets",
    "dump_site_config",
    "find_site_config",
    "load_runtime_settings",
    "load_site_config",
    "parse_site_config",
]
