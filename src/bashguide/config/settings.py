"""Site configuration.

The site is described by ``site.yml`` in the site root:

- ``SiteConfig``: the validated payload of ``site.yml`` (title, URL, styling,
  social links, code highlighting and the sidebar)
- ``RuntimeSettings``: process settings read from ``BASHGUIDE_*`` environment
  variables
- ``find_site_config`` / ``load_site_config``: locate and parse the file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bashguide.config.exceptions import ConfigNotFoundError, ConfigValidationError, SiteStructureError
from bashguide.navigation.tree import NavigationTree

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

CONFIG_FILENAMES = ("site.yml", "site.yaml")
DEFAULT_TITLE = "Shelton's Bash Guide"
DEFAULT_CONTENT_DIR = "src/content/docs"
DEFAULT_HIGHLIGHT_LANGS = ["bash", "sh", "shell", "zsh"]
DEFAULT_HIGHLIGHT_THEME = "nord"


class SocialLink(BaseModel):
    """An icon link shown in the site header."""

    model_config = ConfigDict(frozen=True)

    icon: str
    label: str
    href: str


class HighlightThemes(BaseModel):
    """Code highlighting themes for light and dark mode."""

    light: str = DEFAULT_HIGHLIGHT_THEME
    dark: str = DEFAULT_HIGHLIGHT_THEME


class MarkdownSettings(BaseModel):
    """Markdown rendering hints passed through to the site generator."""

    langs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HIGHLIGHT_LANGS),
        description="Languages loaded for code block highlighting",
    )
    themes: HighlightThemes = Field(default_factory=HighlightThemes)

    @field_validator("langs")
    @classmethod
    def validate_langs(cls, v: list[str]) -> list[str]:
        """Drop blanks and duplicates while keeping order."""
        seen: dict[str, None] = {}
        for lang in v:
            name = lang.strip().lower()
            if name:
                seen.setdefault(name, None)
        return list(seen)


class SiteConfig(BaseModel):
    """Validated contents of ``site.yml``."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(default=DEFAULT_TITLE, min_length=1)
    site: str | None = Field(default=None, description="Canonical deployment URL")
    content_dir: str = Field(default=DEFAULT_CONTENT_DIR, description="Directory holding the pages")
    custom_css: list[str] = Field(default_factory=list, description="Stylesheets relative to the site root")
    social: list[SocialLink] = Field(default_factory=list)
    markdown: MarkdownSettings = Field(default_factory=MarkdownSettings)
    sidebar: list[Any] = Field(default_factory=list, description="Starlight-style sidebar items")

    @field_validator("site")
    @classmethod
    def validate_site(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            msg = f"Site URL must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v.rstrip("/")

    def navigation_tree(self) -> NavigationTree:
        """Build the sidebar tree from ``sidebar``."""
        return NavigationTree.from_config(self.sidebar)

    def content_path(self, site_root: Path) -> Path:
        content = Path(self.content_dir)
        return content if content.is_absolute() else site_root / content


class RuntimeSettings(BaseSettings):
    """Process settings read from the environment."""

    model_config = SettingsConfigDict(env_prefix="BASHGUIDE_", extra="ignore")

    log_level: str = "INFO"
    strict: bool = Field(default=False, description="Treat warnings as build errors")
    config_name: str | None = Field(default=None, description="Explicit config file name in the site root")


def load_runtime_settings() -> RuntimeSettings:
    """Read :class:`RuntimeSettings`, raising :class:`ConfigValidationError` on bad values."""
    try:
        return RuntimeSettings()
    except ValidationError as exc:
        raise ConfigValidationError(exc.errors()) from exc


def find_site_config(start_dir: Path, names: tuple[str, ...] = CONFIG_FILENAMES) -> Path | None:
    """Search upward from ``start_dir`` for a site configuration file."""
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        for name in names:
            config_path = candidate / name
            if config_path.is_file():
                return config_path
    return None


def parse_site_config(raw: str, path: Path | None = None) -> SiteConfig:
    """Validate YAML text into a :class:`SiteConfig`."""
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigValidationError([{"loc": (), "msg": str(exc), "type": "yaml_error"}], path) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigValidationError(
            [{"loc": (), "msg": "top level must be a mapping", "type": "dict_type"}], path
        )

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(exc.errors(), path) from exc


def load_site_config(start_dir: Path, settings: RuntimeSettings | None = None) -> tuple[SiteConfig, Path]:
    """Locate and load ``site.yml``.

    Returns:
        Tuple of (config, site_root), where site_root is the directory holding
        the config file.

    Raises:
        ConfigNotFoundError: If no config file is found in or above ``start_dir``.
        ConfigValidationError: If the file is not valid.

    """
    names = (settings.config_name,) if settings and settings.config_name else CONFIG_FILENAMES
    config_path = find_site_config(start_dir, names)
    if config_path is None:
        raise ConfigNotFoundError(start_dir)

    logger.debug("Loading site config from %s", config_path)
    config = parse_site_config(config_path.read_text(encoding="utf-8"), config_path)
    return config, config_path.parent


def check_site_assets(config: SiteConfig, site_root: Path) -> None:
    """Ensure every custom stylesheet exists.

    Raises:
        SiteStructureError: Naming every missing stylesheet.

    """
    missing = [stylesheet for stylesheet in config.custom_css if not (site_root / stylesheet).is_file()]
    if missing:
        raise SiteStructureError(", ".join(missing), f"{len(missing)} custom stylesheet(s) not found")


def dump_site_config(config: SiteConfig) -> str:
    """Render a config back to YAML."""
    data = config.model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
