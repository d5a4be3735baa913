"""Site scaffolding: write a starter ``site.yml`` and content directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from bashguide.config.settings import (
    CONFIG_FILENAMES,
    DEFAULT_CONTENT_DIR,
    DEFAULT_HIGHLIGHT_LANGS,
    DEFAULT_HIGHLIGHT_THEME,
    DEFAULT_TITLE,
    find_site_config,
)
from bashguide.init.exceptions import ScaffoldingExecutionError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_STYLESHEET = "src/styles/nord.css"


@dataclass(slots=True)
class ScaffoldResult:
    """Files written (and skipped because they already existed)."""

    site_root: Path
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def config_created(self) -> bool:
        return any(path.name in CONFIG_FILENAMES for path in self.created)


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(),
        undefined=StrictUndefined,
    )


def scaffold_site(site_root: Path, title: str | None = None, site_url: str | None = None) -> ScaffoldResult:
    """Create the starter files for a new site.

    Existing files are never overwritten. When ``site_root`` already holds a
    ``site.yml`` the config is left alone and only missing files are added.

    Raises:
        ScaffoldingExecutionError: If a template fails to render or a file cannot be written.

    """
    site_root = site_root.expanduser().resolve()
    result = ScaffoldResult(site_root=site_root)

    existing = find_site_config(site_root)
    if existing is not None and existing.parent == site_root:
        logger.info("Site config already exists at %s", existing)
        result.skipped.append(existing)
        config_target = None
    else:
        config_target = site_root / CONFIG_FILENAMES[0]

    context = {
        "title": title or DEFAULT_TITLE,
        "site_url": site_url,
        "content_dir": DEFAULT_CONTENT_DIR,
        "stylesheet": DEFAULT_STYLESHEET,
        "langs": DEFAULT_HIGHLIGHT_LANGS,
        "theme": DEFAULT_HIGHLIGHT_THEME,
    }
    targets: list[tuple[str, Path]] = [
        ("index.md.jinja", site_root / DEFAULT_CONTENT_DIR / "index.md"),
        ("styles.css.jinja", site_root / DEFAULT_STYLESHEET),
    ]
    if config_target is not None:
        targets.insert(0, ("site.yml.jinja", config_target))

    env = _environment()
    try:
        for template_name, target in targets:
            if target.exists():
                result.skipped.append(target)
                continue
            content = env.get_template(template_name).render(**context)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content + "\n", encoding="utf-8")
            result.created.append(target)
            logger.info("Created %s", target.relative_to(site_root))
    except (TemplateError, OSError) as exc:
        raise ScaffoldingExecutionError(site_root, exc) from exc

    return result


__all__ = ["DEFAULT_STYLESHEET", "ScaffoldResult", "scaffold_site"]
