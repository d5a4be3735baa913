"""Run the full site check: config, content store and sidebar resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from bashguide.config.settings import RuntimeSettings, SiteConfig, check_site_assets, load_site_config
from bashguide.content.loader import load_content_store
from bashguide.issues import Issue, errors_of, warnings_of
from bashguide.navigation.resolver import NavigationResolutionError, ResolvedTree, resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SiteReport:
    """Outcome of checking a site."""

    site_root: Path
    config: SiteConfig
    document_count: int
    resolved: ResolvedTree | None
    issues: tuple[Issue, ...] = field(default_factory=tuple)

    @property
    def errors(self) -> list[Issue]:
        return errors_of(self.issues)

    @property
    def warnings(self) -> list[Issue]:
        return warnings_of(self.issues)

    def passed(self, *, strict: bool = False) -> bool:
        """Return True when the build may continue."""
        if self.errors:
            return False
        return not (strict and self.warnings)


def check_site(start_dir: Path, settings: RuntimeSettings | None = None) -> SiteReport:
    """Load the site at or above ``start_dir`` and resolve its sidebar.

    Broken links and orphaned documents are collected into the report.
    Configuration and content-store failures propagate as exceptions.
    """
    config, site_root = load_site_config(start_dir, settings)
    check_site_assets(config, site_root)
    tree = config.navigation_tree()
    loaded = load_content_store(config.content_path(site_root))

    resolved: ResolvedTree | None
    try:
        resolved = resolve(tree, loaded.store)
        navigation_issues: tuple[Issue, ...] = resolved.warnings
    except NavigationResolutionError as exc:
        resolved = None
        navigation_issues = exc.errors + exc.warnings

    issues = navigation_issues + loaded.warnings
    logger.info(
        "Checked %s: %d document(s), %d error(s), %d warning(s)",
        config.title,
        len(loaded.store),
        len(errors_of(issues)),
        len(warnings_of(issues)),
    )
    return SiteReport(
        site_root=site_root,
        config=config,
        document_count=len(loaded.store),
        resolved=resolved,
        issues=issues,
    )


__all__ = ["SiteReport", "check_site"]
