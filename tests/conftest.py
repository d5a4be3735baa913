from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest
import yaml

from bashguide.content.documents import Document


def write_page(content_dir: Path, relative: str, title: str | None, description: str | None = "A page.") -> Path:
    """Write a Markdown page with front-matter and return its path."""
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if description is not None:
        lines.append(f"description: {description}")
    lines += ["---", "", f"Body of {relative}.", ""]
    path = content_dir / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@dataclass(slots=True)
class SiteFixture:
    """Helper so tests can lay out a site on disk."""

    root: Path
    config: dict = field(default_factory=dict)

    @property
    def content_dir(self) -> Path:
        return self.root / self.config.get("content_dir", "src/content/docs")

    def page(self, relative: str, title: str | None = "Page", description: str | None = "A page.") -> Path:
        return write_page(self.content_dir, relative, title, description)

    def write_config(self, **overrides: object) -> Path:
        self.config.update(overrides)
        path = self.root / "site.yml"
        path.write_text(yaml.safe_dump(self.config, sort_keys=False), encoding="utf-8")
        return path


@pytest.fixture
def site(tmp_path: Path) -> SiteFixture:
    fixture = SiteFixture(root=tmp_path, config={"title": "Test Guide", "sidebar": []})
    fixture.content_dir.mkdir(parents=True)
    return fixture


@pytest.fixture
def make_doc():
    def _make(path: str, title: str | None = None, description: str = "Summary.", **metadata: object) -> Document:
        return Document(
            path=path,
            title=title or path.strip("/") or "Home",
            description=description,
            metadata=metadata,
        )

    return _make
