"""Initialization stage - site scaffolding.

This package creates the starter ``site.yml`` and content directory.
"""

from .scaffolding import ScaffoldResult, scaffold_site

__all__ = [
    "ScaffoldResult",
    "scaffold_site",
]
