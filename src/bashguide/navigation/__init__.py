"""Sidebar navigation tree and its resolution against the content store."""

from bashguide.navigation.resolver import (
    ExternalLink,
    NavigationResolutionError,
    ResolvedGroup,
    ResolvedLink,
    ResolvedTree,
    resolve,
)
from bashguide.navigation.tree import Autogenerate, Group, Link, NavigationEntry, NavigationTree

__all__ = [
    "Autogenerate",
    "ExternalLink",
    "Group",
    "Link",
    "NavigationEntry",
    "NavigationResolutionError",
    "NavigationTree",
    "ResolvedGroup",
    "ResolvedLink",
    "ResolvedTree",
    "resolve",
]
