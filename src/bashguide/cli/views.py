"""Rich renderables for check reports and the resolved sidebar."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from bashguide.issues import Issue, Severity
from bashguide.navigation.resolver import ExternalLink, ResolvedEntry, ResolvedGroup, ResolvedTree

_SEVERITY_STYLE = {Severity.ERROR: "bold red", Severity.WARNING: "yellow"}


def issues_table(issues: Sequence[Issue], title: str = "Site Check") -> Table:
    """Tabulate issues, errors first."""
    table = Table(title=title, show_header=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Message")

    ordered = sorted(issues, key=lambda issue: issue.severity is not Severity.ERROR)
    for issue in ordered:
        style = _SEVERITY_STYLE[issue.severity]
        table.add_row(f"[{style}]{issue.severity.value}[/{style}]", issue.kind, escape(issue.message))
    return table


def config_errors_table(errors: Sequence[dict[str, Any]]) -> Table:
    """Tabulate pydantic validation errors."""
    table = Table(title="Configuration Errors", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Error", style="red")
    table.add_column("Value", style="dim")

    for error in errors:
        loc = " → ".join(str(part) for part in error.get("loc", ()))
        value = error.get("input", "")
        if isinstance(value, dict):
            value = "{...}"
        elif isinstance(value, list):
            value = "[...]"
        else:
            value = str(value)[:50]
        table.add_row(loc or "(root)", str(error.get("msg", "")), value)
    return table


def sidebar_tree(resolved: ResolvedTree, title: str) -> Tree:
    """Render the resolved sidebar as a rich tree."""
    root = Tree(f"[bold]{escape(title)}[/bold]")
    _add_entries(root, resolved.entries)
    return root


def _add_entries(node: Tree, entries: Sequence[ResolvedEntry]) -> None:
    for entry in entries:
        if isinstance(entry, ResolvedGroup):
            suffix = " [dim](collapsed)[/dim]" if entry.collapsed else ""
            _add_entries(node.add(f"[bold cyan]{escape(entry.label)}[/bold cyan]{suffix}"), entry.children)
        elif isinstance(entry, ExternalLink):
            node.add(f"{escape(entry.label)} [dim]→ {escape(entry.url)}[/dim] [magenta]↗[/magenta]")
        else:
            node.add(f"{escape(entry.label)} [dim]→ {entry.path}[/dim]")
