"""Main Typer application for bashguide."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel

from bashguide.cli.errorhandler import handle_cli_errors
from bashguide.cli.views import issues_table, sidebar_tree
from bashguide.config import load_runtime_settings, load_site_config
from bashguide.content import load_content_store
from bashguide.init import scaffold_site
from bashguide.logging_setup import configure_logging
from bashguide.navigation import resolve
from bashguide.site import check_site

app = typer.Typer(
    name="bashguide",
    help="Check and inspect the sidebar navigation of Shelton's Bash Guide",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)

SiteRootArg = Annotated[
    Path,
    typer.Argument(help="Site root or any directory below it (defaults to the current directory)"),
]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Show full tracebacks on errors")]


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (overrides BASHGUIDE_LOG_LEVEL)", show_default=False),
    ] = None,
) -> None:
    """Configure logging for every command."""
    with handle_cli_errors():
        configure_logging(log_level or load_runtime_settings().log_level)


@app.command()
def check(
    site_root: SiteRootArg = Path(),
    *,
    strict: Annotated[
        bool, typer.Option("--strict", help="Fail on warnings too (also enabled by BASHGUIDE_STRICT)")
    ] = False,
    debug: DebugOpt = False,
) -> None:
    """Validate site config, content front-matter and sidebar links."""
    with handle_cli_errors(debug=debug):
        settings = load_runtime_settings()
        report = check_site(site_root, settings)

    if report.issues:
        console.print(issues_table(report.issues))

    summary = (
        f"{report.document_count} document(s), "
        f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    )
    strict = strict or settings.strict
    if report.passed(strict=strict):
        console.print(f"[green]✓ {report.config.title}:[/green] {summary}")
        return

    reason = "warnings treated as errors" if strict and not report.errors else "fix the errors above"
    console.print(f"[bold red]✗ {report.config.title}:[/bold red] {summary} ({reason})")
    raise typer.Exit(1)


@app.command()
def tree(
    site_root: SiteRootArg = Path(),
    *,
    as_json: Annotated[bool, typer.Option("--json", help="Print the render-ready sidebar as JSON")] = False,
    debug: DebugOpt = False,
) -> None:
    """Print the resolved sidebar."""
    with handle_cli_errors(debug=debug):
        config, root = load_site_config(site_root, load_runtime_settings())
        loaded = load_content_store(config.content_path(root))
        resolved = resolve(config.navigation_tree(), loaded.store)

    if as_json:
        payload = {"title": config.title, **resolved.to_dict()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    console.print(sidebar_tree(resolved, config.title))
    if resolved.warnings:
        console.print(f"[yellow]{len(resolved.warnings)} document(s) not in the sidebar[/yellow]")


@app.command()
def init(
    site_root: Annotated[Path, typer.Argument(help="Directory for the new site")],
    *,
    title: Annotated[str | None, typer.Option("--title", help="Site title", show_default=False)] = None,
    site_url: Annotated[
        str | None, typer.Option("--site-url", help="Deployment URL", show_default=False)
    ] = None,
    debug: DebugOpt = False,
) -> None:
    """Create a starter site.yml and content directory."""
    with handle_cli_errors(debug=debug):
        result = scaffold_site(site_root, title=title, site_url=site_url)

    created = "\n".join(f"• {path.relative_to(result.site_root)}" for path in result.created) or "• (nothing)"
    if result.config_created:
        console.print(
            Panel(
                f"[bold green]Site initialized at {result.site_root}[/bold green]\n\n"
                f"[bold]Created:[/bold]\n{created}\n\n"
                f"[bold]Next steps:[/bold]\n• Add pages and list them in [cyan]site.yml[/cyan]\n"
                f"• Validate: [cyan]bashguide check {site_root}[/cyan]",
                title="Initialization Complete",
                border_style="green",
            )
        )
    else:
        console.print(
            Panel(
                f"[bold yellow]A site already exists at {result.site_root}[/bold yellow]\n\n"
                f"[bold]Added missing files:[/bold]\n{created}",
                title="Site Exists",
                border_style="yellow",
            )
        )
