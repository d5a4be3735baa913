"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from bashguide.cli.views import config_errors_table, issues_table
from bashguide.config.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    InvalidNavigationEntryError,
    SiteStructureError,
)
from bashguide.content.exceptions import (
    ContentError,
    DuplicatePathError,
    MissingFrontmatterError,
    UnreadableContentError,
)
from bashguide.init.exceptions import ScaffoldingError
from bashguide.navigation.resolver import NavigationResolutionError

console = Console()


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise known errors and print full tracebacks.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except ConfigNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]Config Not Found:[/bold red] {e}")
        console.print("Run [cyan]bashguide init <dir>[/cyan] to create a site.")
        raise typer.Exit(1) from e
    except ConfigValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Configuration:[/bold red] {e}")
        if e.errors:
            console.print(config_errors_table(e.errors))
        raise typer.Exit(1) from e
    except InvalidNavigationEntryError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Sidebar:[/bold red] {e}")
        raise typer.Exit(1) from e
    except SiteStructureError as e:
        if debug:
            raise
        console.print(f"[bold red]Site Structure Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except DuplicatePathError as e:
        if debug:
            raise
        console.print(f"[bold red]Duplicate Paths:[/bold red] {e}")
        console.print(issues_table(e.duplicates, title="Duplicate Document Paths"))
        raise typer.Exit(1) from e
    except MissingFrontmatterError as e:
        if debug:
            raise
        console.print(f"[bold red]Missing Front-matter:[/bold red] {e}")
        for source in e.sources:
            console.print(f"  - {source}")
        raise typer.Exit(1) from e
    except UnreadableContentError as e:
        if debug:
            raise
        console.print(f"[bold red]Unreadable Content:[/bold red] {e}")
        for source in e.sources:
            console.print(f"  - {source}")
        raise typer.Exit(1) from e
    except ContentError as e:
        if debug:
            raise
        console.print(f"[bold red]Content Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except NavigationResolutionError as e:
        if debug:
            raise
        console.print(f"[bold red]Broken Navigation:[/bold red] {e}")
        console.print(issues_table([*e.errors, *e.warnings], title="Sidebar Issues"))
        raise typer.Exit(1) from e
    except ScaffoldingError as e:
        if debug:
            raise
        console.print(f"[bold red]Scaffolding Failed:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
