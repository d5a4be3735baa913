"""A module for bashguide's command-line interface."""

from bashguide.cli.main import app

__all__ = ["app", "main"]


def main() -> None:
    """Entry point for the CLI."""
    app()
