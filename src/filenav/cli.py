"""Main CLI entry point for the filenav tool."""

import logging
from pathlib import Path
from typing import Optional

import typer

from filenav.browser import run_browser
from filenav.cli_helpers import echo

app = typer.Typer(
    name="filenav",
    help="filenav - Interactive console file browser",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


# Global options callback
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    start: Optional[Path] = typer.Option(
        None,
        "--start",
        "-s",
        help="Directory to start browsing from (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Browse the file system interactively when no command is given."""
    configure_logging(verbose)

    if ctx.invoked_subcommand is not None:
        return

    try:
        start_dir = (start or Path.cwd()).resolve()
    except OSError as e:
        echo(f"Error: Cannot determine start directory: {e.strerror or e}", style="red")
        raise typer.Abort()

    if not start_dir.is_dir():
        echo(f"Error: Not a directory: {start_dir}", style="red")
        raise typer.Abort()

    run_browser(start_dir)


@app.command()
def version() -> None:
    """Show the version number."""
    from filenav import __version__

    typer.echo(f"filenav version {__version__}")


if __name__ == "__main__":
    app()
