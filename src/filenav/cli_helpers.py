"""Shared console helpers for the filenav CLI."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from filenav.exceptions import (
    AlreadyExistsError,
    DirectoryUnreadableError,
    EmptyInputError,
    FileNavError,
    NotADirectoryPathError,
    PathNotFoundError,
)

console = Console()


def _printable(text: str) -> str:
    # Undecodable bytes in file names arrive as lone surrogates.
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")


def echo(text: str, style: Optional[str] = None) -> None:
    """Print dynamic text (paths, names) literally, without wrapping it."""
    console.print(escape(_printable(text)), style=style, soft_wrap=True, highlight=False)


def read_line(prompt: str) -> Optional[str]:
    """Read one line of input after showing a prompt.

    Args:
        prompt: Prompt text (rich markup allowed).

    Returns:
        The line without its newline, None once input is exhausted, or an
        empty string if the line could not be decoded.
    """
    try:
        return console.input(prompt)
    except EOFError:
        return None
    except UnicodeDecodeError as e:
        echo(f"Error: Could not decode input: {e.reason}", style="red")
        return ""


def handle_filenav_error(error: FileNavError) -> None:
    """Print a one-line, user-friendly message for a failed operation.

    Args:
        error: The filenav error to report. EmptyInputError is silent.
    """
    if isinstance(error, EmptyInputError):
        return
    elif isinstance(error, DirectoryUnreadableError):
        echo(f"Error listing directory: {error.reason}", style="red")
    elif isinstance(error, (PathNotFoundError, NotADirectoryPathError, AlreadyExistsError)):
        echo(f"Error: {error.message}", style="red")
    else:
        echo(f"Error: {error}", style="red")
