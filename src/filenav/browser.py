"""Interactive browsing loop.

The cursor (current directory) lives only inside ``run_browser``; every
transition takes the cursor and returns the cursor to continue with.
"""

import logging
from pathlib import Path
from typing import Optional

from filenav import fsops
from filenav.cli_helpers import console, echo, handle_filenav_error, read_line
from filenav.core import MENU_LABELS, Command, resolve_path
from filenav.entries import EntryKind
from filenav.exceptions import EmptyInputError, FileNavError, FsOperationError
from filenav.formatting import format_row, header_row

logger = logging.getLogger(__name__)

RULE = "-" * 60

ROW_STYLES = {
    EntryKind.DIRECTORY: "bold cyan",
    EntryKind.SYMLINK: "magenta",
}

# command -> (prompt, operation, success message)
SINGLE_PATH_OPERATIONS = {
    Command.CREATE_FILE: (
        "Enter file path to create: ",
        fsops.create_file,
        "File created: {}",
    ),
    Command.CREATE_DIR: (
        "Enter directory path to create: ",
        fsops.create_directory_tree,
        "Directory created: {}",
    ),
    Command.DELETE: (
        "Enter file/directory to delete: ",
        fsops.remove_path,
        "Deleted entries: {}",
    ),
}

# command -> (operation, success message); both prompt for source and destination
TWO_PATH_OPERATIONS = {
    Command.COPY: (fsops.copy_path, "Copied to: {}"),
    Command.MOVE: (fsops.move_path, "Moved/Renamed to: {}"),
}


def show_listing(cursor: Path) -> None:
    """Print the contents of the current directory."""
    console.print()
    echo(f"Current Directory: {cursor}", style="bold")
    console.print(RULE)
    echo(header_row(), style="bold")
    console.print(RULE)

    outcome = fsops.attempt(fsops.list_entries, cursor)
    if not outcome.ok:
        handle_filenav_error(outcome.error)
        return

    for entry in outcome.value:
        echo(format_row(entry), style=ROW_STYLES.get(entry.kind))


def show_menu() -> None:
    """Print the numbered command menu."""
    console.print("\n[bold]Commands:[/bold]")
    for command, label in MENU_LABELS.items():
        console.print(f"[cyan]{command.value}[/cyan]. {label}")


def _ask_path(cursor: Path, prompt: str) -> Optional[Path]:
    """Prompt for a path; None means the user aborted."""
    raw = read_line(prompt)
    if raw is None:
        return None
    try:
        return resolve_path(cursor, raw)
    except EmptyInputError:
        return None


def _report(outcome: fsops.Outcome, success_message: Optional[str] = None) -> None:
    """Print the result of one operation."""
    if not outcome.ok:
        handle_filenav_error(outcome.error)
    elif success_message:
        echo(success_message.format(outcome.value), style="green")


# =============================================================================
# Transitions
# =============================================================================


def enter(cursor: Path) -> Path:
    """Ask for a directory and move into it; stay put on failure."""
    target = _ask_path(cursor, "Enter directory name: ")
    if target is None:
        return cursor

    outcome = fsops.attempt(fsops.enter_directory, target)
    _report(outcome)
    return outcome.value if outcome.ok else cursor


def run_single_path(cursor: Path, command: Command) -> Path:
    """Prompt for one path and run the create or delete operation on it."""
    prompt, operation, message = SINGLE_PATH_OPERATIONS[command]
    target = _ask_path(cursor, prompt)
    if target is not None:
        _report(fsops.attempt(operation, target), message)
    return cursor


def run_two_path(cursor: Path, command: Command) -> Path:
    """Prompt for source and destination, then copy or move."""
    operation, message = TWO_PATH_OPERATIONS[command]
    src = _ask_path(cursor, "Enter source path: ")
    if src is None:
        return cursor
    dst = _ask_path(cursor, "Enter destination path: ")
    if dst is None:
        return cursor

    _report(fsops.attempt(operation, src, dst), message)
    return cursor


def search(cursor: Path) -> Path:
    """Print every descendant of the cursor whose name contains the input."""
    needle = read_line("Enter name to search: ")
    if not needle:
        return cursor

    matches = 0
    try:
        for match in fsops.search_by_name(cursor, needle):
            echo(str(match))
            matches += 1
    except FileNavError as e:
        handle_filenav_error(e)
    except OSError as e:
        handle_filenav_error(FsOperationError("search", cursor, e.strerror or str(e)))

    console.print(f"[dim]{matches} match(es)[/dim]")
    return cursor


def step(cursor: Path, command: Command) -> Path:
    """Apply one non-exit command and return the new cursor."""
    logger.debug("Running %s from %s", command.name, cursor)
    if command is Command.ENTER:
        return enter(cursor)
    if command is Command.UP:
        return fsops.go_up(cursor)
    if command in SINGLE_PATH_OPERATIONS:
        return run_single_path(cursor, command)
    if command in TWO_PATH_OPERATIONS:
        return run_two_path(cursor, command)
    if command is Command.SEARCH:
        return search(cursor)
    # LIST: the listing is redrawn at the top of every iteration
    return cursor


def run_browser(start: Path) -> Path:
    """Run the browsing loop until Exit or end of input.

    Args:
        start: Initial cursor, an existing directory.

    Returns:
        The cursor at the time the loop ended.
    """
    cursor = start
    while True:
        show_listing(cursor)
        show_menu()

        choice = read_line("Choose: ")
        if choice is None:
            logger.debug("End of input, leaving browser")
            break

        command = Command.from_token(choice)
        if command is None:
            console.print("[red]Invalid choice.[/red]")
            continue
        if command is Command.EXIT:
            console.print("Goodbye!")
            break

        cursor = step(cursor, command)

    return cursor
