"""Core browsing primitives: menu commands and path resolution."""

from enum import Enum
from pathlib import Path
from typing import Optional

from filenav.exceptions import EmptyInputError


class Command(Enum):
    """Menu commands, keyed by the token the user types."""

    LIST = "1"
    ENTER = "2"
    UP = "3"
    CREATE_FILE = "4"
    CREATE_DIR = "5"
    DELETE = "6"
    COPY = "7"
    MOVE = "8"
    SEARCH = "9"
    EXIT = "0"

    @classmethod
    def from_token(cls, token: str) -> Optional["Command"]:
        """Look up the command for a menu token.

        Args:
            token: Raw menu selection as typed by the user.

        Returns:
            Matching Command, or None if the token is not a menu choice.
        """
        try:
            return cls(token.strip())
        except ValueError:
            return None


# Menu labels, in the order they are shown
MENU_LABELS = {
    Command.LIST: "List current directory",
    Command.ENTER: "Enter directory",
    Command.UP: "Go up (..)",
    Command.CREATE_FILE: "Create file",
    Command.CREATE_DIR: "Create directory",
    Command.DELETE: "Delete file/directory",
    Command.COPY: "Copy file/directory",
    Command.MOVE: "Move/Rename file/directory",
    Command.SEARCH: "Search by name (recursive)",
    Command.EXIT: "Exit",
}


def resolve_path(current: Path, raw: str) -> Path:
    """Resolve user input against the current directory.

    Resolution is lexical only; the path does not have to exist.

    Args:
        current: The browsing cursor.
        raw: Path as typed by the user.

    Returns:
        ``raw`` unchanged if it is absolute, otherwise ``current / raw``.

    Raises:
        EmptyInputError: If ``raw`` is empty.
    """
    if raw == "":
        raise EmptyInputError()

    candidate = Path(raw)
    if candidate.is_absolute():
        return candidate

    return current / candidate


def parent_directory(current: Path) -> Path:
    """Return the parent of ``current``, or ``current`` itself at the root."""
    return current.parent
