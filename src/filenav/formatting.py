"""Text rendering for directory listings."""

from datetime import datetime
from typing import Optional

from filenav.entries import DirEntry, EntryKind

# Column widths for listing rows; the name column is unbounded
TYPE_WIDTH = 8
PERMS_WIDTH = 12
SIZE_WIDTH = 12
MODIFIED_WIDTH = 20

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

TYPE_TAGS = {
    EntryKind.DIRECTORY: "[DIR]",
    EntryKind.SYMLINK: "[LNK]",
    EntryKind.REGULAR: "[FILE]",
    EntryKind.OTHER: "[FILE]",
}

# (bit, letter) for owner, group and other, in display order
_PERMISSION_BITS = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)


def permission_string(mode: Optional[int]) -> str:
    """Render permission bits as a 9-character rwx string.

    Args:
        mode: Permission bits, or None if they could not be read.

    Returns:
        String such as ``rw-r--r--``; ``---------`` when mode is None.
    """
    if mode is None:
        return "-" * len(_PERMISSION_BITS)
    return "".join(letter if mode & bit else "-" for bit, letter in _PERMISSION_BITS)


def timestamp_string(modified: Optional[float]) -> str:
    """Render a modification time in local time, or an empty string."""
    if modified is None:
        return ""
    try:
        return datetime.fromtimestamp(modified).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, OSError, ValueError):
        return ""


def _columns(type_tag: str, perms: str, size: str, modified: str, name: str) -> str:
    return (
        f"{type_tag:<{TYPE_WIDTH}}"
        f"{perms:<{PERMS_WIDTH}}"
        f"{size:<{SIZE_WIDTH}}"
        f"{modified:<{MODIFIED_WIDTH}}"
        f"{name}"
    )


def format_row(entry: DirEntry) -> str:
    """Render one listing row with fixed-width columns.

    Args:
        entry: Entry to render.

    Returns:
        Row text: type tag, permissions, size, modification time, name.
    """
    size = str(entry.size) if entry.kind is EntryKind.REGULAR else ""
    return _columns(
        TYPE_TAGS[entry.kind],
        permission_string(entry.mode),
        size,
        timestamp_string(entry.modified),
        entry.name,
    )


def header_row() -> str:
    """Column titles aligned with format_row."""
    return _columns("TYPE", "PERMS", "SIZE(B)", "MODIFIED", "NAME")
