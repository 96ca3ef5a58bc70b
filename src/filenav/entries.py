"""Directory entry model used for listings."""

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    """What a directory entry points at."""

    DIRECTORY = "directory"
    SYMLINK = "symlink"
    REGULAR = "regular"
    OTHER = "other"


@dataclass(frozen=True)
class DirEntry:
    """Snapshot of one directory child, taken for a single listing."""

    name: str
    kind: EntryKind
    mode: Optional[int] = None  # 9 permission bits, None if unreadable
    size: int = 0
    modified: Optional[float] = None


def _classify(entry: os.DirEntry) -> EntryKind:
    """Classify an entry: directories (through links) first, then links."""
    try:
        if entry.is_dir():
            return EntryKind.DIRECTORY
        if entry.is_symlink():
            return EntryKind.SYMLINK
        if entry.is_file():
            return EntryKind.REGULAR
    except OSError as e:
        logger.info("Could not classify %s: %s", entry.path, e)
    return EntryKind.OTHER


def read_entry(entry: os.DirEntry) -> DirEntry:
    """Build a DirEntry from a scandir entry.

    Metadata is read through symbolic links. If the entry cannot be stat'ed
    (it vanished, or access is denied) its permissions, size and timestamp
    are left at their defaults instead of failing.

    Args:
        entry: Entry produced by ``os.scandir``.

    Returns:
        DirEntry for the child.
    """
    kind = _classify(entry)

    try:
        st = os.stat(entry.path)
    except OSError as e:
        logger.info("Could not stat %s: %s", entry.path, e)
        return DirEntry(name=entry.name, kind=kind)

    size = st.st_size if kind is EntryKind.REGULAR else 0
    return DirEntry(
        name=entry.name,
        kind=kind,
        mode=stat.S_IMODE(st.st_mode) & 0o777,
        size=size,
        modified=st.st_mtime,
    )
