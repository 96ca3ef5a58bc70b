"""File-system operations behind the browser menu.

Every operation either returns its payload or raises a FileNavError subclass;
raw OSErrors are translated where they occur. ``attempt`` wraps a single call
into an Outcome so the browser can report success and failure in one place.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

from filenav.core import parent_directory
from filenav.entries import DirEntry, read_entry
from filenav.exceptions import (
    AlreadyExistsError,
    DirectoryUnreadableError,
    EmptyInputError,
    FileNavError,
    FsOperationError,
    NotADirectoryPathError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Result of one operation: a payload or a typed error."""

    value: Any = None
    error: Optional[FileNavError] = None

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None


def _reason(error: Exception) -> str:
    return getattr(error, "strerror", None) or str(error)


def attempt(operation: Callable[..., Any], *args: Any) -> Outcome:
    """Run one operation and capture its result or failure.

    Args:
        operation: One of the operations in this module.
        *args: Arguments passed to the operation.

    Returns:
        Outcome holding the return value, or the error that was raised.
    """
    try:
        return Outcome(value=operation(*args))
    except FileNavError as e:
        logger.debug("%s failed: %s", operation.__name__, e)
        return Outcome(error=e)
    except (OSError, ValueError) as e:
        target = args[0] if args else Path()
        action = operation.__name__.replace("_", " ")
        logger.debug("%s failed: %s", operation.__name__, e)
        return Outcome(error=FsOperationError(action, target, _reason(e)))


# =============================================================================
# Listing and navigation
# =============================================================================


def list_entries(directory: Path) -> list[DirEntry]:
    """List the immediate children of a directory, sorted by name.

    Args:
        directory: Directory to list.

    Returns:
        One DirEntry per child. Children that cannot be stat'ed are included
        with default metadata.

    Raises:
        DirectoryUnreadableError: If the directory cannot be opened.
    """
    logger.debug("Listing %s", directory)
    try:
        with os.scandir(directory) as it:
            entries = [read_entry(entry) for entry in it]
    except OSError as e:
        raise DirectoryUnreadableError(directory, _reason(e))

    return sorted(entries, key=lambda entry: entry.name)


def enter_directory(path: Path) -> Path:
    """Validate a directory to move into.

    Args:
        path: Candidate directory.

    Returns:
        Canonical absolute path of the directory.

    Raises:
        NotADirectoryPathError: If path is missing or not a directory.
    """
    try:
        is_dir = path.is_dir()
    except OSError:
        is_dir = False
    if not is_dir:
        raise NotADirectoryPathError(path)

    try:
        return path.resolve(strict=True)
    except (OSError, ValueError) as e:
        raise FsOperationError("enter", path, _reason(e))


def go_up(current: Path) -> Path:
    """Return the directory above ``current``; the root stays where it is."""
    return parent_directory(current)


# =============================================================================
# Mutating operations
# =============================================================================


def create_file(path: Path) -> Path:
    """Create an empty regular file, never overwriting.

    Raises:
        AlreadyExistsError: If something already exists at path.
        FsOperationError: If the file cannot be created.
    """
    if os.path.lexists(path):
        raise AlreadyExistsError(path)

    try:
        path.touch(exist_ok=False)
    except FileExistsError:
        raise AlreadyExistsError(path)
    except (OSError, ValueError) as e:
        raise FsOperationError("create file", path, _reason(e))

    logger.debug("Created file %s", path)
    return path


def create_directory_tree(path: Path) -> Path:
    """Create a directory and any missing parents (``mkdir -p``).

    Raises:
        AlreadyExistsError: If something already exists at path.
        FsOperationError: If the directories cannot be created.
    """
    if os.path.lexists(path):
        raise AlreadyExistsError(path)

    try:
        path.mkdir(parents=True)
    except FileExistsError:
        raise AlreadyExistsError(path)
    except (OSError, ValueError) as e:
        raise FsOperationError("create directory", path, _reason(e))

    logger.debug("Created directory %s", path)
    return path


def _count_tree(directory: Path) -> int:
    count = 1
    for _, dirnames, filenames in os.walk(directory):
        count += len(dirnames) + len(filenames)
    return count


def remove_path(path: Path) -> int:
    """Delete a file, a symbolic link, or a whole directory tree.

    Args:
        path: Path to delete.

    Returns:
        Number of entries removed, the directory itself included.

    Raises:
        PathNotFoundError: If nothing exists at path.
        FsOperationError: If removal fails.
    """
    if not os.path.lexists(path):
        raise PathNotFoundError(path)

    try:
        if path.is_dir() and not path.is_symlink():
            count = _count_tree(path)
            shutil.rmtree(path)
        else:
            path.unlink()
            count = 1
    except (OSError, ValueError) as e:
        raise FsOperationError("delete", path, _reason(e))

    logger.debug("Removed %d entries under %s", count, path)
    return count


def copy_path(src: Path, dst: Path) -> Path:
    """Copy a file or directory tree, overwriting existing destinations.

    Symbolic links are followed: the content of their targets is copied.

    Args:
        src: Source file or directory.
        dst: Destination path (not a parent directory to copy into).

    Returns:
        The destination path.

    Raises:
        PathNotFoundError: If src does not exist.
        FsOperationError: If copying fails.
    """
    if not src.exists():
        raise PathNotFoundError(src, f"Source does not exist: {src}")

    try:
        if src.is_dir():
            shutil.copytree(src, dst, dirs_exist_ok=True)
        else:
            shutil.copyfile(src, dst)
            shutil.copymode(src, dst)
    except (OSError, ValueError) as e:
        raise FsOperationError("copy", src, _reason(e))

    logger.debug("Copied %s to %s", src, dst)
    return dst


def move_path(src: Path, dst: Path) -> Path:
    """Rename src to dst in a single call.

    There is no copy-and-delete fallback, so a failed move (for example
    across devices) leaves both paths untouched.

    Raises:
        FsOperationError: With the OS reason, if the rename fails.
    """
    try:
        os.rename(src, dst)
    except (OSError, ValueError) as e:
        raise FsOperationError("move", src, _reason(e))

    logger.debug("Moved %s to %s", src, dst)
    return dst


# =============================================================================
# Search
# =============================================================================


def _children(directory: str) -> Iterator[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.debug("Skipping %s: %s", directory, e)
        return iter(())
    return iter(children)


def _descend_into(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def search_by_name(root: Path, needle: str) -> Iterator[Path]:
    """Lazily find descendants of root whose name contains needle.

    The walk is depth-first in name order, does not follow symbolic links
    to directories, and silently skips directories it cannot read.

    Args:
        root: Directory to search under (not itself a candidate).
        needle: Case-sensitive literal substring to look for in names.

    Yields:
        Path of each matching entry, as it is found.

    Raises:
        EmptyInputError: If needle is empty.
    """
    if needle == "":
        raise EmptyInputError()

    stack = [_children(str(root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        if needle in entry.name:
            yield Path(entry.path)

        if _descend_into(entry):
            stack.append(_children(entry.path))
