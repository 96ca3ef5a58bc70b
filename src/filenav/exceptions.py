"""Custom exceptions for filenav operations."""

from pathlib import Path
from typing import Optional


class FileNavError(Exception):
    """Base exception for filenav operations."""

    pass


class EmptyInputError(FileNavError):
    """Raised when the user submits an empty prompt to abort an operation."""

    def __init__(self, message: str = "No input given"):
        self.message = message
        super().__init__(self.message)


class PathNotFoundError(FileNavError):
    """Raised when a path an operation needs does not exist."""

    def __init__(self, path: Path, message: Optional[str] = None):
        self.path = path
        self.message = message or f"Path does not exist: {path}"
        super().__init__(self.message)


class NotADirectoryPathError(FileNavError):
    """Raised when a path expected to be a directory is not one."""

    def __init__(self, path: Path):
        self.path = path
        self.message = f"Not a directory: {path}"
        super().__init__(self.message)


class AlreadyExistsError(FileNavError):
    """Raised when a create operation targets an existing path."""

    def __init__(self, path: Path):
        self.path = path
        self.message = f"Path already exists: {path}"
        super().__init__(self.message)


class DirectoryUnreadableError(FileNavError):
    """Raised when a directory cannot be opened for listing."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        self.message = f"Cannot read directory {path}: {reason}"
        super().__init__(self.message)


class FsOperationError(FileNavError):
    """Raised when an underlying file-system call fails."""

    def __init__(self, operation: str, path: Path, reason: str):
        self.operation = operation
        self.path = path
        self.reason = reason
        self.message = reason
        super().__init__(f"Failed to {operation} {path}: {reason}")
