"""filenav: an interactive console file browser.

Navigate a directory tree and list, create, delete, copy, move and search
files from a numbered menu.
"""

__version__ = "0.1.0"

# Export exceptions for easy access
from filenav.exceptions import (
    AlreadyExistsError,
    DirectoryUnreadableError,
    EmptyInputError,
    FileNavError,
    FsOperationError,
    NotADirectoryPathError,
    PathNotFoundError,
)

__all__ = [
    "__version__",
    "FileNavError",
    "EmptyInputError",
    "PathNotFoundError",
    "NotADirectoryPathError",
    "AlreadyExistsError",
    "DirectoryUnreadableError",
    "FsOperationError",
]
