"""Custom exceptions for file sorter."""

from pathlib import Path
from typing import Optional


class FileSorterError(Exception):
    """Base exception for file sorter errors."""
    pass


class ConfigurationError(FileSorterError):
    """Raised when there's an error in configuration."""
    pass


class DirectoryListError(FileSorterError):
    """Raised when the source directory cannot be opened or iterated.

    This is the only error that aborts a whole run.
    """

    def __init__(self, directory: Path, cause: OSError):
        self.directory = directory
        self.cause = cause
        super().__init__(f"Cannot list {directory}: {describe_os_error(cause)}")

    @property
    def reason(self) -> str:
        return describe_os_error(self.cause)


class RelocateError(FileSorterError):
    """Base class for per-file relocation failures."""

    reason = "relocation failed"

    def __init__(self, source: Path, target: Path, cause: Optional[OSError] = None):
        self.source = source
        self.target = target
        self.cause = cause
        message = f"{self.reason}: {target}"
        if cause is not None:
            message = f"{message} ({describe_os_error(cause)})"
        super().__init__(message)


class FolderCreateError(RelocateError):
    """Raised when the category folder cannot be created."""
    reason = "could not create target folder"


class AlreadyExistsError(RelocateError):
    """Raised when the target path is already taken. Nothing is overwritten."""
    reason = "target file already exists"


class CopyError(RelocateError):
    """Raised when the copy fallback fails. The original stays in place."""
    reason = "copy to target failed"


class CleanupError(RelocateError):
    """Raised when the copy succeeded but the original could not be deleted."""
    reason = "copied but could not delete original"


def describe_os_error(error: OSError) -> str:
    """Short human readable reason for an OSError."""
    if isinstance(error, FileNotFoundError):
        return "not found"
    if isinstance(error, PermissionError):
        return "permission denied"
    if isinstance(error, NotADirectoryError):
        return "not a directory"
    if isinstance(error, FileExistsError):
        return "a file is in the way"
    return error.strerror or str(error)
