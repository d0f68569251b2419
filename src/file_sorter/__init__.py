"""File Sorter

Sort the files of a directory into category folders by extension.
"""

__version__ = "0.1.0"

from .core.organizer import FileOrganizer, OrganizeReporter, organize
from .core.mover import FileRelocator
from .core.classifier import classify
from .core.lister import list_files
from .models.category import Category, category_of, folder_name_for
from .models.outcome import FileOutcome, OutcomeStatus, RunSummary
from .exceptions import (
    FileSorterError,
    ConfigurationError,
    DirectoryListError,
    RelocateError,
    FolderCreateError,
    AlreadyExistsError,
    CopyError,
    CleanupError,
)

__all__ = [
    # Core components
    "FileOrganizer",
    "FileRelocator",
    "OrganizeReporter",

    # Operations
    "organize",
    "classify",
    "list_files",
    "category_of",
    "folder_name_for",

    # Types and enums
    "Category",
    "FileOutcome",
    "OutcomeStatus",
    "RunSummary",

    # Errors
    "FileSorterError",
    "ConfigurationError",
    "DirectoryListError",
    "RelocateError",
    "FolderCreateError",
    "AlreadyExistsError",
    "CopyError",
    "CleanupError",
]
