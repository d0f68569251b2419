"""Core file sorter modules."""

from .classifier import FileClassifier, classify, extension_of
from .lister import list_files
from .mover import FileRelocator
from .organizer import FileOrganizer, OrganizeReporter, organize

__all__ = [
    'FileClassifier',
    'classify',
    'extension_of',
    'list_files',
    'FileRelocator',
    'FileOrganizer',
    'OrganizeReporter',
    'organize',
]
