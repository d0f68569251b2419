"""Data models for file sorter."""

from .category import Category, CATEGORY_MAP, FOLDER_NAMES, category_of, folder_name_for
from .config import Config, load_config, save_config, resolve_config
from .outcome import FileOutcome, OutcomeStatus, Relocation, RelocationMethod, RunSummary

__all__ = [
    'Category',
    'CATEGORY_MAP',
    'FOLDER_NAMES',
    'category_of',
    'folder_name_for',
    'Config',
    'load_config',
    'save_config',
    'resolve_config',
    'FileOutcome',
    'OutcomeStatus',
    'Relocation',
    'RelocationMethod',
    'RunSummary',
]
