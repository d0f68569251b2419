"""File categories and the extension lookup tables behind them."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Category(Enum):
    """Kinds of files the organizer sorts into folders."""
    IMAGE = "image"
    DOCUMENT = "document"
    MUSIC = "music"
    VIDEO = "video"
    UNKNOWN = "unknown"


IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "bmp", "webp", "tiff", "tif")
DOCUMENT_EXTENSIONS = (
    "txt", "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "md", "odt", "rtf",
)
MUSIC_EXTENSIONS = ("mp3", "wav", "ogg", "flac", "aac", "m4a")
VIDEO_EXTENSIONS = ("mp4", "mkv", "avi", "mov", "wmv", "flv", "mpeg")


def _build_category_map() -> Mapping[str, Category]:
    mapping = {}
    for category, extensions in (
        (Category.IMAGE, IMAGE_EXTENSIONS),
        (Category.DOCUMENT, DOCUMENT_EXTENSIONS),
        (Category.MUSIC, MUSIC_EXTENSIONS),
        (Category.VIDEO, VIDEO_EXTENSIONS),
    ):
        for ext in extensions:
            if ext in mapping:
                raise ValueError(f"Extension {ext!r} listed for both {mapping[ext]} and {category}")
            mapping[ext] = category
    return MappingProxyType(mapping)


# Lowercase extension (no leading dot) -> category
CATEGORY_MAP: Mapping[str, Category] = _build_category_map()

FOLDER_NAMES: Mapping[Category, str] = MappingProxyType({
    Category.IMAGE: "images",
    Category.DOCUMENT: "documents",
    Category.MUSIC: "music",
    Category.VIDEO: "videos",
    Category.UNKNOWN: "others",
})

# Adding a category means extending both tables
_missing = set(Category) - set(FOLDER_NAMES)
if _missing:
    raise RuntimeError(f"No folder name for categories: {sorted(c.name for c in _missing)}")
del _missing


def category_of(extension: str, mapping: Mapping[str, Category] = CATEGORY_MAP) -> Category:
    """Look up the category for an extension.

    The comparison is case-insensitive. The leading dot must already be
    stripped. Unlisted and empty extensions are ``Category.UNKNOWN``.
    """
    if not extension:
        return Category.UNKNOWN
    return mapping.get(extension.lower(), Category.UNKNOWN)


def folder_name_for(category: Category) -> str:
    """Get the folder name under ``organized/`` for a category."""
    return FOLDER_NAMES[category]
