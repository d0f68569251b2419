"""Extension based classification of files."""

from pathlib import Path
from typing import Mapping, Union

from ..models.category import CATEGORY_MAP, Category, category_of


def extension_of(path: Union[str, Path]) -> str:
    """Get the text after the last dot of the file name, or ``""``.

    Dot-files such as ``.bashrc`` have no extension.
    """
    return Path(path).suffix[1:]


def classify(path: Union[str, Path], mapping: Mapping[str, Category] = CATEGORY_MAP) -> Category:
    """Classify a file by its extension. Never fails."""
    return category_of(extension_of(path), mapping)


class FileClassifier:
    """Classify files against a fixed extension table."""

    def __init__(self, mapping: Mapping[str, Category] = CATEGORY_MAP):
        self.mapping = mapping

    def classify(self, path: Path) -> Category:
        return classify(path, self.mapping)
