"""Directory listing for the top level of a source directory."""

import logging
import os
from pathlib import Path
from typing import List

from ..exceptions import DirectoryListError

logger = logging.getLogger(__name__)


def list_files(directory: Path) -> List[Path]:
    """List the regular files directly inside ``directory``.

    Subdirectories, symlinks and special files are skipped. Nothing is
    returned if enumeration fails part way through: the error is raised as
    :class:`DirectoryListError` instead.
    """
    directory = Path(directory)
    files = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_file(follow_symlinks=False):
                    files.append(directory / entry.name)
                else:
                    logger.debug(f"Skipping non-file entry {entry.path}")
    except OSError as e:
        raise DirectoryListError(directory, e) from e

    logger.info(f"Found {len(files)} files in {directory}")
    return files
