"""File relocation into category folders."""

import logging
import os
import shutil
from pathlib import Path

from ..domain.result import Result, failure, success
from ..exceptions import (
    AlreadyExistsError,
    CleanupError,
    CopyError,
    FolderCreateError,
    RelocateError,
)
from ..models.outcome import Relocation, RelocationMethod

logger = logging.getLogger(__name__)


class FileRelocator:
    """Move files into a target folder without ever overwriting.

    A move is tried as an atomic rename first. When the rename fails, for
    example across filesystems, the file is copied and the original deleted.
    """

    def relocate(self, file_path: Path, target_folder: Path) -> Result[Relocation, RelocateError]:
        """Move ``file_path`` into ``target_folder``.

        Returns ``Success(Relocation)`` or ``Failure(RelocateError)``. Errors
        are never raised so the caller can carry on with the next file.
        """
        try:
            target_folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create folder {target_folder}: {e}")
            return failure(FolderCreateError(file_path, target_folder, e))

        target_path = target_folder / file_path.name

        # lexists also catches dangling symlinks
        if os.path.lexists(target_path):
            logger.warning(f"File already exists: {target_path}")
            return failure(AlreadyExistsError(file_path, target_path))

        try:
            os.rename(file_path, target_path)
        except OSError as e:
            logger.warning(f"Rename failed, trying copy/delete: {e}")
            return self._copy_and_delete(file_path, target_path)

        logger.info(f"Moved {file_path} to {target_path}")
        return success(Relocation(file_path, target_path, RelocationMethod.RENAME))

    def _copy_and_delete(self, file_path: Path, target_path: Path) -> Result[Relocation, RelocateError]:
        try:
            shutil.copy2(file_path, target_path)
        except OSError as e:
            logger.error(f"Copy of {file_path} to {target_path} failed: {e}")
            self._remove_partial(target_path)
            return failure(CopyError(file_path, target_path, e))

        try:
            os.remove(file_path)
        except OSError as e:
            logger.error(f"Copied to {target_path} but could not delete original {file_path}: {e}")
            return failure(CleanupError(file_path, target_path, e))

        logger.info(f"Copied and deleted original file: {file_path}")
        return success(Relocation(file_path, target_path, RelocationMethod.COPY))

    @staticmethod
    def _remove_partial(target_path: Path) -> None:
        try:
            if os.path.lexists(target_path):
                os.remove(target_path)
        except OSError as e:
            logger.error(f"Could not remove partial copy {target_path}: {e}")
