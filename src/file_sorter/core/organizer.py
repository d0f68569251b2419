"""Main orchestration logic for sorting a directory."""

import logging
from pathlib import Path
from typing import List, Optional

from ..models.category import Category, folder_name_for
from ..models.config import OUTPUT_DIRNAME
from ..models.outcome import FileOutcome, OutcomeStatus, RunSummary
from .classifier import FileClassifier
from .lister import list_files
from .mover import FileRelocator

logger = logging.getLogger(__name__)


class OrganizeReporter:
    """Receives per-file notifications during a run. Does nothing by default."""

    def file_started(self, path: Path, target_folder: Path) -> None:
        pass

    def file_finished(self, outcome: FileOutcome) -> None:
        pass

    def run_finished(self, summary: RunSummary) -> None:
        pass


class FileOrganizer:
    """Sort the top-level files of a directory into category folders."""

    def __init__(
        self,
        classifier: Optional[FileClassifier] = None,
        relocator: Optional[FileRelocator] = None,
        reporter: Optional[OrganizeReporter] = None,
    ):
        self.classifier = classifier or FileClassifier()
        self.relocator = relocator or FileRelocator()
        self.reporter = reporter or OrganizeReporter()

    @staticmethod
    def target_folder_for(directory: Path, category: Category) -> Path:
        """Get ``<directory>/organized/<folder>`` for a category."""
        return directory / OUTPUT_DIRNAME / folder_name_for(category)

    def organize(self, directory: Path) -> List[FileOutcome]:
        """Organize every file directly inside ``directory``.

        Raises:
            DirectoryListError: If the directory cannot be listed. No file
                has been touched when this happens.
        """
        directory = Path(directory)
        files = list_files(directory)

        outcomes = []
        for file_path in files:
            outcomes.append(self.organize_file(directory, file_path))

        summary = RunSummary.from_outcomes(outcomes)
        logger.info(
            f"Processed {summary.total} files in {directory}: {summary.moved} moved, "
            f"{summary.skipped} skipped, {summary.duplicated} duplicated, {summary.failed} failed"
        )
        self.reporter.run_finished(summary)
        return outcomes

    def organize_file(self, directory: Path, file_path: Path) -> FileOutcome:
        """Classify and relocate one file. Never raises for per-file errors."""
        category = self.classifier.classify(file_path)
        target_folder = self.target_folder_for(directory, category)

        logger.info(f"Moving {file_path.name} to {target_folder}")
        self.reporter.file_started(file_path, target_folder)

        result = self.relocator.relocate(file_path, target_folder)
        outcome = result.match(
            success=lambda relocation: FileOutcome.moved(file_path, category, target_folder, relocation),
            failure=lambda error: FileOutcome.from_error(file_path, category, target_folder, error),
        )

        if outcome.status is OutcomeStatus.SKIPPED:
            logger.warning(f"Skipped {file_path}: {outcome.error}")
        elif outcome.error is not None:
            logger.error(f"Failed to move file {file_path}: {outcome.error}")

        self.reporter.file_finished(outcome)
        return outcome


def organize(directory: Path, reporter: Optional[OrganizeReporter] = None) -> List[FileOutcome]:
    """Convenience wrapper around :meth:`FileOrganizer.organize`."""
    return FileOrganizer(reporter=reporter).organize(directory)
