"""Outcome models for a single relocation and for a whole run."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .category import Category
from ..exceptions import AlreadyExistsError, CleanupError, RelocateError


class RelocationMethod(Enum):
    """How a file reached its target."""
    RENAME = "rename"
    COPY = "copy"


class OutcomeStatus(Enum):
    """Terminal state of one file in a run."""
    MOVED = "moved"
    SKIPPED = "skipped"
    DUPLICATED = "duplicated"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class Relocation:
    """A successful relocation."""
    source: Path
    target: Path
    method: RelocationMethod

    @property
    def used_fallback(self) -> bool:
        return self.method is RelocationMethod.COPY


@dataclass(slots=True)
class FileOutcome:
    """What happened to one file during a run."""

    path: Path
    category: Category
    target_folder: Path
    status: OutcomeStatus
    method: Optional[RelocationMethod] = None
    error: Optional[RelocateError] = None

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def target_path(self) -> Path:
        return self.target_folder / self.path.name

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.MOVED

    @classmethod
    def moved(cls, path: Path, category: Category, target_folder: Path,
              relocation: Relocation) -> "FileOutcome":
        return cls(path, category, target_folder, OutcomeStatus.MOVED, method=relocation.method)

    @classmethod
    def from_error(cls, path: Path, category: Category, target_folder: Path,
                   error: RelocateError) -> "FileOutcome":
        """Build an outcome from a relocation error.

        A collision is a skip and a failed delete after a good copy leaves a
        duplicate; both are kept apart from plain failures.
        """
        if isinstance(error, AlreadyExistsError):
            status = OutcomeStatus.SKIPPED
        elif isinstance(error, CleanupError):
            status = OutcomeStatus.DUPLICATED
        else:
            status = OutcomeStatus.FAILED
        method = RelocationMethod.COPY if isinstance(error, CleanupError) else None
        return cls(path, category, target_folder, status, method=method, error=error)


@dataclass
class RunSummary:
    """Aggregated counts for a run."""

    total: int = 0
    by_status: Dict[OutcomeStatus, int] = field(default_factory=dict)
    by_category: Dict[Category, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[FileOutcome]) -> "RunSummary":
        outcomes = list(outcomes)
        statuses = Counter(o.status for o in outcomes)
        categories = Counter(o.category for o in outcomes if o.succeeded)
        return cls(
            total=len(outcomes),
            by_status={status: statuses.get(status, 0) for status in OutcomeStatus},
            by_category={category: categories.get(category, 0) for category in Category},
            errors=[f"{o.filename}: {o.error}" for o in outcomes if o.error is not None],
        )

    @property
    def moved(self) -> int:
        return self.by_status.get(OutcomeStatus.MOVED, 0)

    @property
    def skipped(self) -> int:
        return self.by_status.get(OutcomeStatus.SKIPPED, 0)

    @property
    def duplicated(self) -> int:
        return self.by_status.get(OutcomeStatus.DUPLICATED, 0)

    @property
    def failed(self) -> int:
        return self.by_status.get(OutcomeStatus.FAILED, 0)
