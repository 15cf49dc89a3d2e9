"""Domain models for branch reporting."""

# ============================================================
# Imports
# ============================================================

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator


# ============================================================
# Constants
# ============================================================

CURRENT_MARKER = " (current)"
ERROR_CELL = "Error"


# ============================================================
# Enums
# ============================================================

class ResultStatus(Enum):
    """Outcome of collecting branches for one repository."""

    OK = "ok"
    NOT_FOUND = "not found"
    ERROR = "error"


# ============================================================
# Result Models
# ============================================================

@dataclass(frozen=True)
class BranchResult:
    """
    Branches collected for a repository.

    Attributes:
        status: Whether branches were found, none were found, or git failed
        branches: Branch names in display order (empty unless status is OK)
        message: Failure detail for ERROR results
    """

    status: ResultStatus
    branches: tuple[str, ...] = ()
    message: str = ""

    @classmethod
    def ok(cls, branches: Iterable[str]) -> 'BranchResult':
        """Create a result from branch names; an empty list becomes NOT_FOUND."""
        names = tuple(branches)
        if not names:
            return cls.not_found()
        return cls(status=ResultStatus.OK, branches=names)

    @classmethod
    def not_found(cls) -> 'BranchResult':
        return cls(status=ResultStatus.NOT_FOUND)

    @classmethod
    def error(cls, message: str) -> 'BranchResult':
        return cls(status=ResultStatus.ERROR, message=message)

    @property
    def is_error(self) -> bool:
        return self.status is ResultStatus.ERROR

    @property
    def is_empty(self) -> bool:
        return self.status is ResultStatus.NOT_FOUND

    def cells(self) -> tuple[str, ...]:
        """Branch strings as displayed: the names, a lone "Error", or nothing."""
        if self.is_error:
            return (ERROR_CELL,)
        return self.branches


@dataclass(frozen=True)
class RepositoryEntry:
    """
    A repository and the branches collected for it.

    Attributes:
        name: Folder name, unique within a run
        path: Absolute path to the repository folder
        result: Collected branches
    """

    name: str
    path: Path
    result: BranchResult


# ============================================================
# Collection
# ============================================================

@dataclass
class ResultCollection:
    """
    Repository entries keyed by folder name.

    Each repository is added once; iteration is always sorted by name,
    regardless of the order repositories were collected in.
    """

    _entries: dict[str, RepositoryEntry] = field(default_factory=dict)

    def add(self, entry: RepositoryEntry) -> None:
        if entry.name in self._entries:
            raise ValueError(f"Repository already collected: {entry.name}")
        self._entries[entry.name] = entry

    def get(self, name: str) -> RepositoryEntry | None:
        return self._entries.get(name)

    def entries(self) -> list[RepositoryEntry]:
        return [self._entries[name] for name in sorted(self._entries)]

    def names(self) -> list[str]:
        return sorted(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[RepositoryEntry]:
        return iter(self.entries())
