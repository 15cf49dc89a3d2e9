"""Branch collection across repositories."""

# ============================================================
# Imports
# ============================================================

from pathlib import Path
from typing import Iterable

from . import git
from .config import Config
from .discovery import is_repository, list_subdirectories
from .git import GitError
from .models import CURRENT_MARKER, BranchResult, RepositoryEntry, ResultCollection
from .output import print_warning


# ============================================================
# Entry Point
# ============================================================

def collect_results(config: Config) -> ResultCollection:
    """
    Collect branches for every repository directly inside the base directory.

    Folders without a .git directory are skipped silently. Repositories whose
    branches are filtered out entirely are left out of the collection.
    """
    results = ResultCollection()

    for path in list_subdirectories(config.base_dir):
        if not is_repository(path):
            continue

        result = collect_repository(path, config)
        if result is not None:
            results.add(RepositoryEntry(name=path.name, path=path, result=result))

    return results


def collect_repository(repo: Path, config: Config) -> BranchResult | None:
    """
    Collect branches for one repository in the configured mode.

    Returns None when the repository should not be reported. Any failure
    is reported as a warning and recorded as an error result so the
    remaining repositories are still processed.
    """
    try:
        if config.show_all:
            return collect_all_branches(repo, config.branch_search)
        return collect_current_branch(repo, config.branch_search)
    except GitError as e:
        print_warning(f"{repo.name}: {e}")
        return BranchResult.error(str(e))
    except Exception as e:
        print_warning(f"{repo.name}: unexpected error: {e}")
        return BranchResult.error(str(e))


# ============================================================
# Collection Modes
# ============================================================

def collect_current_branch(repo: Path, branch_search: str = "") -> BranchResult | None:
    """Collect the checked-out branch, or None when it does not match the filter."""
    name = git.get_current_branch(repo).strip()

    if branch_search and not matches_filter(name, branch_search):
        return None
    return BranchResult.ok([name] if name else [])


def collect_all_branches(repo: Path, branch_search: str = "") -> BranchResult | None:
    """
    Collect all local branches, current branch first and annotated.

    Returns None when no branch matches the filter.
    """
    names = split_branch_names(git.list_local_branches(repo))

    # Without a current branch, keep the names in the order git reported them
    try:
        current = git.get_current_branch(repo).strip()
    except GitError as e:
        print_warning(f"{repo.name}: {e}")
        matching = filter_branches(names, branch_search)
        return BranchResult.ok(matching) if matching else None

    matching = filter_branches(names, branch_search)
    if not matching:
        return None
    return BranchResult.ok(order_branches(matching, current))


# ============================================================
# Branch Helpers
# ============================================================

def split_branch_names(output: str) -> list[str]:
    """Split git output into trimmed, non-empty branch names."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def matches_filter(name: str, branch_search: str) -> bool:
    """Case-insensitive substring match; an empty search matches everything."""
    if not branch_search:
        return True
    return branch_search.casefold() in name.casefold()


def filter_branches(names: Iterable[str], branch_search: str) -> list[str]:
    """Keep names matching the search, preserving order."""
    return [name for name in names if matches_filter(name, branch_search)]


def order_branches(names: Iterable[str], current: str) -> list[str]:
    """
    Sort branch names, moving the current branch to the front.

    The current branch is annotated and appears exactly once. When it is
    not among names the result is simply sorted.
    """
    names = list(names)
    if current not in names:
        return sorted(names)

    others = sorted(name for name in set(names) if name != current)
    return [f"{current}{CURRENT_MARKER}", *others]
