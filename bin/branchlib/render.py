"""Result table rendering."""

# ============================================================
# Imports
# ============================================================

from .config import Config
from .models import RepositoryEntry, ResultCollection, ResultStatus


# ============================================================
# Configuration
# ============================================================

REPO_HEADER = "Repo"
BRANCH_HEADER = "Current Branch"
NO_BRANCHES = "No branches found"
ERROR_RETRIEVING = "Error retrieving branch"


# ============================================================
# Entry Point
# ============================================================

def render_results(results: ResultCollection, config: Config) -> list[str]:
    """Render the collected results as output lines for the configured mode."""
    if results.is_empty():
        return [f"{NO_BRANCHES}{config.filter_suffix}"]

    if config.show_all:
        return render_all_branches(results)
    return render_current_branches(results, config)


# ============================================================
# Modes
# ============================================================

def render_current_branches(results: ResultCollection, config: Config) -> list[str]:
    """One row per repository with its current branch."""
    rows = [
        [entry.name, current_branch_cell(entry, config)]
        for entry in results.entries()
    ]
    return format_table([REPO_HEADER, BRANCH_HEADER], rows)


def render_all_branches(results: ResultCollection) -> list[str]:
    """A single-column table per repository, separated by blank lines."""
    lines: list[str] = []

    for entry in results.entries():
        cells = entry.result.cells()
        if not cells:
            continue

        lines.extend(format_table([entry.name], [[cell] for cell in cells]))
        lines.append("")

    return lines


def current_branch_cell(entry: RepositoryEntry, config: Config) -> str:
    """Cell text for a repository in current-branch mode."""
    status = entry.result.status
    if status is ResultStatus.ERROR:
        return ERROR_RETRIEVING
    if status is ResultStatus.NOT_FOUND:
        return f"{NO_BRANCHES}{config.filter_suffix}"
    return entry.result.branches[0]


# ============================================================
# Table Formatting
# ============================================================

def format_table(headers: list[str], rows: list[list[str]]) -> list[str]:
    """
    Format rows as a left-aligned text table.

    Example:
        Repo  Current Branch
        ----  --------------
        alpha main
    """
    widths = [len(header) for header in headers]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    def format_row(cells: list[str]) -> str:
        padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
        return " ".join(padded).rstrip()

    lines = [
        format_row(headers),
        format_row(["-" * len(header) for header in headers]),
    ]
    lines.extend(format_row(row) for row in rows)
    return lines
