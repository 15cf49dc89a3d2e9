"""Repository discovery in the base directory."""

# ============================================================
# Imports
# ============================================================

import os
from pathlib import Path


# ============================================================
# Configuration
# ============================================================

GIT_MARKER = ".git"


# ============================================================
# Discovery
# ============================================================

def list_subdirectories(base_dir: Path) -> list[Path]:
    """
    Return immediate child directories of base_dir.

    Order follows the filesystem; nothing is sorted here. Files are ignored
    and nested directories are not descended into. An unreadable or missing
    base_dir raises OSError.
    """
    with os.scandir(base_dir) as entries:
        return [Path(entry.path) for entry in entries if entry.is_dir()]


def is_repository(path: Path) -> bool:
    """Check for a .git directory directly inside path."""
    return (path / GIT_MARKER).is_dir()


def find_repositories(base_dir: Path) -> list[Path]:
    """Return child directories of base_dir that are git repositories."""
    return [path for path in list_subdirectories(base_dir) if is_repository(path)]
