"""Branch reporting library for folders of git repositories."""

from .collector import collect_repository, collect_results
from .config import Config
from .discovery import find_repositories, is_repository, list_subdirectories
from .git import GitError
from .models import (
    BranchResult,
    RepositoryEntry,
    ResultCollection,
    ResultStatus,
)
from .render import render_results

__all__ = [
    # Configuration
    'Config',
    # Domain models
    'BranchResult',
    'RepositoryEntry',
    'ResultCollection',
    'ResultStatus',
    # Errors
    'GitError',
    # Discovery
    'find_repositories',
    'is_repository',
    'list_subdirectories',
    # Collection and rendering
    'collect_repository',
    'collect_results',
    'render_results',
]
