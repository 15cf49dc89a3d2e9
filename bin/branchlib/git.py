"""Git command wrappers."""

# ============================================================
# Imports
# ============================================================

import subprocess
from pathlib import Path
from typing import Sequence


# ============================================================
# Errors
# ============================================================

class GitError(Exception):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, args: Sequence[str], repo: Path, returncode: int, stderr: str):
        self.command = ["git", *args]
        self.repo = repo
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr or f"exit status {returncode}"
        super().__init__(f"{' '.join(self.command)} failed in {repo}: {detail}")


# ============================================================
# Git Operations
# ============================================================

def run_git(args: Sequence[str], repo: Path) -> str:
    """
    Run a git command inside repo and return its stdout.

    The repository is passed as the subprocess working directory, so the
    caller's working directory is left untouched.

    Raises:
        GitError: git exited with a non-zero status
        OSError: git could not be started
    """
    result = subprocess.run(
        ['git', *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        stderr = result.stderr.strip() or result.stdout.strip()
        raise GitError(args, repo, result.returncode, stderr)
    return result.stdout


def list_local_branches(repo: Path) -> str:
    """Return local branch short names, one per line."""
    return run_git(['branch', '--format=%(refname:short)'], repo)


def get_current_branch(repo: Path) -> str:
    """Return the checked-out branch name, or "HEAD" when detached."""
    return run_git(['rev-parse', '--abbrev-ref', 'HEAD'], repo)
