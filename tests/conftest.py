from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from branchlib import git
from branchlib.git import GitError
from branchlib.output import Color


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.setattr(Color, "enabled", False)


def make_repo(base: Path, name: str, *, marker: bool = True) -> Path:
    """Create a folder, with an empty .git directory when marker is set."""
    path = base / name
    path.mkdir()
    if marker:
        (path / ".git").mkdir()
    return path


class FakeGit:
    """Stands in for the git wrappers, keyed by repository folder name."""

    def __init__(self) -> None:
        self.branches: dict[str, object] = {}
        self.current: dict[str, object] = {}
        self.calls: list[tuple[str, str]] = []

    def set(self, name: str, *, branches=None, current=None) -> None:
        if branches is not None:
            self.branches[name] = branches
        if current is not None:
            self.current[name] = current

    def _answer(self, table: dict[str, object], repo: Path, args: list[str]) -> str:
        value = table.get(repo.name, "")
        if isinstance(value, BaseException):
            raise value
        if value == "fail":
            raise GitError(args, repo, 128, "fatal: simulated failure")
        if isinstance(value, list):
            return "\n".join(value) + "\n"
        return f"{value}\n"

    def list_local_branches(self, repo: Path) -> str:
        self.calls.append(("branches", repo.name))
        return self._answer(self.branches, repo, ["branch"])

    def get_current_branch(self, repo: Path) -> str:
        self.calls.append(("current", repo.name))
        return self._answer(self.current, repo, ["rev-parse"])


@pytest.fixture
def fake_git(monkeypatch) -> FakeGit:
    fake = FakeGit()
    monkeypatch.setattr(git, "list_local_branches", fake.list_local_branches)
    monkeypatch.setattr(git, "get_current_branch", fake.get_current_branch)
    return fake


def run_git_cmd(cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        text=True,
        capture_output=True,
        check=False,
    )
    if result.returncode != 0:
        raise RuntimeError(result.stderr or result.stdout)
    return result


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def init_repo(base: Path, name: str, branch: str = "main") -> Path:
    """Create a real repository with one commit on branch."""
    repo = base / name
    repo.mkdir()
    run_git_cmd(repo, "init", "-q")
    run_git_cmd(repo, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    run_git_cmd(repo, "config", "user.email", "dev@example.com")
    run_git_cmd(repo, "config", "user.name", "Dev")
    run_git_cmd(repo, "config", "commit.gpgsign", "false")
    (repo / "README").write_text("readme", encoding="utf-8")
    run_git_cmd(repo, "add", "README")
    run_git_cmd(repo, "commit", "-q", "-m", "init")
    return repo
