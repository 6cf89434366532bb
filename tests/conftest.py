"""Shared fixtures."""

import subprocess
from pathlib import Path

import pytest


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)


@pytest.fixture
def git_repo_with_branches(tmp_path: Path) -> Path:
    """Create a repository with a `main` branch and a `feature` branch.

    feature adds two lines to app.py, deletes one line from notes.txt and
    adds vendor/lib.js.
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")

    (repo / "app.py").write_text("def main():\n    pass\n")
    (repo / "notes.txt").write_text("one\ntwo\nthree\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "initial")

    _git(repo, "checkout", "-q", "-b", "feature")
    (repo / "app.py").write_text("def main():\n    pass\nprint('hi')\nmain()\n")
    (repo / "notes.txt").write_text("one\nthree\n")
    (repo / "vendor").mkdir()
    (repo / "vendor" / "lib.js").write_text("var x = 1;\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "feature work")
    _git(repo, "checkout", "-q", "main")

    return repo
