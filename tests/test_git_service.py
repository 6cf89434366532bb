"""Tests for GitService against a real repository."""

from pathlib import Path

import pytest

from branchreview.diff_parser import parse_details, parse_summary
from branchreview.errors import DiffTooLargeError, GitCommandError
from branchreview.git_service import GitService


class TestGitService:
    """Test branch diffs produced by GitService."""

    def test_branch_diff(self, git_repo_with_branches: Path) -> None:
        service = GitService(str(git_repo_with_branches))
        branch_diff = service.get_branch_diff("main", "feature")

        summary = parse_summary(branch_diff.stat_text)
        assert summary.files_changed == 3
        assert summary.insertions == 3
        assert summary.deletions == 1

        files = {f.path: f for f in parse_details(branch_diff.diff_text)}
        assert set(files) == {"app.py", "notes.txt", "vendor/lib.js"}
        assert files["app.py"].insertions == 2
        assert files["notes.txt"].deletions == 1

    def test_excluded_folders(self, git_repo_with_branches: Path) -> None:
        service = GitService(str(git_repo_with_branches))
        branch_diff = service.get_branch_diff("main", "feature", excluded_folders=["vendor"])

        assert parse_summary(branch_diff.stat_text).files_changed == 2
        paths = [f.path for f in parse_details(branch_diff.diff_text)]
        assert "vendor/lib.js" not in paths

    def test_exclude_command_shape(self) -> None:
        service = GitService("/repo")
        cmd = service._diff_command("main", "feature", ["dist/", "node_modules"], stat=True)
        assert cmd == [
            "git", "-C", "/repo", "diff", "main...feature", "--stat",
            "--", ".", ":!:dist/**", ":!:node_modules/**",
        ]

    def test_blank_excludes_are_dropped(self) -> None:
        service = GitService("/repo")
        cmd = service._diff_command("main", "feature", ["", "/", " build/ "])
        assert cmd == ["git", "-C", "/repo", "diff", "main...feature", "--", ".", ":!:build/**"]

    def test_only_blank_excludes_add_no_pathspec(self) -> None:
        service = GitService("/repo")
        cmd = service._diff_command("main", "feature", ["/", "  "])
        assert cmd == ["git", "-C", "/repo", "diff", "main...feature"]

    def test_same_branch_is_empty(self, git_repo_with_branches: Path) -> None:
        service = GitService(str(git_repo_with_branches))
        branch_diff = service.get_branch_diff("main", "main")
        assert branch_diff.stat_text == ""
        assert branch_diff.diff_text == ""

    def test_unknown_branch_raises(self, git_repo_with_branches: Path) -> None:
        service = GitService(str(git_repo_with_branches))
        with pytest.raises(GitCommandError):
            service.get_branch_diff("main", "does-not-exist")

    def test_not_a_repository_raises(self, tmp_path: Path) -> None:
        service = GitService(str(tmp_path / "missing"))
        with pytest.raises(GitCommandError):
            service.get_stat("main", "feature")

    def test_diff_size_limit(self, git_repo_with_branches: Path) -> None:
        service = GitService(str(git_repo_with_branches), max_diff_size=10)
        with pytest.raises(DiffTooLargeError):
            service.get_diff("main", "feature")
