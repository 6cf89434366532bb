import logging
import subprocess
from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence

from branchreview.config import settings
from branchreview.errors import DiffTooLargeError, GitCommandError

logger = logging.getLogger(__name__)


class BranchDiff(NamedTuple):
    """Raw output of the two diff invocations for a branch pair."""
    stat_text: str
    diff_text: str


class GitService:
    """Service for interacting with git repositories."""

    def __init__(
        self, repo_path: Optional[str] = None, max_diff_size: Optional[int] = None
    ) -> None:
        """Initialize with optional repository path."""
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()
        self.max_diff_size = max_diff_size or settings.max_diff_size

    def get_branch_diff(
        self,
        main_branch: str,
        feature_branch: str,
        excluded_folders: Sequence[str] = (),
    ) -> BranchDiff:
        """Get stat and full diff of feature_branch against its merge base with main_branch."""
        return BranchDiff(
            stat_text=self.get_stat(main_branch, feature_branch, excluded_folders),
            diff_text=self.get_diff(main_branch, feature_branch, excluded_folders),
        )

    def get_stat(
        self, main_branch: str, feature_branch: str, excluded_folders: Sequence[str] = ()
    ) -> str:
        cmd = self._diff_command(main_branch, feature_branch, excluded_folders, stat=True)
        return self._run_git_command(cmd)

    def get_diff(
        self, main_branch: str, feature_branch: str, excluded_folders: Sequence[str] = ()
    ) -> str:
        cmd = self._diff_command(main_branch, feature_branch, excluded_folders)
        output = self._run_git_command(cmd)
        size = len(output.encode("utf-8"))
        if size > self.max_diff_size:
            raise DiffTooLargeError(
                f"Diff of {main_branch}...{feature_branch} is {size} bytes, "
                f"limit is {self.max_diff_size}"
            )
        return output

    def _diff_command(
        self,
        main_branch: str,
        feature_branch: str,
        excluded_folders: Sequence[str],
        stat: bool = False,
    ) -> List[str]:
        cmd = ["git", "-C", str(self.repo_path), "diff", f"{main_branch}...{feature_branch}"]
        if stat:
            cmd.append("--stat")
        folders = [f.strip().strip("/") for f in excluded_folders]
        folders = [f for f in folders if f]
        if folders:
            # Pathspec magic: ":!:" excludes everything under the folder
            cmd += ["--", "."] + [f":!:{folder}/**" for folder in folders]
        return cmd

    def _run_git_command(self, cmd: List[str]) -> str:
        """Run a git command and return output."""
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
            return result.stdout
        except FileNotFoundError as e:
            raise GitCommandError(f"git executable not found: {e}") from e
        except subprocess.CalledProcessError as e:
            logger.warning("Git command failed: %s: %s", " ".join(cmd), e.stderr.strip())
            raise GitCommandError(f"Git command failed: {' '.join(cmd)}: {e.stderr}") from e
