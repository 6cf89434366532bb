import asyncio
import logging
from typing import Optional

from branchreview.analysis import analyze
from branchreview.config import settings
from branchreview.diff_parser import parse_summary
from branchreview.git_service import GitService
from branchreview.models import AnalysisResult, AnalyzeBranchRequest
from branchreview.ollama_client import OllamaClient

logger = logging.getLogger(__name__)


class BranchReviewService:
    """Runs git and the model for a branch pair and feeds the output through the analysis pipeline."""

    def __init__(
        self,
        git_service: Optional[GitService] = None,
        ollama_client: Optional[OllamaClient] = None,
        excerpt_limit: Optional[int] = None,
    ) -> None:
        self.git_service = git_service
        self.ollama_client = ollama_client
        self.excerpt_limit = settings.excerpt_limit if excerpt_limit is None else excerpt_limit

    async def analyze_branch(self, request: AnalyzeBranchRequest) -> AnalysisResult:
        """Review feature_branch against main_branch.

        Raises ValueError when the repository or either branch is missing and
        GitCommandError when either diff cannot be produced. Model failures
        are reported in the analysis text instead.
        """
        if not (request.project_path and request.main_branch and request.feature_branch):
            raise ValueError("project_path, main_branch and feature_branch are required")
        git_service = self.git_service or GitService(request.project_path)
        ollama_client = self.ollama_client or OllamaClient(
            base_url=request.ollama_url, model=request.ollama_model
        )
        excludes = request.excluded_folders

        logger.info(
            "Analyzing %s...%s in %s", request.main_branch, request.feature_branch,
            git_service.repo_path,
        )
        stat_text, diff_text = await asyncio.gather(
            asyncio.to_thread(
                git_service.get_stat, request.main_branch, request.feature_branch, excludes
            ),
            asyncio.to_thread(
                git_service.get_diff, request.main_branch, request.feature_branch, excludes
            ),
        )

        review = await ollama_client.review(parse_summary(stat_text), diff_text)
        result = analyze(stat_text, diff_text, review.text, excerpt_limit=self.excerpt_limit)
        if not review.available:
            # Fallback messages are not model output and are not classified.
            result = result.model_copy(update={"errors_warnings": []})

        logger.info(
            "Analysis finished: %d files, %d findings",
            len(result.file_changes), len(result.errors_warnings),
        )
        return result
