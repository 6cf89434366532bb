import logging

from fastapi import APIRouter, HTTPException

from branchreview.analysis import analyze
from branchreview.config import settings
from branchreview.errors import GitCommandError
from branchreview.models import (
    AnalysisResult,
    AnalyzeBranchRequest,
    AnalyzeBranchResponse,
    AnalyzeTextRequest,
)
from branchreview.review_service import BranchReviewService

logger = logging.getLogger(__name__)


def create_api_router(review_service: BranchReviewService | None = None) -> APIRouter:
    """Create the API router for branch analysis."""
    router = APIRouter()
    service = review_service or BranchReviewService()

    @router.get("/api/health")
    async def health() -> dict:
        """Liveness check."""
        return {"status": "ok"}

    @router.post("/api/analyze-branch")
    async def analyze_branch(request: AnalyzeBranchRequest) -> AnalyzeBranchResponse:
        """Diff two branches of a local repository and review the changes."""
        if not all(
            (value or "").strip()
            for value in (request.project_path, request.main_branch, request.feature_branch)
        ):
            raise HTTPException(
                status_code=400,
                detail="Missing required fields: project_path, main_branch, feature_branch",
            )

        try:
            result = await service.analyze_branch(request)
        except GitCommandError as e:
            raise HTTPException(status_code=400, detail=f"Analysis failed: {e}")

        return AnalyzeBranchResponse(**result.model_dump(), status="completed")

    @router.post("/api/analyze")
    async def analyze_text(request: AnalyzeTextRequest) -> AnalysisResult:
        """Analyse already captured `git diff --stat`, `git diff` and review output."""
        return analyze(
            request.stat_text,
            request.diff_text,
            request.ai_analysis,
            excerpt_limit=settings.excerpt_limit,
        )

    return router
