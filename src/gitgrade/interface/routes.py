"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gitgrade.interface.dependencies import get_use_case
from gitgrade.interface.schemas import AnalysisResponse, AnalyzeRequest, ErrorResponse
from gitgrade.services.analyze_repo import AnalyzeRepoUseCase

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Repository not found or not public"},
        422: {"model": ErrorResponse, "description": "Invalid GitHub URL"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "GitHub API or network error"},
    },
)
async def analyze(
    body: AnalyzeRequest,
    use_case: AnalyzeRepoUseCase = Depends(get_use_case),
) -> AnalysisResponse:
    """Grade a public GitHub repository."""
    result = await use_case.execute(body.github_url)
    return AnalysisResponse.from_result(result)
