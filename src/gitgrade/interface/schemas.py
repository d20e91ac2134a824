"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from gitgrade.domain.entities import AnalysisResult


class AnalyzeRequest(BaseModel):
    """Request body for ``POST /analyze``."""

    github_url: str

    @field_validator("github_url")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "github_url must not be empty."
            raise ValueError(msg)
        return stripped


class CategorySchema(BaseModel):
    title: str
    score: int
    description: str
    icon_name: str


class RoadmapItemSchema(BaseModel):
    title: str
    description: str
    priority: str


class RedFlagSchema(BaseModel):
    type: str
    title: str
    description: str


class ChecklistItemSchema(BaseModel):
    label: str
    present: bool


class AnalysisResponse(BaseModel):
    """Successful response from ``POST /analyze``."""

    owner: str
    repo: str
    repo_name: str
    repo_url: str
    score: int
    tier: str
    industry_readiness: str
    summary: str
    categories: list[CategorySchema]
    roadmap: list[RoadmapItemSchema]
    red_flags: list[RedFlagSchema]
    readme_checklist: list[ChecklistItemSchema]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> AnalysisResponse:
        return cls(
            owner=result.owner,
            repo=result.repo,
            repo_name=result.repo_name,
            repo_url=result.repo_url,
            score=result.score,
            tier=result.tier.value,
            industry_readiness=result.industry_readiness.value,
            summary=result.summary,
            categories=[
                CategorySchema(
                    title=c.title,
                    score=c.score,
                    description=c.description,
                    icon_name=c.icon,
                )
                for c in result.categories
            ],
            roadmap=[
                RoadmapItemSchema(
                    title=item.title,
                    description=item.description,
                    priority=item.priority.value,
                )
                for item in result.roadmap
            ],
            red_flags=[
                RedFlagSchema(type=flag.kind.value, title=flag.title, description=flag.description)
                for flag in result.red_flags
            ],
            readme_checklist=[
                ChecklistItemSchema(label=item.label, present=item.present)
                for item in result.readme_checklist
            ],
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
