"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gitgrade.infrastructure.config import get_settings
from gitgrade.interface.dependencies import shutdown, startup
from gitgrade.interface.error_handlers import register_error_handlers
from gitgrade.interface.routes import router

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"

_DESCRIPTION = """\
Grades a public GitHub repository.

`POST /analyze` returns an overall score with its tier and industry
readiness, nine category scores, a summary, an improvement roadmap,
red flags and a README checklist.
"""


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    await startup()
    settings = get_settings()
    logger.info(
        "GitGrade %s ready: api=%s commits=%d cache_ttl=%ss",
        app.version,
        settings.github_api_url,
        settings.commit_count,
        settings.cache_ttl_seconds,
    )
    try:
        yield
    finally:
        await shutdown()


def create_app() -> FastAPI:
    """Build the GitGrade service: analysis router, error envelope, liveness."""
    app = FastAPI(
        title="GitGrade",
        version=APP_VERSION,
        summary="Quality report cards for public GitHub repositories.",
        description=_DESCRIPTION,
        openapi_tags=[{"name": "analysis", "description": "Repository report cards."}],
        lifespan=_lifespan,
    )
    app.include_router(router)
    register_error_handlers(app)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
