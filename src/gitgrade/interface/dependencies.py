"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from gitgrade.infrastructure.config import get_settings
from gitgrade.infrastructure.github_rest_adapter import GitHubRestAdapter
from gitgrade.services.analyze_repo import AnalyzeRepoUseCase, SnapshotCache

_http_client: httpx.AsyncClient | None = None
_snapshot_cache: SnapshotCache | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _snapshot_cache  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))
    _snapshot_cache = SnapshotCache(settings.cache_ttl_seconds)


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _snapshot_cache  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _snapshot_cache = None


def get_use_case() -> AnalyzeRepoUseCase:
    """Build the use case with the shared client and cache injected."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    github_adapter = GitHubRestAdapter(
        client=_http_client,
        base_url=settings.github_api_url,
        user_agent=settings.user_agent,
    )
    return AnalyzeRepoUseCase(
        repo_fetcher=github_adapter,
        commit_count=settings.commit_count,
        cache=_snapshot_cache,
    )
