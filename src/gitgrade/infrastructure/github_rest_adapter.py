"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import base64
import binascii
import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from gitgrade.domain.entities import (
    CommitRecord,
    DirectoryEntry,
    EntryKind,
    RepositoryMetadata,
)
from gitgrade.domain.exceptions import (
    ApiError,
    FetchError,
    GitGradeError,
    NotFoundError,
    RateLimitError,
)
from gitgrade.domain.value_objects import GitHubUrl

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


def parse_timestamp(raw: str | None) -> datetime | None:
    """Parse a GitHub ISO-8601 timestamp (``2024-01-31T10:00:00Z``)."""
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API (unauthenticated)."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        base_url: str = _GITHUB_API,
        user_agent: str = "GitGrade-App",
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent,
        }

    async def fetch_metadata(self, url: GitHubUrl) -> RepositoryMetadata:
        """GET /repos/{owner}/{repo} → RepositoryMetadata."""
        data = await self._api_get(f"/repos/{url.owner}/{url.repo}")
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected repository payload for {url.full_name}")
        return RepositoryMetadata(
            name=data.get("name") or url.repo,
            full_name=data.get("full_name") or url.full_name,
            html_url=data.get("html_url") or f"https://github.com/{url.full_name}",
            description=data.get("description"),
            language=data.get("language"),
            size_kb=data.get("size") or 0,
            stars=data.get("stargazers_count") or 0,
            forks=data.get("forks_count") or 0,
            open_issues=data.get("open_issues_count") or 0,
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
            pushed_at=parse_timestamp(data.get("pushed_at")),
            has_license=bool(data.get("license")),
            topics=tuple(data.get("topics") or ()),
            has_issues=bool(data.get("has_issues")),
            has_wiki=bool(data.get("has_wiki")),
            has_pages=bool(data.get("has_pages")),
            archived=bool(data.get("archived")),
            disabled=bool(data.get("disabled")),
            default_branch=data.get("default_branch") or "main",
        )

    async def fetch_commits(self, url: GitHubUrl, count: int = 30) -> list[CommitRecord]:
        """GET /repos/{owner}/{repo}/commits?per_page=N → [CommitRecord]."""
        data = await self._api_get(
            f"/repos/{url.owner}/{url.repo}/commits",
            params={"per_page": str(count)},
        )
        if not isinstance(data, list):
            raise FetchError(f"Unexpected commit payload for {url.full_name}")

        commits: list[CommitRecord] = []
        for item in data[:count]:
            commit = item.get("commit") or {}
            author = commit.get("author") or {}
            commits.append(
                CommitRecord(
                    message=commit.get("message") or "",
                    authored_at=parse_timestamp(author.get("date")),
                )
            )
        return commits

    async def fetch_root_listing(self, url: GitHubUrl) -> list[DirectoryEntry]:
        """GET /repos/{owner}/{repo}/contents/ → [DirectoryEntry], ``[]`` on any failure."""
        try:
            data = await self._api_get(f"/repos/{url.owner}/{url.repo}/contents/")
        except GitGradeError:
            logger.debug("Failed to fetch root listing for %s — returning empty", url.full_name)
            return []

        if not isinstance(data, list):
            return []

        return [
            DirectoryEntry(
                name=item.get("name", ""),
                path=item.get("path", item.get("name", "")),
                kind=EntryKind.DIRECTORY if item.get("type") == "dir" else EntryKind.FILE,
                size=item.get("size"),
            )
            for item in data
            if isinstance(item, dict)
        ]

    async def fetch_file_content(self, url: GitHubUrl, path: str) -> str:
        """GET /repos/{owner}/{repo}/contents/{path} → decoded text, ``""`` on any failure."""
        try:
            data = await self._api_get(f"/repos/{url.owner}/{url.repo}/contents/{path}")
        except GitGradeError:
            logger.debug("Failed to fetch %s from %s — returning empty", path, url.full_name)
            return ""

        if not isinstance(data, dict) or not data.get("content"):
            return ""

        try:
            raw = base64.b64decode(data["content"])
        except (binascii.Error, ValueError):
            logger.debug("Undecodable content for %s in %s", path, url.full_name)
            return ""
        return raw.decode("utf-8", errors="replace")

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Perform a GitHub API GET request with error translation; return decoded JSON."""
        url = f"{self._base_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise FetchError(f"Network error fetching {url}: {exc}") from exc

        if resp.is_success:
            try:
                return resp.json()
            except ValueError as exc:
                raise FetchError(f"Invalid JSON from {url}: {exc}") from exc

        if resp.status_code == 404:
            raise NotFoundError(
                "Repository not found. Please check the URL and ensure the repository is public."
            )

        if resp.status_code == 403:
            reset_str = _format_reset(resp.headers.get("x-ratelimit-reset", ""))
            if reset_str:
                raise RateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}."
                )
            raise RateLimitError("GitHub API rate limit exceeded. Please try again later.")

        raise ApiError(resp.status_code, resp.reason_phrase)


def _format_reset(reset_raw: str) -> str | None:
    if not reset_raw:
        return None
    try:
        return datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S UTC"
        )
    except (ValueError, OSError):
        return None
