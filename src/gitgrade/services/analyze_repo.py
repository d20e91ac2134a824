"""Analyze-repository use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`RepoFetcher` port and the pure service modules.  The interface
layer injects the concrete adapter at runtime.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime

from gitgrade.domain.entities import AnalysisResult, RepositorySnapshot, find_readme
from gitgrade.domain.ports.repo_fetcher import RepoFetcher
from gitgrade.domain.value_objects import GitHubUrl
from gitgrade.services.narrative import build_roadmap, build_summary
from gitgrade.services.readme_checklist import build_checklist
from gitgrade.services.red_flags import detect_red_flags
from gitgrade.services.scoring import (
    overall_score,
    readiness_for,
    score_categories,
    tier_for,
    utcnow,
)

logger = logging.getLogger(__name__)


class SnapshotCache:
    """In-memory TTL cache of fetched snapshots keyed by ``owner/repo``.

    Only fetched data is cached; scores are always recomputed against the
    current clock.  A non-positive TTL disables the cache.  Keys are
    case-insensitive, as GitHub owner and repository names are.
    """

    def __init__(self, ttl_seconds: float) -> None:
        self._ttl = ttl_seconds
        self._entries: dict[str, tuple[float, RepositorySnapshot]] = {}

    @property
    def enabled(self) -> bool:
        return self._ttl > 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> RepositorySnapshot | None:
        key = key.lower()
        if not self.enabled or key not in self._entries:
            return None
        ts, snapshot = self._entries[key]
        if time.monotonic() - ts < self._ttl:
            return snapshot
        del self._entries[key]
        return None

    def set(self, key: str, snapshot: RepositorySnapshot) -> None:
        if not self.enabled:
            return
        now = time.monotonic()
        self._prune(now)
        self._entries[key.lower()] = (now, snapshot)

    def clear(self) -> None:
        self._entries.clear()

    def _prune(self, now: float) -> None:
        expired = [k for k, (ts, _) in self._entries.items() if now - ts >= self._ttl]
        for key in expired:
            del self._entries[key]


class AnalyzeRepoUseCase:
    """Orchestrates the full URL → report card pipeline.

    Parameters
    ----------
    repo_fetcher:
        Adapter that can fetch metadata, commits and contents from GitHub.
    commit_count:
        How many recent commits to inspect.
    cache:
        Optional snapshot cache shared between requests.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        commit_count: int = 30,
        cache: SnapshotCache | None = None,
    ) -> None:
        self._fetcher = repo_fetcher
        self._commit_count = commit_count
        self._cache = cache

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(self, github_url: str, now: datetime | None = None) -> AnalysisResult:
        """Fetch, score and narrate one repository."""
        url = GitHubUrl.from_string(github_url)
        logger.info("Analyzing %s", url.full_name)

        snapshot = await self._load_snapshot(url)
        result = self.evaluate(url, snapshot, now or utcnow())

        logger.info(
            "Analyzed %s: score=%d tier=%s",
            url.full_name,
            result.score,
            result.tier.value,
        )
        return result

    # ── Fetching ────────────────────────────────────────────────────────

    async def _load_snapshot(self, url: GitHubUrl) -> RepositorySnapshot:
        if self._cache is not None:
            cached = self._cache.get(url.full_name)
            if cached is not None:
                logger.debug("Snapshot cache hit for %s", url.full_name)
                return cached

        snapshot = await self._fetch_snapshot(url)
        if self._cache is not None:
            self._cache.set(url.full_name, snapshot)
        return snapshot

    async def _fetch_snapshot(self, url: GitHubUrl) -> RepositorySnapshot:
        """Metadata, commits and root listing in parallel, then the README."""
        metadata, commits, entries = await asyncio.gather(
            self._fetcher.fetch_metadata(url),
            self._fetcher.fetch_commits(url, self._commit_count),
            self._fetcher.fetch_root_listing(url),
        )

        readme = find_readme(entries)
        readme_text = ""
        if readme is not None:
            readme_text = await self._fetcher.fetch_file_content(url, readme.path)

        logger.debug(
            "Fetched %s: %d commits, %d root entries, readme=%d chars",
            url.full_name,
            len(commits),
            len(entries),
            len(readme_text),
        )
        return RepositorySnapshot(
            metadata=metadata,
            commits=tuple(commits),
            entries=tuple(entries),
            readme_text=readme_text,
        )

    # ── Scoring & narrative ─────────────────────────────────────────────

    @staticmethod
    def evaluate(url: GitHubUrl, snapshot: RepositorySnapshot, now: datetime) -> AnalysisResult:
        """Turn a fetched snapshot into the report card.  Never raises."""
        categories = score_categories(snapshot, now)
        score = overall_score([c.score for c in categories])

        return AnalysisResult(
            owner=url.owner,
            repo=url.repo,
            repo_name=snapshot.metadata.name,
            repo_url=snapshot.metadata.html_url,
            score=score,
            tier=tier_for(score),
            industry_readiness=readiness_for(score),
            summary=build_summary(snapshot.metadata, categories, score),
            categories=categories,
            roadmap=build_roadmap(categories, score),
            red_flags=detect_red_flags(snapshot, now),
            readme_checklist=build_checklist(snapshot),
        )
