"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from gitgrade.domain.entities import (
    CommitRecord,
    DirectoryEntry,
    EntryKind,
    RepositoryMetadata,
    RepositorySnapshot,
)
from gitgrade.domain.value_objects import GitHubUrl

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeFetcher:
    """In-memory RepoFetcher that records which calls were made."""

    def __init__(
        self,
        metadata: RepositoryMetadata,
        commits: list[CommitRecord] | None = None,
        entries: list[DirectoryEntry] | None = None,
        files: dict[str, str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.metadata = metadata
        self.commits = commits or []
        self.entries = entries or []
        self.files = files or {}
        self.error = error
        self.calls: list[str] = []

    async def fetch_metadata(self, url: GitHubUrl) -> RepositoryMetadata:
        self.calls.append("metadata")
        if self.error is not None:
            raise self.error
        return self.metadata

    async def fetch_commits(self, url: GitHubUrl, count: int = 30) -> list[CommitRecord]:
        self.calls.append("commits")
        return self.commits[:count]

    async def fetch_root_listing(self, url: GitHubUrl) -> list[DirectoryEntry]:
        self.calls.append("listing")
        return self.entries

    async def fetch_file_content(self, url: GitHubUrl, path: str) -> str:
        self.calls.append(f"file:{path}")
        return self.files.get(path, "")


def entry(name: str, kind: EntryKind | None = None) -> DirectoryEntry:
    if kind is None:
        kind = EntryKind.FILE if "." in name else EntryKind.DIRECTORY
    return DirectoryEntry(name=name, path=name, kind=kind)


def commit(message: str, days_ago: float = 90) -> CommitRecord:
    return CommitRecord(message=message, authored_at=NOW - timedelta(days=days_ago))


def metadata(**overrides: object) -> RepositoryMetadata:
    fields: dict[str, object] = {
        "name": "bar",
        "full_name": "foo/bar",
        "html_url": "https://github.com/foo/bar",
    }
    fields.update(overrides)
    return RepositoryMetadata(**fields)  # type: ignore[arg-type]


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_snapshot() -> Callable[..., RepositorySnapshot]:
    """Build a snapshot from entry names, commit messages and metadata overrides."""

    def _make(
        names: list[str] | None = None,
        commits: list[CommitRecord] | None = None,
        readme_text: str = "",
        **meta: object,
    ) -> RepositorySnapshot:
        return RepositorySnapshot(
            metadata=metadata(**meta),
            commits=tuple(commits or ()),
            entries=tuple(entry(n) for n in names or ()),
            readme_text=readme_text,
        )

    return _make


@pytest.fixture
def make_fetcher() -> Callable[..., FakeFetcher]:
    def _make(**kwargs: object) -> FakeFetcher:
        kwargs.setdefault("metadata", metadata())
        return FakeFetcher(**kwargs)  # type: ignore[arg-type]

    return _make
