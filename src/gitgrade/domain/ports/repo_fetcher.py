"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from gitgrade.domain.entities import CommitRecord, DirectoryEntry, RepositoryMetadata
from gitgrade.domain.value_objects import GitHubUrl


class RepoFetcher(Protocol):
    """Abstract contract for fetching GitHub repository data."""

    async def fetch_metadata(self, url: GitHubUrl) -> RepositoryMetadata:
        """Return repository metadata."""
        ...

    async def fetch_commits(self, url: GitHubUrl, count: int = 30) -> list[CommitRecord]:
        """Return up to *count* most recent commits, newest first."""
        ...

    async def fetch_root_listing(self, url: GitHubUrl) -> list[DirectoryEntry]:
        """Return the root directory listing, or ``[]`` when it cannot be fetched."""
        ...

    async def fetch_file_content(self, url: GitHubUrl, path: str) -> str:
        """Return the decoded text of one file, or ``""`` when it cannot be fetched."""
        ...
