"""Tests for GitHub URL parsing (domain/value_objects.py)."""

from __future__ import annotations

import pytest

from gitgrade.domain.exceptions import InvalidUrlError
from gitgrade.domain.value_objects import GitHubUrl


class TestGitHubUrl:
    @pytest.mark.parametrize(
        "raw",
        [
            "https://github.com/foo/bar",
            "https://github.com/foo/bar/",
            "https://github.com/foo/bar.git",
            "https://github.com/foo/bar.git/",
            "http://github.com/foo/bar",
            "https://www.github.com/foo/bar",
            "  https://github.com/foo/bar  ",
            "github.com/foo/bar",
            "https://github.com/foo/bar/tree/main/src",
            "https://github.com/foo/bar?tab=readme-ov-file",
            "https://github.com/foo/bar#readme",
            "https://github.com/foo/bar.git?ref=main",
            "https://github.com/foo/bar/?tab=readme-ov-file#usage",
        ],
    )
    def test_resolves_owner_and_repo(self, raw: str) -> None:
        url = GitHubUrl.from_string(raw)
        assert (url.owner, url.repo) == ("foo", "bar")

    def test_full_name(self) -> None:
        assert GitHubUrl.from_string("https://github.com/psf/requests").full_name == "psf/requests"

    def test_keeps_dots_and_dashes_in_repo_name(self) -> None:
        url = GitHubUrl.from_string("https://github.com/my-org/my.repo-name")
        assert url.repo == "my.repo-name"

    def test_raw_is_stripped_input(self) -> None:
        url = GitHubUrl.from_string(" https://github.com/foo/bar/ ")
        assert url.raw == "https://github.com/foo/bar/"

    @pytest.mark.parametrize(
        "raw",
        [
            "https://gitlab.com/foo/bar",
            "https://github.com/foo",
            "https://github.com/",
            "not-a-url",
            "",
            "https://example.com/github.com/foo/bar",
        ],
    )
    def test_rejects_non_repository_urls(self, raw: str) -> None:
        with pytest.raises(InvalidUrlError, match="Invalid GitHub URL"):
            GitHubUrl.from_string(raw)
