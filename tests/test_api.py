"""Tests for the HTTP interface (interface/app.py, routes, error handlers)."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from conftest import commit, entry, metadata
from gitgrade.domain.exceptions import ApiError, FetchError, NotFoundError, RateLimitError
from gitgrade.infrastructure.config import Settings
from gitgrade.interface.app import create_app
from gitgrade.interface.dependencies import get_use_case
from gitgrade.main import configure_logging
from gitgrade.services.analyze_repo import AnalyzeRepoUseCase


@pytest.fixture
def client_for(make_fetcher):
    """Yield a factory building a TestClient around a fake fetcher."""
    with ExitStack() as stack:

        def _make(**fetcher_kwargs) -> TestClient:
            fetcher = make_fetcher(**fetcher_kwargs)
            app = create_app()
            app.dependency_overrides[get_use_case] = lambda: AnalyzeRepoUseCase(fetcher)
            return stack.enter_context(TestClient(app))

        yield _make


class TestAnalyzeEndpoint:
    def test_returns_report_card(self, client_for) -> None:
        recent = datetime.now(timezone.utc) - timedelta(days=3)
        client = client_for(
            metadata=metadata(
                language="Python",
                size_kb=800,
                stars=25,
                forks=2,
                description="Grades public GitHub repositories",
                created_at=recent - timedelta(days=500),
                pushed_at=recent,
            ),
            commits=[commit("Add the scoring engine")] * 3,
            entries=[entry("src"), entry("tests"), entry("README.md"), entry("LICENSE")],
            files={"README.md": "## Install\npip install gitgrade"},
        )

        resp = client.post("/analyze", json={"github_url": "https://github.com/foo/bar"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["owner"] == "foo"
        assert body["repo"] == "bar"
        assert body["tier"] in {"Bronze", "Silver", "Gold", "Platinum"}
        assert body["industry_readiness"] in {"Academic", "Portfolio-Ready", "Industry-Ready"}
        assert [c["title"] for c in body["categories"]][0] == "Code Quality"
        assert body["categories"][0]["icon_name"] == "code"
        assert len(body["categories"]) == 9
        assert len(body["readme_checklist"]) == 8
        assert len(body["roadmap"]) <= 6
        mean = sum(c["score"] for c in body["categories"]) / 9
        assert body["score"] == int(mean + 0.5)
        for item in body["roadmap"]:
            assert item["priority"] in {"high", "medium", "low"}

    def test_invalid_url(self, client_for) -> None:
        client = client_for()
        resp = client.post("/analyze", json={"github_url": "https://gitlab.com/foo/bar"})
        assert resp.status_code == 422
        body = resp.json()
        assert body["status"] == "error"
        assert body["message"].startswith("Failed to analyze repository: Invalid GitHub URL")

    def test_blank_url_fails_validation(self, client_for) -> None:
        client = client_for()
        resp = client.post("/analyze", json={"github_url": "   "})
        assert resp.status_code == 422
        assert "github_url" in resp.json()["message"]

    @pytest.mark.parametrize(
        ("error", "status"),
        [
            (NotFoundError("Repository not found."), 404),
            (RateLimitError("GitHub API rate limit exceeded."), 429),
            (ApiError(500, "Internal Server Error"), 502),
            (FetchError("Network error"), 502),
        ],
    )
    def test_domain_errors_map_to_status(self, client_for, error, status) -> None:
        client = client_for(error=error)
        resp = client.post("/analyze", json={"github_url": "https://github.com/foo/bar"})
        assert resp.status_code == status
        assert resp.json() == {
            "status": "error",
            "message": f"Failed to analyze repository: {error}",
        }


def test_health(client_for) -> None:
    client = client_for()
    assert client.get("/health").json() == {"status": "ok"}


def test_readme_link_url_is_accepted(client_for) -> None:
    client = client_for()
    resp = client.post(
        "/analyze", json={"github_url": "https://github.com/foo/bar?tab=readme-ov-file"}
    )
    assert resp.status_code == 200
    assert (resp.json()["owner"], resp.json()["repo"]) == ("foo", "bar")


class TestLogging:
    def test_quiets_http_client_loggers(self, monkeypatch) -> None:
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
        for name in ("httpx", "httpcore"):
            monkeypatch.setattr(logging.getLogger(name), "level", logging.NOTSET)

        configure_logging(Settings(log_level="info"))

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_debug_keeps_http_client_loggers(self, monkeypatch) -> None:
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
        monkeypatch.setattr(logging.getLogger("httpx"), "level", logging.NOTSET)

        configure_logging(Settings(log_level="DEBUG"))

        assert logging.getLogger("httpx").level == logging.NOTSET
