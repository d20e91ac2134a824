"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class GitGradeError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidUrlError(GitGradeError):
    """The supplied URL does not point to a GitHub repository."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class NotFoundError(GitGradeError):
    """The repository does not exist or is not public (404)."""


class RateLimitError(GitGradeError):
    """GitHub refused the request, almost always the unauthenticated rate limit (403)."""


class ApiError(GitGradeError):
    """GitHub answered with any other non-2xx status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        detail = f"{status_code} - {reason}" if reason else str(status_code)
        super().__init__(f"GitHub API error: {detail}")


# ── Transport errors ────────────────────────────────────────────────────────


class FetchError(GitGradeError):
    """The request never produced a usable response (network, bad payload)."""
