"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gitgrade.domain.exceptions import InvalidUrlError

_GITHUB_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/(?P<owner>[^/?#\s]+)/(?P<repo>[^/?#\s]+)(?:/.*)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class GitHubUrl:
    """Validated GitHub repository URL.

    Extracts *owner* and *repo* from a URL like
    ``https://github.com/psf/requests``.  A trailing slash, a ``.git``
    suffix, deeper paths (``/tree/main``) and a query string or fragment
    (``?tab=readme-ov-file``, ``#readme``) are tolerated.
    """

    owner: str
    repo: str
    raw: str

    @classmethod
    def from_string(cls, url: str) -> GitHubUrl:
        """Parse and validate a raw URL string."""
        url = url.strip()
        cleaned = url.split("#", 1)[0].split("?", 1)[0]
        cleaned = cleaned.removesuffix("/").removesuffix(".git")
        match = _GITHUB_URL_RE.match(cleaned)
        if not match:
            raise InvalidUrlError(
                f"Invalid GitHub URL: '{url}'. "
                "Expected format: https://github.com/<owner>/<repo>"
            )
        return cls(owner=match["owner"], repo=match["repo"], raw=url)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
