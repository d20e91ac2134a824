"""Red-flag detection — independent predicates over the fetched snapshot.

Flags are not mutually exclusive; every predicate that holds contributes one
entry, in a fixed order.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from gitgrade.domain.entities import CommitRecord, RedFlag, RedFlagKind, RepositorySnapshot
from gitgrade.services.scoring import days_between, round_half_up, utcnow

POOR_COMMIT_RATIO = 0.3
INACTIVE_MONTHS = 6
_DAYS_PER_MONTH = 30

_CLUTTER_TOKENS: tuple[str, ...] = ("temp", "backup", "old", "copy")


def is_poor_commit(commit: CommitRecord) -> bool:
    message = commit.message.lower()
    return len(message) < 5 or message in ("fix", "update") or "wip" in message


def _poor_commits_flag(commits: Sequence[CommitRecord]) -> RedFlag | None:
    poor = sum(1 for commit in commits if is_poor_commit(commit))
    if not commits or poor <= len(commits) * POOR_COMMIT_RATIO:
        return None
    percent = round_half_up(poor / len(commits) * 100)
    return RedFlag(
        kind=RedFlagKind.POOR_COMMITS,
        title="📝 Vague Commit Messages",
        description=(
            f"{percent}% of your commits use unclear messages. Try writing what you changed "
            'and why, like "Add user login validation" instead of just "fix".'
        ),
    )


def _missing_readme_flag(snapshot: RepositorySnapshot) -> RedFlag | None:
    if snapshot.readme_entry is not None:
        return None
    return RedFlag(
        kind=RedFlagKind.MISSING_DOCS,
        title="📚 Missing README File",
        description=(
            "Your project needs a README.md file to explain what it does, how to install it, "
            "and how to use it. This is the first thing people see!"
        ),
    )


def _security_flag(names: Sequence[str]) -> RedFlag | None:
    if not any(n == ".env" or "secret" in n or "key" in n for n in names):
        return None
    return RedFlag(
        kind=RedFlagKind.SECURITY_ISSUE,
        title="🔒 Potential Security Risk",
        description=(
            "Found files that might contain secrets or passwords. Move sensitive data to "
            "environment variables and add these files to .gitignore."
        ),
    )


def _clutter_flag(names: Sequence[str]) -> RedFlag | None:
    suspicious = [n for n in names if any(token in n for token in _CLUTTER_TOKENS)]
    if not suspicious:
        return None
    return RedFlag(
        kind=RedFlagKind.UNUSED_FILES,
        title="🗑️ Cleanup Needed",
        description=(
            f"Found {len(suspicious)} files that look like temporary or backup files "
            f"({', '.join(suspicious[:2])}). Clean these up to keep your repo tidy."
        ),
    )


def _inactivity_flag(pushed_at: datetime | None, now: datetime) -> RedFlag | None:
    if pushed_at is None:
        return None
    months = days_between(pushed_at, now) / _DAYS_PER_MONTH
    if months <= INACTIVE_MONTHS:
        return None
    return RedFlag(
        kind=RedFlagKind.INACTIVE_REPO,
        title="⏰ Inactive Repository",
        description=(
            f"No updates in {round_half_up(months)} months. Consider adding recent "
            "improvements or archiving if the project is complete."
        ),
    )


def detect_red_flags(
    snapshot: RepositorySnapshot, now: datetime | None = None
) -> tuple[RedFlag, ...]:
    """Return every applicable red flag, in fixed order."""
    now = now or utcnow()
    names = snapshot.entry_names
    candidates = (
        _poor_commits_flag(snapshot.commits),
        _missing_readme_flag(snapshot),
        _security_flag(names),
        _clutter_flag(names),
        _inactivity_flag(snapshot.metadata.pushed_at, now),
    )
    return tuple(flag for flag in candidates if flag is not None)
