"""Category scoring — nine heuristic scorers plus aggregation.

Every scorer is a pure function of a :class:`RepositorySnapshot`; the two
that depend on wall-clock time take ``now`` explicitly.  Each starts from a
fixed base and adds or subtracts fixed deltas for literal conditions on the
root listing, the commit messages and the repository metadata.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Callable, Sequence

from gitgrade.domain.entities import (
    Category,
    CategoryScore,
    CommitRecord,
    IndustryReadiness,
    RepositorySnapshot,
    Tier,
)
from gitgrade.services.templates import CATEGORY_ICONS, describe_category

# ── Tuning constants ────────────────────────────────────────────────────────

POPULAR_LANGUAGES = frozenset({"JavaScript", "TypeScript", "Python", "Java", "Go", "Rust"})
SOURCE_DIR_NAMES = frozenset({"src", "lib", "app"})
MANIFEST_FILES = frozenset({"package.json", "requirements.txt", "Cargo.toml", "go.mod", "pom.xml"})

STRUCTURE_INDICATORS: tuple[str, ...] = (
    "src", "lib", "app", "components", "utils", "services", "types", "interfaces",
)

TEST_INDICATORS: tuple[str, ...] = ("test", "spec", "__tests__", "tests")
TEST_CONFIG_TOKENS: tuple[str, ...] = (
    "jest.config", "vitest.config", "cypress.json", ".spec.ts", ".test.js",
)

BUNDLER_CONFIG_TOKENS: tuple[str, ...] = (
    "webpack.config", "vite.config", "rollup.config", ".babelrc",
)

RECENT_COMMIT_DAYS = 30
RECENT_PUSH_DAYS = 30

_SECONDS_PER_DAY = 86_400


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (``round`` uses banker's rounding)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, round_half_up(value)))


def days_between(earlier: datetime, now: datetime) -> float:
    return (now - earlier).total_seconds() / _SECONDS_PER_DAY


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_quality_commit(commit: CommitRecord) -> bool:
    """A commit message that says something beyond "fix"/"update"/"wip"."""
    message = commit.message.lower()
    return (
        len(message) > 10
        and not message.startswith("fix")
        and not message.startswith("update")
        and "wip" not in message
    )


# ── Scorers ─────────────────────────────────────────────────────────────────


def score_code_quality(snapshot: RepositorySnapshot) -> int:
    meta = snapshot.metadata
    names = snapshot.entry_names
    score = 50

    if meta.language in POPULAR_LANGUAGES:
        score += 10
    if any(name in SOURCE_DIR_NAMES for name in names):
        score += 15
    if any(name in MANIFEST_FILES for name in names):
        score += 10
    if 100 < meta.size_kb < 50_000:
        score += 15

    return clamp(score)


def score_project_structure(snapshot: RepositorySnapshot) -> int:
    names = snapshot.entry_names
    lowered = [name.lower() for name in names]
    score = 40

    matched = sum(
        1 for indicator in STRUCTURE_INDICATORS if any(indicator in name for name in lowered)
    )
    score += matched * 8

    if ".gitignore" in names:
        score += 10
    if any("config" in name for name in names):
        score += 5

    return clamp(score)


def score_documentation(snapshot: RepositorySnapshot) -> int:
    score = 20
    if snapshot.readme_entry is None:
        return clamp(score)

    score += 30
    readme = snapshot.readme_text.lower()
    if len(readme) > 500:
        score += 20
    if "installation" in readme or "setup" in readme:
        score += 10
    if "usage" in readme or "example" in readme:
        score += 10
    if "license" in readme:
        score += 5
    if "contributing" in readme:
        score += 5

    return clamp(score)


def score_testing(snapshot: RepositorySnapshot) -> int:
    names = snapshot.entry_names
    lowered = [name.lower() for name in names]
    score = 20

    if any(indicator in name for indicator in TEST_INDICATORS for name in lowered):
        score += 60
    if any(token in name for token in TEST_CONFIG_TOKENS for name in names):
        score += 20

    return clamp(score)


def score_git_practices(snapshot: RepositorySnapshot, now: datetime) -> int:
    commits = snapshot.commits
    if not commits:
        return 20

    score: float = 30
    good = sum(1 for commit in commits if is_quality_commit(commit))
    score += good / len(commits) * 40

    recent = sum(
        1
        for commit in commits
        if commit.authored_at is not None
        and days_between(commit.authored_at, now) <= RECENT_COMMIT_DAYS
    )
    if recent > 0:
        score += 20
    if recent > 5:
        score += 10

    return clamp(score)


def score_security(snapshot: RepositorySnapshot) -> int:
    names = snapshot.entry_names
    score = 60

    if "SECURITY.md" in names:
        score += 15
    if ".env.example" in names:
        score += 10
    if ".env" in names:
        score -= 20
    if any("secret" in name or "key" in name for name in names):
        score -= 15

    return clamp(score, low=20)


def score_performance(snapshot: RepositorySnapshot) -> int:
    meta = snapshot.metadata
    names = snapshot.entry_names
    score = 50

    if meta.size_kb < 10_000:
        score += 20
    elif meta.size_kb > 100_000:
        score -= 10

    if any(token in name for token in BUNDLER_CONFIG_TOKENS for name in names):
        score += 20

    if meta.language in ("TypeScript", "JavaScript") and "tsconfig.json" in names:
        score += 10

    return clamp(score)


def score_error_handling(snapshot: RepositorySnapshot, now: datetime) -> int:
    # No source is inspected; maturity and popularity stand in for it.
    meta = snapshot.metadata
    score = 50

    if meta.created_at is not None:
        age_days = days_between(meta.created_at, now)
        if age_days > 365:
            score += 20
        elif age_days > 30:
            score += 10

    if meta.stars > 100:
        score += 15
    elif meta.stars > 10:
        score += 10

    return clamp(score)


def score_practicality(snapshot: RepositorySnapshot, now: datetime) -> int:
    meta = snapshot.metadata
    score = 40

    if meta.description and len(meta.description) > 20:
        score += 20
    if meta.stars > 0:
        score += 10
    if meta.forks > 0:
        score += 10
    if meta.stars > 10:
        score += 10
    if meta.pushed_at is not None and days_between(meta.pushed_at, now) < RECENT_PUSH_DAYS:
        score += 10

    return clamp(score)


_Scorer = Callable[[RepositorySnapshot, datetime], int]

SCORERS: dict[Category, _Scorer] = {
    Category.CODE_QUALITY: lambda s, _now: score_code_quality(s),
    Category.PROJECT_STRUCTURE: lambda s, _now: score_project_structure(s),
    Category.DOCUMENTATION: lambda s, _now: score_documentation(s),
    Category.TESTING: lambda s, _now: score_testing(s),
    Category.GIT_PRACTICES: score_git_practices,
    Category.SECURITY: lambda s, _now: score_security(s),
    Category.PERFORMANCE: lambda s, _now: score_performance(s),
    Category.ERROR_HANDLING: score_error_handling,
    Category.PRACTICALITY: score_practicality,
}


# ── Public API ──────────────────────────────────────────────────────────────


def score_categories(
    snapshot: RepositorySnapshot, now: datetime | None = None
) -> tuple[CategoryScore, ...]:
    """Score all nine categories once, in report order."""
    now = now or utcnow()
    cards: list[CategoryScore] = []
    for category in Category:
        score = SCORERS[category](snapshot, now)
        cards.append(
            CategoryScore(
                category=category,
                score=score,
                description=describe_category(category, score),
                icon=CATEGORY_ICONS[category],
            )
        )
    return tuple(cards)


def overall_score(scores: Sequence[int]) -> int:
    """Mean of the category scores, rounded half-up."""
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def tier_for(score: int) -> Tier:
    if score >= 90:
        return Tier.PLATINUM
    if score >= 75:
        return Tier.GOLD
    if score >= 60:
        return Tier.SILVER
    return Tier.BRONZE


def readiness_for(score: int) -> IndustryReadiness:
    if score >= 85:
        return IndustryReadiness.INDUSTRY_READY
    if score >= 65:
        return IndustryReadiness.PORTFOLIO_READY
    return IndustryReadiness.ACADEMIC
