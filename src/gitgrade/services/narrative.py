"""Summary and roadmap generation from already-computed category scores."""

from __future__ import annotations

from typing import Sequence

from gitgrade.domain.entities import CategoryScore, RepositoryMetadata, RoadmapItem
from gitgrade.services.templates import (
    CI_CD_ITEM,
    CLEAR_DESCRIPTION,
    CLOSING_KEEP_BUILDING,
    CLOSING_ON_TRACK,
    COMMUNITY_INTEREST,
    MISSING_DESCRIPTION,
    PROJECT_GOALS_ITEM,
    ROADMAP_TEMPLATES,
    STRENGTHS_SENTENCE,
    SUMMARY_OPENERS,
    WEAKNESSES_SENTENCE,
)

STRENGTH_THRESHOLD = 75
WEAKNESS_THRESHOLD = 60
ROADMAP_THRESHOLD = 70
CI_CD_THRESHOLD = 80
GOALS_THRESHOLD = 60
MAX_ROADMAP_ITEMS = 6


def _opener(score: int) -> str:
    for threshold, sentence in SUMMARY_OPENERS:
        if score >= threshold:
            return sentence
    return SUMMARY_OPENERS[-1][1]


def _community_remark(metadata: RepositoryMetadata) -> str:
    if metadata.stars > 10:
        return COMMUNITY_INTEREST
    if metadata.description and len(metadata.description) > 20:
        return CLEAR_DESCRIPTION
    return MISSING_DESCRIPTION


def build_summary(
    metadata: RepositoryMetadata,
    categories: Sequence[CategoryScore],
    score: int,
) -> str:
    """Compose the report's free-text summary."""
    strengths = [c.title for c in categories if c.score >= STRENGTH_THRESHOLD][:2]
    weaknesses = [c.title for c in categories if c.score < WEAKNESS_THRESHOLD][:2]

    parts = [_opener(score)]
    if strengths:
        parts.append(STRENGTHS_SENTENCE.format(names=" and ".join(strengths)))
    if weaknesses:
        parts.append(WEAKNESSES_SENTENCE.format(names=" and ".join(weaknesses)))
    parts.append(_community_remark(metadata))
    parts.append(CLOSING_KEEP_BUILDING if score < 70 else CLOSING_ON_TRACK)
    return "".join(parts)


def build_roadmap(categories: Sequence[CategoryScore], score: int) -> tuple[RoadmapItem, ...]:
    """One template per underperforming category, then the general items, capped at six."""
    items = [
        ROADMAP_TEMPLATES[c.category] for c in categories if c.score < ROADMAP_THRESHOLD
    ]
    if score < CI_CD_THRESHOLD:
        items.append(CI_CD_ITEM)
    if score < GOALS_THRESHOLD:
        items.append(PROJECT_GOALS_ITEM)
    return tuple(items[:MAX_ROADMAP_ITEMS])
