"""
Market Skills

Aggregates requirement lists of active drives into a frequency-ranked list of
in-demand skills, and builds learning links for the skills a student lacks.
"""

from collections import Counter
from typing import Iterable, List, Optional
from urllib.parse import quote_plus

from .contracts import DriveRecord, SkillCount, LearningResource, SkillRecommendation
from .constants import (
    TOP_MARKET_SKILLS,
    MAX_RESOURCE_SKILLS,
    COURSERA_SEARCH_URL,
    YOUTUBE_SEARCH_URL,
)
from .skill_gap import normalize_skill


def top_market_skills(
    drives: Iterable[DriveRecord],
    limit: Optional[int] = None
) -> List[SkillCount]:
    """
    Count normalized requirements across active drives.

    Args:
        drives: All known drives (inactive ones are skipped)
        limit: Number of skills to keep, defaults to TOP_MARKET_SKILLS

    Returns:
        Skills by count descending; ties keep first-seen order
    """
    if limit is None:
        limit = TOP_MARKET_SKILLS

    counts: Counter = Counter()
    for drive in drives:
        if not drive.is_active:
            continue
        for requirement in drive.requirements:
            skill = normalize_skill(requirement)
            if skill:
                counts[skill] += 1

    # Counter keeps insertion order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [SkillCount(skill=skill, count=count) for skill, count in ranked[:limit]]


def build_learning_recommendations(
    missing: Iterable[str],
    limit: Optional[int] = None
) -> List[SkillRecommendation]:
    """Course and tutorial search links for the first few missing skills."""
    if limit is None:
        limit = MAX_RESOURCE_SKILLS

    recommendations: List[SkillRecommendation] = []
    for skill in list(missing)[:limit]:
        recommendations.append(SkillRecommendation(
            skill=skill,
            resources=[
                LearningResource(
                    name=f"Learn {skill} on Coursera",
                    url=COURSERA_SEARCH_URL.format(query=quote_plus(skill)),
                ),
                LearningResource(
                    name=f"{skill} Tutorial on YouTube",
                    url=YOUTUBE_SEARCH_URL.format(query=quote_plus(f"{skill} tutorial")),
                ),
            ],
        ))
    return recommendations
