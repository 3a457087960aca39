"""
Skill Gap Analyzer

Compares a student's declared skills with a list of in-demand skills using a
loose match: one skill containing the other as a whole word or phrase
("react" in "react native", but not "java" in "javascript"), or a small edit
distance. The threshold is a tunable constant, not a formal similarity metric.
"""

import math
import re
from typing import Iterable, List, Optional, Sequence

from .contracts import SkillGapResult
from .constants import SKILL_MATCH_MAX_DISTANCE


def normalize_skill(skill: str) -> str:
    return skill.lower().strip()


def _normalize_all(skills: Iterable[str]) -> List[str]:
    normalized = (normalize_skill(s) for s in skills)
    return [s for s in normalized if s]


def _dedupe(skills: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(skills))


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Classic edit distance (insert, delete, substitute each cost 1).
    Keeps two DP rows instead of the full matrix.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def _contains_term(text: str, term: str) -> bool:
    """True if term occurs in text as a whole word or phrase."""
    pattern = r"(?<![a-z0-9])" + re.escape(term) + r"(?![a-z0-9])"
    return re.search(pattern, text) is not None


def skills_match(
    student_skill: str,
    required_skill: str,
    max_distance: int = SKILL_MATCH_MAX_DISTANCE
) -> bool:
    """Both arguments must already be normalized."""
    if _contains_term(student_skill, required_skill) or _contains_term(required_skill, student_skill):
        return True
    # Lengths differing by more than the threshold can never be close enough
    if abs(len(student_skill) - len(required_skill)) > max_distance:
        return False
    return levenshtein_distance(student_skill, required_skill) <= max_distance


def _percentage(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    # Halves round up (12.5 -> 13), unlike round()
    return int(math.floor(100 * part / whole + 0.5))


def calculate_skill_gap(
    student_skills: Sequence[str],
    required_skills: Sequence[str],
    max_distance: Optional[int] = None
) -> SkillGapResult:
    """
    Split the distinct required skills into matched and missing.

    Args:
        student_skills: Skills declared by the student
        required_skills: In-demand skills to compare against
        max_distance: Edit-distance threshold, defaults to SKILL_MATCH_MAX_DISTANCE

    Returns:
        SkillGapResult with score = round(100 * matched / required), 0 if nothing required
    """
    if max_distance is None:
        max_distance = SKILL_MATCH_MAX_DISTANCE

    student = _dedupe(_normalize_all(student_skills))
    required = _dedupe(_normalize_all(required_skills))

    matched: List[str] = []
    missing: List[str] = []
    for skill in required:
        if any(skills_match(s, skill, max_distance) for s in student):
            matched.append(skill)
        else:
            missing.append(skill)

    return SkillGapResult(
        matched=matched,
        missing=missing,
        score=_percentage(len(matched), len(required)),
    )
