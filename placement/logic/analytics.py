"""
Placement Analytics

Summary figures for the TPO dashboard, computed over records the caller has
already loaded.
"""

import math
from collections import Counter
from typing import Dict, List, Optional, Sequence

from .contracts import (
    DriveRecord,
    ApplicationRecord,
    StudentRecord,
    PlacementStats,
    BranchPlacement,
    SkillCount,
)
from .constants import ApplicationStatus, RUPEES_PER_LAKH, SKILL_DISTRIBUTION_LIMIT
from .skill_gap import normalize_skill


def _to_lakhs(amount: float) -> float:
    return round(amount / RUPEES_PER_LAKH, 1)


def placement_stats(
    drives: Sequence[DriveRecord],
    applications: Sequence[ApplicationRecord],
    students: Sequence[StudentRecord]
) -> PlacementStats:
    """
    Headline numbers: drives, applications, placements and packages.
    Packages are reported in lakhs per annum, one decimal.
    """
    placed = [s for s in students if s.is_placed]
    packages = [s.placed_package for s in placed if s.placed_package]

    avg_package = sum(packages) / len(packages) if packages else 0.0
    max_package = max(packages) if packages else 0.0

    placement_rate = 0
    if students:
        placement_rate = int(math.floor(100 * len(placed) / len(students) + 0.5))

    return PlacementStats(
        total_drives=len(drives),
        active_drives=sum(1 for d in drives if d.is_active),
        total_applications=len(applications),
        selected_count=sum(1 for a in applications if a.status == ApplicationStatus.SELECTED.value),
        placed_students=len(placed),
        total_students=len(students),
        avg_package=_to_lakhs(avg_package),
        max_package=_to_lakhs(max_package),
        placement_rate=placement_rate,
    )


def branch_wise_placement(students: Sequence[StudentRecord]) -> List[BranchPlacement]:
    """Per-branch totals and average CGPA, most placements first."""
    groups: Dict[str, List[StudentRecord]] = {}
    for student in students:
        groups.setdefault(student.branch or "Unknown", []).append(student)

    rows: List[BranchPlacement] = []
    for branch, members in groups.items():
        cgpas = [m.cgpa for m in members if m.cgpa is not None]
        avg_cgpa: Optional[float] = round(sum(cgpas) / len(cgpas), 2) if cgpas else None
        rows.append(BranchPlacement(
            branch=branch,
            total=len(members),
            placed=sum(1 for m in members if m.is_placed),
            avg_cgpa=avg_cgpa,
        ))

    return sorted(rows, key=lambda r: r.placed, reverse=True)


def skill_distribution(
    students: Sequence[StudentRecord],
    limit: int = SKILL_DISTRIBUTION_LIMIT
) -> List[SkillCount]:
    """Most common declared skills across all students."""
    counts: Counter = Counter()
    for student in students:
        for skill in student.skills:
            normalized = normalize_skill(skill)
            if normalized:
                counts[normalized] += 1
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [SkillCount(skill=skill, count=count) for skill, count in ranked[:limit]]
