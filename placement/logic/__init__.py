"""
Placement Logic Module

Provides the deterministic criteria engine: eligibility, ranking and skill gap.
"""

from .contracts import (
    StudentCriteriaView,
    DriveCriteria,
    EligibilityResult,
    SkillGapResult,
    SkillGapReport,
    EligibleStudentsOutput,
    DriveRecord,
    StudentRecord,
    ApplicationRecord,
    DriveFeedPage,
    PlacementStats,
)
from .eligibility import check_student_eligibility, filter_eligible
from .ranker import rank_students
from .skill_gap import calculate_skill_gap, levenshtein_distance
from .drive_feed import ApplicationRejected
from .engine import PlacementEngine
from .constants import Branch, DriveStatus, ApplicationStatus

__all__ = [
    # Main engine
    "PlacementEngine",

    # Core operations
    "check_student_eligibility",
    "filter_eligible",
    "rank_students",
    "calculate_skill_gap",
    "levenshtein_distance",

    # Contracts
    "StudentCriteriaView",
    "DriveCriteria",
    "EligibilityResult",
    "SkillGapResult",
    "SkillGapReport",
    "EligibleStudentsOutput",
    "DriveRecord",
    "StudentRecord",
    "ApplicationRecord",
    "DriveFeedPage",
    "PlacementStats",

    # Errors
    "ApplicationRejected",

    # Enums
    "Branch",
    "DriveStatus",
    "ApplicationStatus",
]
