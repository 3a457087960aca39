"""
Placement Criteria Engine

Main orchestrator that wires the pure components into the flows the
placement portal needs. This is the primary entry point for callers.
"""

import time
import logging
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from .contracts import (
    StudentCriteriaView,
    DriveCriteria,
    DriveRecord,
    EligibilityResult,
    EligibleStudentsOutput,
    SkillGapReport,
    DriveFeedPage,
)
from .eligibility import check_student_eligibility, filter_eligible
from .ranker import rank_students
from .skill_gap import calculate_skill_gap
from .market import top_market_skills, build_learning_recommendations
from .drive_feed import build_drive_feed, assert_can_apply
from .constants import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)


class PlacementEngine:
    """
    Orchestrates the criteria pipelines.

    Flows:
    1. Single student vs drive - eligibility with reasons
    2. TPO view - filter the pool, then rank
    3. Skill gap - market skills, fuzzy match, learning links
    4. Student feed - eligible active drives, paginated

    The engine holds no per-call state and is safe to share.
    """

    def __init__(
        self,
        top_skills: Optional[int] = None,
        max_distance: Optional[int] = None,
        max_resource_skills: Optional[int] = None
    ):
        self.top_skills = top_skills
        self.max_distance = max_distance
        self.max_resource_skills = max_resource_skills
        self.version = "1.0.0"

    def evaluate(
        self,
        student: StudentCriteriaView,
        drive: DriveCriteria
    ) -> EligibilityResult:
        return check_student_eligibility(student, drive)

    def eligible_students(
        self,
        students: Sequence[StudentCriteriaView],
        drive: DriveCriteria,
        drive_id: Optional[str] = None
    ) -> EligibleStudentsOutput:
        """
        Ranked list of students eligible for a drive.

        Args:
            students: Whole student pool
            drive: Drive criteria
            drive_id: Echoed back for the caller's convenience

        Returns:
            EligibleStudentsOutput ordered by CGPA desc, backlogs asc
        """
        start_time = time.perf_counter()

        logger.info(f"Filtering {len(students)} students for drive {drive_id or 'anonymous'}")
        eligible = filter_eligible(students, drive)
        ranked = rank_students(eligible)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"Eligible students: {len(ranked)} ({processing_time:.2f}ms)")

        warnings: List[str] = []
        if students and not ranked:
            warnings.append("No students meet the criteria for this drive.")

        return EligibleStudentsOutput(
            drive_id=drive_id,
            students=ranked,
            total_evaluated=len(students),
            total_eligible=len(ranked),
            processing_time_ms=round(processing_time, 2),
            warnings=warnings,
        )

    def skill_gap_report(
        self,
        student_skills: Sequence[str],
        drives: Iterable[DriveRecord]
    ) -> SkillGapReport:
        """
        Compare a student's skills with the most requested skills of active drives.
        """
        market = top_market_skills(drives, self.top_skills)
        top_skills = [m.skill for m in market]
        logger.info(f"Top market skills: {top_skills}")

        gap = calculate_skill_gap(student_skills, top_skills, self.max_distance)
        logger.info(f"Skill gap score: {gap.score} ({len(gap.missing)} missing)")

        return SkillGapReport(
            student_skills=list(student_skills),
            top_market_skills=top_skills,
            gap=gap,
            recommendations=build_learning_recommendations(gap.missing, self.max_resource_skills),
        )

    def drive_feed(
        self,
        drives: Sequence[DriveRecord],
        student: Optional[StudentCriteriaView] = None,
        applied_drive_ids: Iterable[str] = (),
        search: Optional[str] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE
    ) -> DriveFeedPage:
        return build_drive_feed(drives, student, applied_drive_ids, search, page, limit)

    def check_application(
        self,
        drive: DriveRecord,
        student: Optional[StudentCriteriaView],
        already_applied: bool = False,
        now: Optional[datetime] = None
    ) -> None:
        """Raises ApplicationRejected when the application must be refused."""
        assert_can_apply(drive, student, already_applied, now)
