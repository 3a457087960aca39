"""
Drive Feed

Builds the paginated list of drives a student sees, and guards a student's
application to a single drive.
"""

import math
import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .contracts import (
    DriveRecord,
    DriveFeedItem,
    DriveFeedPage,
    StudentCriteriaView,
)
from .constants import DEFAULT_PAGE_SIZE
from .eligibility import check_student_eligibility, meets_criteria

logger = logging.getLogger(__name__)


class ApplicationRejected(Exception):
    """Raised when a student may not apply to a drive."""

    def __init__(self, status_code: int, message: str, reasons: Optional[List[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.reasons = reasons or []


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def deadline_passed(drive: DriveRecord, now: Optional[datetime] = None) -> bool:
    if drive.deadline is None:
        return False
    now = now or datetime.now(timezone.utc)
    return _as_utc(now) > _as_utc(drive.deadline)


def _matches_search(drive: DriveRecord, search: str) -> bool:
    needle = search.lower()
    return needle in drive.title.lower() or needle in drive.company.lower()


def build_drive_feed(
    drives: Iterable[DriveRecord],
    student: Optional[StudentCriteriaView] = None,
    applied_drive_ids: Iterable[str] = (),
    search: Optional[str] = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE
) -> DriveFeedPage:
    """
    Build one page of the student drive feed.

    Only active drives are listed. With a profile, drives the student is not
    eligible for are hidden, unless that would hide every active drive, in
    which case all active drives are shown.

    Args:
        drives: Drives in display order
        student: Student criteria view, None if the profile is not set up yet
        applied_drive_ids: Drives the student already applied to
        search: Case-insensitive filter on title or company
        page: 1-based page number
        limit: Page size

    Returns:
        DriveFeedPage
    """
    page = max(1, page)
    limit = max(1, limit)

    active = [d for d in drives if d.is_active]

    if student is None:
        visible = active
    else:
        visible = [d for d in active if meets_criteria(student, d.criteria)]
        if not visible and active:
            logger.info(f"No eligible drives for student {student.student_id}, showing all {len(active)} active drives")
            visible = active

    applied = {str(drive_id) for drive_id in applied_drive_ids}
    items = [
        DriveFeedItem(drive=d, has_applied=d.drive_id is not None and d.drive_id in applied)
        for d in visible
    ]

    if search:
        items = [item for item in items if _matches_search(item.drive, search)]

    total = len(items)
    start = (page - 1) * limit
    return DriveFeedPage(
        drives=items[start:start + limit],
        total=total,
        page=page,
        pages=math.ceil(total / limit),
        has_profile=student is not None,
    )


def assert_can_apply(
    drive: DriveRecord,
    student: Optional[StudentCriteriaView],
    already_applied: bool = False,
    now: Optional[datetime] = None
) -> None:
    """
    Raise ApplicationRejected unless the student may apply to the drive.

    Checks run in order: drive active, deadline, profile present,
    eligibility, duplicate application.
    """
    if not drive.is_active:
        raise ApplicationRejected(400, "Drive is not active.")
    if deadline_passed(drive, now):
        raise ApplicationRejected(400, "Application deadline has passed.")
    if student is None:
        raise ApplicationRejected(404, "Please complete your profile first.")

    result = check_student_eligibility(student, drive.criteria)
    if not result.eligible:
        raise ApplicationRejected(403, "Not eligible for this drive.", result.reasons)

    if already_applied:
        raise ApplicationRejected(409, "Already applied to this drive.")
