"""
Placement API Routes

Exposes the criteria engine via REST API.
Requests carry the stored documents; nothing is persisted here.
"""

import logging
from typing import Optional, List, Dict, Any, Callable, TypeVar
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, ValidationError

from .logic.engine import PlacementEngine
from .logic.drive_feed import ApplicationRejected
from .logic.profile import calculate_completeness
from .logic.analytics import placement_stats, branch_wise_placement, skill_distribution
from .logic.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .logic import adapter


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/placement", tags=["placement"])

engine = PlacementEngine()

T = TypeVar("T")


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class EligibilityRequest(BaseModel):
    """Request body for a single eligibility check."""
    student: Dict[str, Any] = Field(
        ...,
        description="Student profile document",
        json_schema_extra={"example": {"cgpa": 7.2, "backlogs": 2, "branch": "CSE"}},
    )
    drive: Dict[str, Any] = Field(
        ...,
        description="Drive document",
        json_schema_extra={"example": {"minCGPA": 7.0, "maxBacklogs": 0, "eligibleBranches": ["CSE", "IT"]}},
    )


class EligibleStudentsRequest(BaseModel):
    students: List[Dict[str, Any]] = Field(default_factory=list)
    drive: Dict[str, Any]


class SkillGapRequest(BaseModel):
    skills: List[str] = Field(default_factory=list, description="Student's declared skills")
    drives: List[Dict[str, Any]] = Field(default_factory=list, description="Drives to derive market demand from")


class DriveFeedRequest(BaseModel):
    student: Optional[Dict[str, Any]] = None
    drives: List[Dict[str, Any]] = Field(default_factory=list)
    applied_drive_ids: List[str] = Field(default_factory=list)
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class ApplyCheckRequest(BaseModel):
    student: Optional[Dict[str, Any]] = None
    drive: Dict[str, Any]
    already_applied: bool = False


class CompletenessRequest(BaseModel):
    profile: Dict[str, Any]


class AnalyticsRequest(BaseModel):
    drives: List[Dict[str, Any]] = Field(default_factory=list)
    applications: List[Dict[str, Any]] = Field(default_factory=list)
    students: List[Dict[str, Any]] = Field(default_factory=list)


def _parse(mapper: Callable[[Dict[str, Any]], T], doc: Dict[str, Any], what: str) -> T:
    try:
        return mapper(doc)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid {what}: {e}")


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/eligibility", summary="Check one student against one drive")
def check_eligibility(request: EligibilityRequest):
    student = _parse(adapter.to_student_view, request.student, "student profile")
    drive = _parse(adapter.to_drive_criteria, request.drive, "drive")
    return engine.evaluate(student, drive)


@router.post("/eligible-students", summary="Ranked eligible students for a drive")
def eligible_students(request: EligibleStudentsRequest):
    """
    Filter the student pool by the drive's criteria and rank the result
    by CGPA (descending), then backlogs (ascending).

    Malformed student documents are skipped and counted as not evaluated.
    """
    drive = _parse(adapter.to_drive_criteria, request.drive, "drive")
    students = adapter.to_student_views(request.students)

    output = engine.eligible_students(
        students,
        drive,
        drive_id=adapter.doc_id(request.drive, "_id", "id", "drive_id"),
    )

    skipped = len(request.students) - len(students)
    return {
        "drive_id": output.drive_id,
        "summary": {
            "total_received": len(request.students),
            "total_skipped": skipped,
            "total_evaluated": output.total_evaluated,
            "total_eligible": output.total_eligible,
            "processing_time_ms": output.processing_time_ms,
        },
        "students": [s.model_dump() for s in output.students],
        "warnings": output.warnings,
    }


@router.post("/skill-gap", summary="Skill gap against current market demand")
def skill_gap(request: SkillGapRequest):
    drives = adapter.to_drive_records(request.drives)
    return engine.skill_gap_report(request.skills, drives)


@router.post("/drive-feed", summary="Drives visible to a student")
def drive_feed(request: DriveFeedRequest):
    student = None
    if request.student is not None:
        student = _parse(adapter.to_student_view, request.student, "student profile")
    drives = adapter.to_drive_records(request.drives)
    return engine.drive_feed(
        drives,
        student=student,
        applied_drive_ids=request.applied_drive_ids,
        search=request.search,
        page=request.page,
        limit=request.limit,
    )


@router.post("/apply-check", summary="Can this student apply to this drive")
def apply_check(request: ApplyCheckRequest):
    drive = _parse(adapter.to_drive_record, request.drive, "drive")
    student = None
    if request.student is not None:
        student = _parse(adapter.to_student_view, request.student, "student profile")

    try:
        engine.check_application(drive, student, already_applied=request.already_applied)
    except ApplicationRejected as e:
        logger.info(f"Application to drive {drive.drive_id} rejected: {e.message}")
        raise HTTPException(
            status_code=e.status_code,
            detail={"message": e.message, "reasons": e.reasons},
        )
    return {"eligible": True}


@router.post("/completeness", summary="Profile completeness percentage")
def completeness(request: CompletenessRequest):
    profile = _parse(adapter.to_student_record, request.profile, "student profile")
    return {"profile_completeness": calculate_completeness(profile)}


@router.post("/analytics", summary="Placement statistics for the TPO dashboard")
def analytics(request: AnalyticsRequest):
    drives = adapter.to_drive_records(request.drives)
    applications = adapter.to_application_records(request.applications)
    students = adapter.to_student_records(request.students)
    return {
        "stats": placement_stats(drives, applications, students),
        "branch_wise": branch_wise_placement(students),
        "skill_distribution": skill_distribution(students),
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Criteria engine health check")
def health_check():
    """Check if the criteria engine is operational."""
    return {"status": "ok", "engine": "placement", "version": engine.version}
