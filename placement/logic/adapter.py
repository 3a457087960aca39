"""
Data Adapter for the Criteria Engine

Transforms loosely-typed profile and drive documents (camelCase keys, as
stored by the document database) into the engine's contracts.

This is a pure TRANSFORM layer:
- NO eligibility logic
- NO ranking
- NO DB access

Single-document mappers raise pydantic.ValidationError on malformed input.
Bulk mappers skip and log bad documents so one broken profile never breaks
a whole list.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from pydantic import ValidationError

from .contracts import (
    StudentCriteriaView,
    DriveCriteria,
    DriveRecord,
    StudentRecord,
    ApplicationRecord,
)
from .constants import Branch

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Lower-cased label -> canonical branch value
BRANCH_LOOKUP: Dict[str, str] = {b.value.lower(): b.value for b in Branch}


def _pick(doc: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in doc (camelCase first, then snake_case)."""
    for key in keys:
        if key in doc and doc[key] is not None:
            return doc[key]
    return default


def doc_id(doc: Dict[str, Any], *keys: str) -> Optional[str]:
    value = _pick(doc, *keys)
    return str(value) if value is not None else None


def normalize_branch(raw_branch: Optional[str]) -> Optional[str]:
    """
    Map branch labels to the canonical enum value ('cse ' -> 'CSE').
    Unknown labels are returned stripped so validation reports them.
    """
    if raw_branch is None:
        return None
    text = str(raw_branch).strip()
    return BRANCH_LOOKUP.get(text.lower(), text)


def _branches(doc: Dict[str, Any]) -> List[Optional[str]]:
    raw = _pick(doc, "eligibleBranches", "eligible_branches", default=[])
    return [normalize_branch(b) for b in raw]


def _skills(doc: Dict[str, Any], *keys: str) -> List[str]:
    raw = _pick(doc, *keys, default=[])
    if isinstance(raw, str):
        # Comma-separated form coming from simple forms
        raw = raw.split(",")
    return [str(s).strip() for s in raw if str(s).strip()]


# =============================================================================
# SINGLE DOCUMENT MAPPERS
# =============================================================================

def to_student_view(doc: Dict[str, Any]) -> StudentCriteriaView:
    return StudentCriteriaView(
        student_id=doc_id(doc, "_id", "id", "student_id", "userId"),
        name=_pick(doc, "name"),
        cgpa=_pick(doc, "cgpa"),
        backlogs=_pick(doc, "backlogs", default=0),
        branch=normalize_branch(_pick(doc, "branch")),
        skills=_skills(doc, "skills"),
    )


def to_drive_criteria(doc: Dict[str, Any]) -> DriveCriteria:
    return DriveCriteria(
        min_cgpa=_pick(doc, "minCGPA", "min_cgpa"),
        max_backlogs=_pick(doc, "maxBacklogs", "max_backlogs", default=0),
        eligible_branches=_branches(doc),
    )


def to_drive_record(doc: Dict[str, Any]) -> DriveRecord:
    return DriveRecord(
        drive_id=doc_id(doc, "_id", "id", "drive_id"),
        title=_pick(doc, "title", default=""),
        company=_pick(doc, "company", default=""),
        job_role=_pick(doc, "jobRole", "job_role", default=""),
        status=_pick(doc, "status", default="Active"),
        deadline=_pick(doc, "deadline"),
        requirements=_skills(doc, "requirements"),
        salary_max=_pick(doc, "salaryMax", "salary_max"),
        created_at=_pick(doc, "createdAt", "created_at"),
        min_cgpa=_pick(doc, "minCGPA", "min_cgpa", default=0.0),
        max_backlogs=_pick(doc, "maxBacklogs", "max_backlogs", default=0),
        eligible_branches=_branches(doc),
    )


def to_student_record(doc: Dict[str, Any]) -> StudentRecord:
    return StudentRecord(
        student_id=doc_id(doc, "_id", "id", "student_id", "userId"),
        name=_pick(doc, "name"),
        reg_number=_pick(doc, "regNumber", "reg_number"),
        phone=_pick(doc, "phone"),
        branch=normalize_branch(_pick(doc, "branch")),
        cgpa=_pick(doc, "cgpa"),
        backlogs=_pick(doc, "backlogs", default=0),
        skills=_skills(doc, "skills"),
        projects=_pick(doc, "projects", default=[]),
        resume_url=_pick(doc, "resumeUrl", "resume_url"),
        linkedin=_pick(doc, "linkedin"),
        github=_pick(doc, "github"),
        is_placed=_pick(doc, "isPlaced", "is_placed", default=False),
        placed_company=_pick(doc, "placedCompany", "placed_company"),
        placed_package=_pick(doc, "placedPackage", "placed_package"),
    )


def to_application_record(doc: Dict[str, Any]) -> ApplicationRecord:
    return ApplicationRecord(
        application_id=doc_id(doc, "_id", "id", "application_id"),
        drive_id=doc_id(doc, "driveId", "drive_id"),
        student_id=doc_id(doc, "studentId", "student_id"),
        status=_pick(doc, "status", default="Applied"),
        created_at=_pick(doc, "createdAt", "created_at"),
    )


# =============================================================================
# BULK MAPPERS
# =============================================================================

def _map_all(
    docs: Iterable[Dict[str, Any]],
    mapper: Callable[[Dict[str, Any]], T],
    kind: str
) -> List[T]:
    mapped: List[T] = []
    skipped = 0
    for doc in docs:
        try:
            mapped.append(mapper(doc))
        except ValidationError as e:
            skipped += 1
            logger.warning(f"Skipping malformed {kind} {_pick(doc, '_id', 'id')}: {e.error_count()} validation error(s)")
    if skipped:
        logger.info(f"Mapped {len(mapped)} {kind}(s), skipped {skipped}")
    return mapped


def to_student_views(docs: Iterable[Dict[str, Any]]) -> List[StudentCriteriaView]:
    return _map_all(docs, to_student_view, "student")


def to_student_records(docs: Iterable[Dict[str, Any]]) -> List[StudentRecord]:
    return _map_all(docs, to_student_record, "student")


def to_drive_records(docs: Iterable[Dict[str, Any]]) -> List[DriveRecord]:
    return _map_all(docs, to_drive_record, "drive")


def to_application_records(docs: Iterable[Dict[str, Any]]) -> List[ApplicationRecord]:
    return _map_all(docs, to_application_record, "application")
