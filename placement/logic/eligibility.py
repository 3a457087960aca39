"""
Eligibility Checks

Decides whether a student meets a drive's criteria (CGPA floor, backlog
ceiling, branch list) and filters a student pool down to the eligible ones.
All functions are pure: no I/O, no mutation of inputs.
"""

from typing import List, Sequence

from .contracts import StudentCriteriaView, DriveCriteria, EligibilityResult


def _fmt(value) -> str:
    """Render numbers the way they are stored: 7.0 -> '7', 7.25 -> '7.25'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _cgpa_ok(student: StudentCriteriaView, drive: DriveCriteria) -> bool:
    # Written as "passes only if" so NaN fails
    return student.cgpa >= drive.min_cgpa


def _backlogs_ok(student: StudentCriteriaView, drive: DriveCriteria) -> bool:
    return student.backlogs <= drive.max_backlogs


def _branch_ok(student: StudentCriteriaView, drive: DriveCriteria) -> bool:
    # Empty branch list means the drive is open to every branch
    if not drive.eligible_branches:
        return True
    return student.branch in drive.eligible_branches


def check_student_eligibility(
    student: StudentCriteriaView,
    drive: DriveCriteria
) -> EligibilityResult:
    """
    Check a single student against a drive.

    Every check runs, so the result lists all unmet criteria at once.

    Args:
        student: Student criteria view
        drive: Drive criteria

    Returns:
        EligibilityResult with one reason per failed check
    """
    reasons: List[str] = []

    if not _cgpa_ok(student, drive):
        reasons.append(
            f"CGPA {_fmt(student.cgpa)} is below required {_fmt(drive.min_cgpa)}"
        )
    if not _backlogs_ok(student, drive):
        reasons.append(
            f"Backlogs {_fmt(student.backlogs)} exceed allowed {_fmt(drive.max_backlogs)}"
        )
    if not _branch_ok(student, drive):
        reasons.append(f"Branch {student.branch} not eligible for this drive")

    return EligibilityResult(eligible=not reasons, reasons=reasons)


def meets_criteria(student: StudentCriteriaView, drive: DriveCriteria) -> bool:
    """Same three checks as check_student_eligibility, without the reasons."""
    return (
        _cgpa_ok(student, drive)
        and _backlogs_ok(student, drive)
        and _branch_ok(student, drive)
    )


def filter_eligible(
    students: Sequence[StudentCriteriaView],
    drive: DriveCriteria
) -> List[StudentCriteriaView]:
    """
    Keep only the students who meet the drive's criteria.

    Args:
        students: Candidate pool
        drive: Drive criteria

    Returns:
        New list, input order preserved
    """
    return [s for s in students if meets_criteria(s, drive)]
