"""
Profile Completeness

Weighted checklist over the optional parts of a student profile.
"""

from .contracts import StudentRecord
from .constants import COMPLETENESS_WEIGHTS


def calculate_completeness(profile: StudentRecord) -> int:
    """
    Sum the weights of the filled-in profile fields.

    Returns:
        Completeness percentage, 0-100
    """
    filled = {
        "name": bool(profile.name),
        "reg_number": bool(profile.reg_number),
        "phone": bool(profile.phone),
        "skills": len(profile.skills) > 0,
        "projects": len(profile.projects) > 0,
        "resume_url": bool(profile.resume_url),
        # A CGPA of 0 counts as not filled in
        "cgpa": bool(profile.cgpa),
        "linkedin": bool(profile.linkedin),
        "github": bool(profile.github),
    }
    return sum(weight for field, weight in COMPLETENESS_WEIGHTS.items() if filled[field])
