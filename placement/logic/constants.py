"""
Criteria Engine Constants

Defines branch and status enums, matching thresholds, completeness weights
and analytics limits used by the placement criteria engine.
Tunable values are read from config (environment) with safe defaults.
"""

from enum import Enum
from typing import Dict

import config


# =============================================================================
# ENUMS
# =============================================================================

class Branch(str, Enum):
    """Academic branches a student can belong to / a drive can accept."""
    CSE = "CSE"
    IT = "IT"
    ECE = "ECE"
    EEE = "EEE"
    ME = "ME"
    CE = "CE"
    MCA = "MCA"
    MBA = "MBA"
    OTHER = "Other"


class DriveStatus(str, Enum):
    """Lifecycle states of a recruitment drive."""
    DRAFT = "Draft"
    ACTIVE = "Active"
    CLOSED = "Closed"
    COMPLETED = "Completed"


class ApplicationStatus(str, Enum):
    """Application pipeline states."""
    APPLIED = "Applied"
    SHORTLISTED = "Shortlisted"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    SELECTED = "Selected"
    REJECTED = "Rejected"


# =============================================================================
# ACADEMIC BOUNDS
# =============================================================================

MIN_CGPA = 0.0
MAX_CGPA = 10.0

# =============================================================================
# SKILL MATCHING
# =============================================================================

# Fuzzy match: substring containment either way, or edit distance <= this
SKILL_MATCH_MAX_DISTANCE: int = config.SKILL_MATCH_MAX_DISTANCE

# Number of distinct in-demand skills compared against a student
TOP_MARKET_SKILLS: int = config.TOP_MARKET_SKILLS

# Number of missing skills that get learning resources attached
MAX_RESOURCE_SKILLS: int = config.MAX_RESOURCE_SKILLS

COURSERA_SEARCH_URL = "https://www.coursera.org/search?query={query}"
YOUTUBE_SEARCH_URL = "https://www.youtube.com/results?search_query={query}"

# =============================================================================
# PROFILE COMPLETENESS
# =============================================================================

# Weights sum to 100
COMPLETENESS_WEIGHTS: Dict[str, int] = {
    "name": 10,
    "reg_number": 10,
    "phone": 5,
    "skills": 15,
    "projects": 20,
    "resume_url": 20,
    "cgpa": 10,
    "linkedin": 5,
    "github": 5,
}

# =============================================================================
# DRIVE FEED / ANALYTICS
# =============================================================================

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

SKILL_DISTRIBUTION_LIMIT = 20

# Packages are stored in rupees per annum; analytics report lakhs (1e5)
RUPEES_PER_LAKH = 100000
