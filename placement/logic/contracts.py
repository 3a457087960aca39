"""
Data Contracts for the Placement Criteria Engine

Defines Pydantic models for the criteria views (input) and the eligibility,
skill-gap, feed and analytics results (output).
These contracts are the API boundary for the criteria engine: range and type
checks happen at construction, so the engine itself assumes clean values.
"""

from datetime import datetime
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

from .constants import (
    Branch,
    DriveStatus,
    ApplicationStatus,
    MIN_CGPA,
    MAX_CGPA,
)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class StudentCriteriaView(BaseModel):
    """
    The slice of a student profile the criteria engine looks at.
    Built fresh for every evaluation and discarded afterwards.
    """
    # Identity (optional, for tracking rows in ranked lists)
    student_id: Optional[str] = None
    name: Optional[str] = None

    cgpa: float = Field(ge=MIN_CGPA, le=MAX_CGPA)
    backlogs: int = Field(default=0, ge=0)
    branch: Branch
    skills: List[str] = Field(default_factory=list)

    class Config:
        use_enum_values = True
        frozen = True
        allow_inf_nan = False


class DriveCriteria(BaseModel):
    """
    Eligibility thresholds of a drive.
    An empty eligible_branches list means every branch may apply.
    """
    min_cgpa: float = Field(ge=MIN_CGPA, le=MAX_CGPA)
    max_backlogs: int = Field(default=0, ge=0)
    eligible_branches: List[Branch] = Field(default_factory=list)

    class Config:
        use_enum_values = True
        frozen = True
        allow_inf_nan = False


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class EligibilityResult(BaseModel):
    """Pass/fail plus one reason per failed check (empty iff eligible)."""
    eligible: bool
    reasons: List[str] = Field(default_factory=list)


class SkillGapResult(BaseModel):
    """
    Partition of the distinct required skills into matched and missing.
    Both lists hold normalized (lower-cased, trimmed) skills in required order.
    """
    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0, le=100)


class SkillCount(BaseModel):
    """A normalized skill and how often it occurs."""
    skill: str
    count: int = Field(ge=0)


class LearningResource(BaseModel):
    name: str
    url: str


class SkillRecommendation(BaseModel):
    skill: str
    resources: List[LearningResource] = Field(default_factory=list)


class SkillGapReport(BaseModel):
    """Skill gap of one student against the current market demand."""
    student_skills: List[str] = Field(default_factory=list)
    top_market_skills: List[str] = Field(default_factory=list)
    gap: SkillGapResult
    recommendations: List[SkillRecommendation] = Field(default_factory=list)


class EligibleStudentsOutput(BaseModel):
    """Ranked eligible students for one drive, as shown to the TPO."""
    drive_id: Optional[str] = None
    students: List[StudentCriteriaView] = Field(default_factory=list)

    # Summary Statistics
    total_evaluated: int = 0
    total_eligible: int = 0

    # Processing metadata
    processing_time_ms: Optional[float] = None
    warnings: List[str] = Field(default_factory=list)


# =============================================================================
# RECORDS (supplementary features)
# =============================================================================

class DriveRecord(BaseModel):
    """
    A recruitment drive as handed over by the storage layer.
    """
    drive_id: Optional[str] = None
    title: str = ""
    company: str = ""
    job_role: str = ""
    status: DriveStatus = DriveStatus.ACTIVE
    deadline: Optional[datetime] = None
    requirements: List[str] = Field(default_factory=list)
    salary_max: Optional[float] = None
    created_at: Optional[datetime] = None

    # Eligibility criteria
    min_cgpa: float = Field(default=0.0, ge=MIN_CGPA, le=MAX_CGPA)
    max_backlogs: int = Field(default=0, ge=0)
    eligible_branches: List[Branch] = Field(default_factory=list)

    class Config:
        use_enum_values = True
        allow_inf_nan = False

    @property
    def criteria(self) -> DriveCriteria:
        return DriveCriteria(
            min_cgpa=self.min_cgpa,
            max_backlogs=self.max_backlogs,
            eligible_branches=self.eligible_branches,
        )

    @property
    def is_active(self) -> bool:
        return self.status == DriveStatus.ACTIVE.value


class StudentRecord(BaseModel):
    """
    A full student profile. Most fields are optional because profiles are
    filled in gradually; criteria_view() fails when the academic core is missing.
    """
    student_id: Optional[str] = None
    name: Optional[str] = None
    reg_number: Optional[str] = None
    phone: Optional[str] = None
    branch: Optional[Branch] = None
    cgpa: Optional[float] = Field(default=None, ge=MIN_CGPA, le=MAX_CGPA)
    backlogs: int = Field(default=0, ge=0)
    skills: List[str] = Field(default_factory=list)
    projects: List[Dict[str, Any]] = Field(default_factory=list)
    resume_url: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    # Placement outcome
    is_placed: bool = False
    placed_company: Optional[str] = None
    placed_package: Optional[float] = None

    class Config:
        use_enum_values = True
        allow_inf_nan = False

    def criteria_view(self) -> StudentCriteriaView:
        return StudentCriteriaView(
            student_id=self.student_id,
            name=self.name,
            cgpa=self.cgpa,
            backlogs=self.backlogs,
            branch=self.branch,
            skills=self.skills,
        )


class ApplicationRecord(BaseModel):
    application_id: Optional[str] = None
    drive_id: str
    student_id: str
    status: ApplicationStatus = ApplicationStatus.APPLIED
    created_at: Optional[datetime] = None

    class Config:
        use_enum_values = True


class DriveFeedItem(BaseModel):
    drive: DriveRecord
    has_applied: bool = False


class DriveFeedPage(BaseModel):
    """One page of the student drive feed."""
    drives: List[DriveFeedItem] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    pages: int = 0
    has_profile: bool = False


class PlacementStats(BaseModel):
    total_drives: int = 0
    active_drives: int = 0
    total_applications: int = 0
    selected_count: int = 0
    placed_students: int = 0
    total_students: int = 0
    avg_package: float = 0.0  # lakhs per annum
    max_package: float = 0.0  # lakhs per annum
    placement_rate: int = 0  # percent


class BranchPlacement(BaseModel):
    branch: str
    total: int = 0
    placed: int = 0
    avg_cgpa: Optional[float] = None
