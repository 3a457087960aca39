"""
Tests for market skill aggregation, the student drive feed and the apply guard.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from datetime import datetime, timedelta, timezone

import pytest

from placement.logic import (
    PlacementEngine,
    DriveRecord,
    StudentCriteriaView,
    ApplicationRejected,
)
from placement.logic.market import top_market_skills, build_learning_recommendations
from placement.logic.drive_feed import build_drive_feed, assert_can_apply, deadline_passed


def _drive(drive_id, title="SDE", company="Acme", status="Active", min_cgpa=7.0,
           max_backlogs=0, branches=None, requirements=None, deadline=None):
    return DriveRecord(
        drive_id=drive_id,
        title=title,
        company=company,
        status=status,
        min_cgpa=min_cgpa,
        max_backlogs=max_backlogs,
        eligible_branches=branches or [],
        requirements=requirements or [],
        deadline=deadline,
    )


def _student(cgpa=8.0, backlogs=0, branch="CSE", skills=None):
    return StudentCriteriaView(student_id="stu-1", cgpa=cgpa, backlogs=backlogs, branch=branch, skills=skills or [])


# =============================================================================
# MARKET SKILLS
# =============================================================================

def test_top_market_skills_counts_active_drives_only():
    drives = [
        _drive("d1", requirements=["Python", "SQL"]),
        _drive("d2", requirements=["python ", "React"]),
        _drive("d3", status="Closed", requirements=["Java", "Java", "Java"]),
    ]

    skills = top_market_skills(drives)

    assert [(s.skill, s.count) for s in skills] == [("python", 2), ("sql", 1), ("react", 1)]


def test_top_market_skills_limit():
    drives = [_drive("d1", requirements=["a1", "b2", "c3", "d4"])]
    assert [s.skill for s in top_market_skills(drives, limit=2)] == ["a1", "b2"]


def test_learning_recommendations_for_first_missing_skills():
    recs = build_learning_recommendations(["machine learning", "docker", "aws"], limit=2)

    assert [r.skill for r in recs] == ["machine learning", "docker"]
    assert recs[0].resources[0].name == "Learn machine learning on Coursera"
    assert recs[0].resources[0].url == "https://www.coursera.org/search?query=machine+learning"
    assert recs[0].resources[1].url == "https://www.youtube.com/results?search_query=machine+learning+tutorial"


def test_skill_gap_report_uses_market_demand():
    drives = [
        _drive("d1", requirements=["Python", "Docker"]),
        _drive("d2", requirements=["python", "AWS"]),
    ]

    report = PlacementEngine().skill_gap_report(["Python"], drives)

    assert report.top_market_skills == ["python", "docker", "aws"]
    assert report.gap.matched == ["python"]
    assert report.gap.missing == ["docker", "aws"]
    assert report.gap.score == 33
    assert [r.skill for r in report.recommendations] == ["docker", "aws"]


# =============================================================================
# DRIVE FEED
# =============================================================================

def test_feed_without_profile_lists_all_active_drives():
    drives = [_drive("d1"), _drive("d2", status="Draft"), _drive("d3", min_cgpa=9.5)]

    feed = build_drive_feed(drives)

    assert [item.drive.drive_id for item in feed.drives] == ["d1", "d3"]
    assert feed.has_profile is False


def test_feed_hides_ineligible_drives():
    drives = [_drive("d1", min_cgpa=7.0), _drive("d2", min_cgpa=9.0), _drive("d3", branches=["ECE"])]

    feed = build_drive_feed(drives, student=_student(cgpa=8.0, branch="CSE"))

    assert [item.drive.drive_id for item in feed.drives] == ["d1"]
    assert feed.has_profile is True


def test_feed_falls_back_to_all_active_when_nothing_is_eligible():
    drives = [_drive("d1", min_cgpa=9.0), _drive("d2", min_cgpa=9.5)]

    feed = build_drive_feed(drives, student=_student(cgpa=6.0))

    assert feed.total == 2


def test_feed_marks_applied_drives_and_searches():
    drives = [
        _drive("d1", title="Backend Engineer", company="Acme"),
        _drive("d2", title="Analyst", company="Globex"),
        _drive("d3", title="Data Engineer", company="Initech"),
    ]

    feed = build_drive_feed(drives, applied_drive_ids=["d3"], search="ENGINEER")

    assert [(i.drive.drive_id, i.has_applied) for i in feed.drives] == [("d1", False), ("d3", True)]

    by_company = build_drive_feed(drives, search="glob")
    assert [i.drive.drive_id for i in by_company.drives] == ["d2"]


def test_feed_pagination():
    drives = [_drive(f"d{i}") for i in range(1, 24)]

    second = build_drive_feed(drives, page=2, limit=10)
    last = build_drive_feed(drives, page=3, limit=10)

    assert second.total == 23
    assert second.pages == 3
    assert second.page == 2
    assert [i.drive.drive_id for i in second.drives][0] == "d11"
    assert len(last.drives) == 3


# =============================================================================
# APPLY GUARD
# =============================================================================

def _status_of(drive, student, already_applied=False, now=None):
    with pytest.raises(ApplicationRejected) as exc:
        assert_can_apply(drive, student, already_applied, now)
    return exc.value.status_code


def test_apply_guard_order_of_checks():
    past = datetime(2020, 1, 1)
    assert _status_of(_drive("d1", status="Closed"), _student()) == 400
    assert _status_of(_drive("d1", deadline=past), _student()) == 400
    assert _status_of(_drive("d1"), None) == 404
    assert _status_of(_drive("d1", min_cgpa=9.0), _student(cgpa=8.0)) == 403
    assert _status_of(_drive("d1"), _student(), already_applied=True) == 409


def test_apply_guard_carries_reasons():
    with pytest.raises(ApplicationRejected) as exc:
        assert_can_apply(_drive("d1", max_backlogs=0, branches=["CSE", "IT"]), _student(cgpa=7.2, backlogs=2))
    assert exc.value.reasons == ["Backlogs 2 exceed allowed 0"]
    assert exc.value.message == "Not eligible for this drive."


def test_apply_guard_accepts_eligible_student():
    future = datetime.now(timezone.utc) + timedelta(days=7)
    assert_can_apply(_drive("d1", deadline=future), _student())


def test_deadline_compares_naive_and_aware_times():
    drive = _drive("d1", deadline=datetime(2030, 6, 1, 12, 0))
    assert deadline_passed(drive, now=datetime(2030, 6, 1, 12, 1, tzinfo=timezone.utc)) is True
    assert deadline_passed(drive, now=datetime(2030, 6, 1, 11, 59)) is False
    assert deadline_passed(_drive("d2"), now=datetime(2099, 1, 1)) is False
