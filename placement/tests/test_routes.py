"""
API tests for the placement router.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


DRIVE = {
    "_id": "drive-1",
    "title": "SDE",
    "company": "Acme",
    "status": "Active",
    "minCGPA": 7.0,
    "maxBacklogs": 0,
    "eligibleBranches": ["CSE", "IT"],
    "requirements": ["Python", "SQL"],
}


def test_health():
    response = client.get("/placement/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_eligibility_reports_reasons():
    response = client.post("/placement/eligibility", json={
        "student": {"cgpa": 7.2, "backlogs": 2, "branch": "CSE"},
        "drive": DRIVE,
    })

    assert response.status_code == 200
    assert response.json() == {"eligible": False, "reasons": ["Backlogs 2 exceed allowed 0"]}


def test_eligibility_rejects_malformed_profile():
    response = client.post("/placement/eligibility", json={
        "student": {"cgpa": "high", "branch": "CSE"},
        "drive": DRIVE,
    })

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid student profile")


def test_eligible_students_are_ranked_and_malformed_ones_skipped():
    response = client.post("/placement/eligible-students", json={
        "drive": DRIVE,
        "students": [
            {"_id": "a", "cgpa": 8.9, "backlogs": 0, "branch": "CSE"},
            {"_id": "b", "cgpa": 9.4, "backlogs": 0, "branch": "ECE"},
            {"_id": "c", "cgpa": 9.2, "backlogs": 0, "branch": "IT"},
            {"_id": "d", "branch": "CSE"},
            {"_id": "e", "cgpa": 7.5, "backlogs": 1, "branch": "CSE"},
        ],
    })

    assert response.status_code == 200
    body = response.json()
    assert [s["student_id"] for s in body["students"]] == ["c", "a"]
    assert body["summary"]["total_skipped"] == 1
    assert body["summary"]["total_evaluated"] == 4
    assert body["summary"]["total_eligible"] == 2
    assert body["drive_id"] == "drive-1"


def test_skill_gap():
    response = client.post("/placement/skill-gap", json={
        "skills": ["python"],
        "drives": [DRIVE, {**DRIVE, "_id": "drive-2", "requirements": ["python", "Docker"]}],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["top_market_skills"] == ["python", "sql", "docker"]
    assert body["gap"]["score"] == 33
    assert [r["skill"] for r in body["recommendations"]] == ["sql", "docker"]


def test_drive_feed_marks_applied():
    response = client.post("/placement/drive-feed", json={
        "student": {"cgpa": 8.0, "branch": "CSE"},
        "drives": [DRIVE, {**DRIVE, "_id": "drive-2", "minCGPA": 9.0}],
        "applied_drive_ids": ["drive-1"],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["drives"][0]["has_applied"] is True
    assert body["has_profile"] is True


def test_apply_check_rejections():
    ineligible = client.post("/placement/apply-check", json={
        "student": {"cgpa": 7.2, "backlogs": 2, "branch": "CSE"},
        "drive": DRIVE,
    })
    assert ineligible.status_code == 403
    assert ineligible.json()["detail"]["reasons"] == ["Backlogs 2 exceed allowed 0"]

    duplicate = client.post("/placement/apply-check", json={
        "student": {"cgpa": 8.0, "branch": "CSE"},
        "drive": DRIVE,
        "already_applied": True,
    })
    assert duplicate.status_code == 409

    no_profile = client.post("/placement/apply-check", json={"drive": DRIVE})
    assert no_profile.status_code == 404


def test_apply_check_accepts():
    response = client.post("/placement/apply-check", json={
        "student": {"cgpa": 8.0, "branch": "IT"},
        "drive": DRIVE,
    })
    assert response.status_code == 200
    assert response.json() == {"eligible": True}


def test_completeness():
    response = client.post("/placement/completeness", json={
        "profile": {"name": "Asha", "regNumber": "21CS042", "skills": ["Python"], "cgpa": 8.2},
    })
    assert response.status_code == 200
    assert response.json() == {"profile_completeness": 45}


def test_analytics():
    response = client.post("/placement/analytics", json={
        "drives": [DRIVE],
        "applications": [{"driveId": "drive-1", "studentId": "s1", "status": "Selected"}],
        "students": [
            {"_id": "s1", "branch": "CSE", "cgpa": 8.0, "isPlaced": True, "placedPackage": 600000},
            {"_id": "s2", "branch": "IT", "cgpa": 7.0},
        ],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["stats"]["placement_rate"] == 50
    assert body["stats"]["avg_package"] == 6.0
    assert body["stats"]["selected_count"] == 1
    assert [row["branch"] for row in body["branch_wise"]] == ["CSE", "IT"]
