"""
Ranker

Orders eligible students for TPO review.
"""

from typing import List, Sequence
from .contracts import StudentCriteriaView


def _rank_key(student: StudentCriteriaView):
    return (-student.cgpa, student.backlogs)


def rank_students(
    students: Sequence[StudentCriteriaView]
) -> List[StudentCriteriaView]:
    """
    Rank students by CGPA (descending), then backlogs (ascending).

    sorted() is stable, so students tied on both keys keep their input order.

    Args:
        students: Students to rank

    Returns:
        New sorted list
    """
    return sorted(students, key=_rank_key)
