# core/stats.py

"""
Roster-wide dashboard metrics computed from a roster snapshot.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from models.grades import (
    GRADE_ORDER,
    Grade,
    classify_score,
    gpa_to_dashboard_percentage,
)
from models.student import Student


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    average_gpa: float
    average_attendance: float
    grade_distribution: tuple[tuple[Grade, int], ...]


def compute_stats(students: Sequence[Student]) -> DashboardStats:
    """
    Computes the totals, averages, and grade distribution for a roster.

    Args:
        students (Sequence[Student]): A roster snapshot. It is read, never mutated.

    Returns:
        DashboardStats:
            - average_gpa and average_attendance are 0 for an empty roster.
            - grade_distribution always lists A, B, C, D, F in that order, including zero counts.
    """
    total = len(students)

    if total == 0:
        average_gpa = 0.0
        average_attendance = 0.0
    else:
        average_gpa = sum(s.gpa for s in students) / total
        average_attendance = sum(s.attendance for s in students) / total

    return DashboardStats(
        total_students=total,
        average_gpa=average_gpa,
        average_attendance=average_attendance,
        grade_distribution=grade_distribution(students),
    )


def grade_distribution(
    students: Sequence[Student],
) -> tuple[tuple[Grade, int], ...]:
    # each student lands in exactly one band via the gpa * 25 heuristic
    counts = Counter(
        classify_score(gpa_to_dashboard_percentage(s.gpa)) for s in students
    )

    return tuple((grade, counts.get(grade, 0)) for grade in GRADE_ORDER)
