# models/grades.py

"""
Letter-grade policy shared by subject grading and the dashboard distribution.

`classify_score()` is the only place grade bands are defined. The dashboard
converts a GPA into an approximate percentage with `gpa_to_dashboard_percentage()`
before classifying it; that conversion is a display heuristic and is not used
for subject-level grading.
"""

from enum import Enum


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


# inclusive lower bounds, highest band first
GRADE_BANDS: tuple[tuple[float, Grade], ...] = (
    (90, Grade.A),
    (80, Grade.B),
    (70, Grade.C),
    (60, Grade.D),
)

GRADE_ORDER: tuple[Grade, ...] = (Grade.A, Grade.B, Grade.C, Grade.D, Grade.F)


def classify_score(score: float) -> Grade:
    """
    Maps a numeric score to a letter grade.

    Args:
        score (float): The score to classify. Values outside [0, 100] are accepted; bounding is the caller's job.

    Returns:
        The highest `Grade` whose lower bound the score meets, or `Grade.F`.
    """
    for lower_bound, grade in GRADE_BANDS:
        if score >= lower_bound:
            return grade

    return Grade.F


def gpa_to_dashboard_percentage(gpa: float) -> float:
    """
    Rough GPA to percentage conversion used only for the dashboard grade distribution.

    Args:
        gpa (float): A GPA on the 0.0 - 4.0 scale.

    Returns:
        `gpa * 25`, i.e. 4.0 maps to 100.
    """
    return gpa * 25
