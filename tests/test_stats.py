# tests/test_stats.py

import pytest
from conftest import make_student

from core.stats import compute_stats
from models.grades import Grade
from models.seed import seed_students


def test_empty_roster_stats():
    stats = compute_stats(())

    assert stats.total_students == 0
    assert stats.average_gpa == 0
    assert stats.average_attendance == 0
    assert stats.grade_distribution == (
        (Grade.A, 0),
        (Grade.B, 0),
        (Grade.C, 0),
        (Grade.D, 0),
        (Grade.F, 0),
    )


def test_single_student_distribution():
    stats = compute_stats([make_student(gpa=3.8)])

    assert stats.total_students == 1
    assert dict(stats.grade_distribution) == {
        Grade.A: 1,
        Grade.B: 0,
        Grade.C: 0,
        Grade.D: 0,
        Grade.F: 0,
    }


def test_seed_roster_stats():
    students = seed_students()
    stats = compute_stats(students)

    assert stats.total_students == 4
    assert stats.average_gpa == pytest.approx((3.8 + 3.2 + 3.9 + 2.1) / 4)
    assert stats.average_attendance == pytest.approx((98 + 92 + 95 + 45) / 4)
    # 3.8 -> 95 A, 3.2 -> 80 B, 3.9 -> 97.5 A, 2.1 -> 52.5 F
    assert stats.grade_distribution == (
        (Grade.A, 2),
        (Grade.B, 1),
        (Grade.C, 0),
        (Grade.D, 0),
        (Grade.F, 1),
    )


def test_distribution_counts_sum_to_roster_size():
    students = [
        make_student(id=f"STU-{i:04d}", gpa=gpa)
        for i, gpa in enumerate([0.0, 1.5, 2.4, 2.8, 3.0, 3.3, 4.0])
    ]

    stats = compute_stats(students)

    assert [grade for grade, _ in stats.grade_distribution] == list("ABCDF")
    assert sum(count for _, count in stats.grade_distribution) == len(students)


def test_compute_stats_does_not_mutate_roster():
    students = seed_students()
    before = [s.to_dict() for s in students]

    compute_stats(students)

    assert [s.to_dict() for s in students] == before
