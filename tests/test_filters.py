# tests/test_filters.py

from conftest import make_student

from core.filters import filter_students
from models.catalog import StudentStatus
from models.seed import seed_students


def test_empty_query_and_all_status_returns_everyone_in_order():
    students = tuple(seed_students())

    assert filter_students(students, "", "All") == students


def test_query_and_status_must_both_match():
    active = make_student(id="STU-0001", first_name="Alice")
    inactive = make_student(
        id="STU-0002", first_name="Alice", status=StudentStatus.INACTIVE
    )

    assert filter_students([active, inactive], "alice", "Active") == (active,)


def test_query_is_case_insensitive_and_matches_id():
    students = seed_students()

    assert [s.id for s in filter_students(students, "stu003")] == ["STU003"]
    assert [s.id for s in filter_students(students, "PRINCE")] == ["STU004"]


def test_query_can_span_fields_across_joining_space():
    students = seed_students()

    assert [s.id for s in filter_students(students, "Alice Johnson STU001")] == [
        "STU001"
    ]
    assert [s.id for s in filter_students(students, "Johnson STU")] == ["STU001"]
    assert filter_students(students, "AliceJohnson") == ()


def test_status_filter_is_exact():
    students = seed_students()

    assert [s.id for s in filter_students(students, "", "Inactive")] == ["STU004"]
    assert filter_students(students, "", "Graduated") == ()
    assert filter_students(students, "", "active") == ()


def test_filter_is_idempotent():
    students = seed_students()

    once = filter_students(students, "a", "Active")
    twice = filter_students(once, "a", "Active")

    assert once == twice
