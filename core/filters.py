# core/filters.py

"""
Search and status filtering over a roster snapshot.

A student matches a query when the lowercased query is a substring of
"<first name> <last name> <id>" (lowercased). Fields are joined by single spaces,
so a query can span fields only across those spaces.
"""

from collections.abc import Iterable

from models.student import Student

STATUS_FILTER_ALL = "All"


def search_text(student: Student) -> str:
    return f"{student.first_name} {student.last_name} {student.id}".lower()


def matches_query(student: Student, query: str) -> bool:
    return query.lower() in search_text(student)


def matches_status(student: Student, status: str) -> bool:
    return status == STATUS_FILTER_ALL or status == student.status.value


def filter_students(
    students: Iterable[Student],
    query: str = "",
    status: str = STATUS_FILTER_ALL,
) -> tuple[Student, ...]:
    """
    Returns the students that match both the search query and the status filter.

    Args:
        students (Iterable[Student]): A roster snapshot.
        query (str): Free-text search. An empty query matches everyone.
        status (str): "All", or an exact status value such as "Active".

    Returns:
        A tuple of matching students in their original order.
    """
    return tuple(
        student
        for student in students
        if matches_query(student, query) and matches_status(student, status)
    )
