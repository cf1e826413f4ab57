# tests/conftest.py

import datetime
import itertools

import pytest

from core.storage import MemoryStore
from models.catalog import StudentStatus
from models.roster import RosterStore
from models.student import Student
from models.subject import Subject

TODAY = datetime.date(2025, 9, 1)


def make_student(
    id: str = "STU-0001",
    first_name: str = "Sean",
    last_name: str = "Cameron",
    status: StudentStatus = StudentStatus.ACTIVE,
    gpa: float = 3.0,
    attendance: float = 90,
    **overrides,
) -> Student:
    fields = {
        "email": "scameron@example.edu",
        "date_of_birth": datetime.date(2008, 6, 21),
        "enrollment_date": TODAY,
        "grade_level": "Grade 10",
        "course": "DCA (6 Months)",
        "mobile_no": "+1 (555) 010-0000",
        "guardian_name": "Pat Cameron",
    }
    fields.update(overrides)

    return Student(
        id=id,
        first_name=first_name,
        last_name=last_name,
        status=status,
        gpa=gpa,
        attendance=attendance,
        **fields,
    )


def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"STU-{next(counter):04d}"


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def empty_roster(memory_store):
    memory_store.set(RosterStore.STORAGE_KEY, "[]")
    roster = RosterStore(memory_store, id_factory=sequential_ids(), today=lambda: TODAY)
    roster.load()
    return roster


@pytest.fixture
def seeded_roster(memory_store):
    roster = RosterStore(memory_store, id_factory=sequential_ids(), today=lambda: TODAY)
    roster.load()
    return roster


@pytest.fixture
def sample_student():
    return make_student(
        subjects=[Subject("Mathematics", 95), Subject("Physics", 72)],
        notes="Strong in STEM.",
    )


@pytest.fixture
def enrollment_form():
    return {
        "first_name": "Alice",
        "last_name": "Walker",
        "email": " Alice.Walker@Example.edu ",
        "date_of_birth": "2009-03-14",
        "grade_level": "Grade 9",
        "course": "CCA (3 Months)",
        "mobile_no": "+1 (555) 010-1212",
        "guardian_name": "June Walker",
    }
