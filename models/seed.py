# models/seed.py

"""
Example roster used on first start, and whenever persisted data cannot be read.
"""

import datetime

from models.catalog import StudentStatus
from models.student import Student
from models.subject import Subject


def seed_students() -> list[Student]:
    return [
        Student(
            id="STU001",
            first_name="Alice",
            last_name="Johnson",
            email="alice.j@example.edu",
            date_of_birth=datetime.date(2008, 5, 15),
            enrollment_date=datetime.date(2023, 9, 1),
            grade_level="Grade 10",
            course="ADCA (1 Year)",
            mobile_no="+1 (555) 010-2233",
            guardian_name="Robert Johnson",
            status=StudentStatus.ACTIVE,
            attendance=98,
            gpa=3.8,
            subjects=[
                Subject("Mathematics", 95),
                Subject("Physics", 88),
                Subject("History", 92),
            ],
            notes="Exceptional performance in STEM subjects.",
        ),
        Student(
            id="STU002",
            first_name="Bob",
            last_name="Smith",
            email="bob.smith@example.edu",
            date_of_birth=datetime.date(2007, 11, 20),
            enrollment_date=datetime.date(2022, 9, 1),
            grade_level="Grade 11",
            course="DCA (6 Months)",
            mobile_no="+1 (555) 010-4455",
            guardian_name="Sarah Smith",
            status=StudentStatus.ACTIVE,
            attendance=92,
            gpa=3.2,
            subjects=[
                Subject("Mathematics", 78),
                Subject("English", 85),
                Subject("Biology", 82),
            ],
            notes="Active in basketball team.",
        ),
        Student(
            id="STU003",
            first_name="Charlie",
            last_name="Davis",
            email="charlie.d@example.edu",
            date_of_birth=datetime.date(2009, 2, 10),
            enrollment_date=datetime.date(2024, 1, 15),
            grade_level="Grade 9",
            course="CCA (3 Months)",
            mobile_no="+1 (555) 010-6677",
            guardian_name="Michael Davis",
            status=StudentStatus.ACTIVE,
            attendance=95,
            gpa=3.9,
            subjects=[
                Subject("Art", 98),
                Subject("Geography", 94),
                Subject("Music", 96),
            ],
            notes="New student, very creative.",
        ),
        Student(
            id="STU004",
            first_name="Diana",
            last_name="Prince",
            email="diana.p@example.edu",
            date_of_birth=datetime.date(2008, 8, 25),
            enrollment_date=datetime.date(2023, 9, 1),
            grade_level="Grade 10",
            course="DCA (6 Months)",
            mobile_no="+1 (555) 010-8899",
            guardian_name="Hippolyta Prince",
            status=StudentStatus.INACTIVE,
            attendance=45,
            gpa=2.1,
            subjects=[
                Subject("Mathematics", 62),
                Subject("English", 68),
            ],
            notes="On medical leave.",
        ),
    ]
