# models/catalog.py

"""
Fixed option lists offered at the data-entry boundary.
"""

from enum import Enum


class StudentStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    GRADUATED = "Graduated"


COURSE_CATALOG: tuple[str, ...] = (
    "CCA (3 Months)",
    "DCA (6 Months)",
    "ADCA (1 Year)",
    "DTP (3 Months)",
    "Tally Prime (3 Months)",
    "PGDCA (1 Year)",
    "DOAP (1 Year)",
    "ADIT (2 Year)",
    "Hardware & Networking (1 Year)",
    "Web Development (1 Year)",
    "Cyber Security (1 Year)",
)

GRADUATION_LEVEL = "Graduation"

GRADE_LEVELS: tuple[str, ...] = tuple(f"Grade {i}" for i in range(1, 13)) + (
    GRADUATION_LEVEL,
)
