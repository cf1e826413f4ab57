# models/student.py

"""
Represents one enrolled student's profile and academic record.

Stores identifying and personal information, enrollment details (course, grade level,
enrollment date), status, and academic data (attendance percentage, GPA, and an ordered
list of `Subject` entries).

Includes functionality for:
- Validating boundary input (email, course, grade level, ranges)
- Serializing to and from JSON-compatible dictionaries
- Field-for-field equality, used to verify persistence round-trips

Records are read-only once constructed. There is no update-in-place; a record is either
added to the roster whole or removed from it.
"""

from __future__ import annotations

import datetime
import re
from typing import Any, Iterable

from core.utils import require_number
from models.catalog import COURSE_CATALOG, GRADE_LEVELS, StudentStatus
from models.subject import Subject


class Student:

    def __init__(
        self,
        id: str,
        first_name: str,
        last_name: str,
        email: str,
        date_of_birth: datetime.date,
        enrollment_date: datetime.date,
        grade_level: str,
        course: str,
        mobile_no: str,
        guardian_name: str,
        status: StudentStatus = StudentStatus.ACTIVE,
        attendance: float = 100,
        gpa: float = 0.0,
        subjects: Iterable[Subject] = (),
        notes: str = "",
        photo: str | None = None,
    ):
        self._id: str = id
        self._first_name: str = first_name
        self._last_name: str = last_name
        self._email: str = email
        self._date_of_birth: datetime.date = date_of_birth
        self._enrollment_date: datetime.date = enrollment_date
        self._grade_level: str = grade_level
        self._course: str = course
        self._mobile_no: str = mobile_no
        self._guardian_name: str = guardian_name
        self._status: StudentStatus = StudentStatus(status)
        self._attendance: float = attendance
        self._gpa: float = gpa
        self._subjects: tuple[Subject, ...] = tuple(subjects)
        self._notes: str = notes
        # absent photo is None, never ""
        self._photo: str | None = photo or None

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> str:
        return self._email

    @property
    def date_of_birth(self) -> datetime.date:
        return self._date_of_birth

    @property
    def enrollment_date(self) -> datetime.date:
        return self._enrollment_date

    @property
    def grade_level(self) -> str:
        return self._grade_level

    @property
    def course(self) -> str:
        return self._course

    @property
    def mobile_no(self) -> str:
        return self._mobile_no

    @property
    def guardian_name(self) -> str:
        return self._guardian_name

    @property
    def status(self) -> StudentStatus:
        return self._status

    @property
    def attendance(self) -> float:
        return self._attendance

    @property
    def gpa(self) -> float:
        return self._gpa

    @property
    def subjects(self) -> tuple[Subject, ...]:
        return self._subjects

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def photo(self) -> str | None:
        return self._photo

    @property
    def has_photo(self) -> bool:
        return self._photo is not None

    # === persistence and import ===

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "email": self._email,
            "date_of_birth": self._date_of_birth.isoformat(),
            "enrollment_date": self._enrollment_date.isoformat(),
            "grade_level": self._grade_level,
            "course": self._course,
            "status": self._status.value,
            "attendance": self._attendance,
            "gpa": self._gpa,
            "subjects": [subject.to_dict() for subject in self._subjects],
            "notes": self._notes,
            "mobile_no": self._mobile_no,
            "guardian_name": self._guardian_name,
            "photo": self._photo,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Student:
        return cls(
            id=data["id"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            date_of_birth=datetime.date.fromisoformat(data["date_of_birth"]),
            enrollment_date=datetime.date.fromisoformat(data["enrollment_date"]),
            grade_level=data["grade_level"],
            course=data["course"],
            mobile_no=data["mobile_no"],
            guardian_name=data["guardian_name"],
            status=StudentStatus(data["status"]),
            attendance=Student.validate_attendance_input(data["attendance"]),
            gpa=Student.validate_gpa_input(data["gpa"]),
            subjects=[Subject.from_dict(s) for s in data.get("subjects", [])],
            notes=data.get("notes", ""),
            photo=data.get("photo"),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._first_name}, {self._last_name}, {self._email}, {self._status.value})"

    def __str__(self) -> str:
        return f"STUDENT: {self.full_name} - (ID: {self._id})"

    # === data validators ===

    @staticmethod
    def validate_email_input(email: str) -> str:
        """
        Validates and normalizes a student email address.

        Normalizes the input by stripping whitespace and converting to lowercase.
        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Args:
            email: The input email string to validate.

        Returns:
            A normalized, lowercase version of the email if valid.

        Raises:
            ValueError: If the email does not conform to the expected format.
        """
        email = email.strip().lower()
        if not re.fullmatch(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", email):
            raise ValueError(
                "Invalid input. Email must be a valid address with one @ and a domain."
            )
        return email

    @staticmethod
    def validate_required_input(value: str, field_name: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"Invalid input. {field_name} is required.")
        return value

    @staticmethod
    def validate_course_input(course: str) -> str:
        if course not in COURSE_CATALOG:
            raise ValueError(f"Invalid input. '{course}' is not an offered course.")
        return course

    @staticmethod
    def validate_grade_level_input(grade_level: str) -> str:
        if grade_level not in GRADE_LEVELS:
            raise ValueError(f"Invalid input. '{grade_level}' is not a grade level.")
        return grade_level

    @staticmethod
    def validate_date_input(date_str: str) -> datetime.date:
        """
        Parses an ISO-formatted (YYYY-MM-DD) date string.

        Raises:
            ValueError: If the string is not a valid ISO date.
        """
        try:
            return datetime.date.fromisoformat(date_str.strip())
        except ValueError:
            raise ValueError("Invalid input. Dates must use the format YYYY-MM-DD.")

    @staticmethod
    def validate_attendance_input(attendance: float) -> float:
        require_number(attendance, "Attendance")
        if not 0 <= attendance <= 100:
            raise ValueError("Invalid input. Attendance must be between 0 and 100.")
        return attendance

    @staticmethod
    def validate_gpa_input(gpa: float) -> float:
        require_number(gpa, "GPA")
        if not 0.0 <= gpa <= 4.0:
            raise ValueError("Invalid input. GPA must be between 0.0 and 4.0.")
        return gpa
