# models/roster.py

"""
The RosterStore is the central data object of the program and the "source of truth" for all student records.

Students are held in an ordered list and written to a single named slot of a `KeyValueStore` as one JSON
document. The store owns the load-at-startup / save-on-every-mutation round-trip.

Provides functions for loading the roster (falling back to the seed roster when stored data is missing or
unreadable), saving it, and adding, enrolling, removing, and finding students. Readers receive immutable
snapshots (tuples of read-only `Student` objects) and never mutate the roster directly.

Student ids are unique for the life of the process: the store remembers every id it has loaded, generated,
or accepted, and never hands out or accepts one of them again, even after the student is removed.
"""

from __future__ import annotations

import datetime
import json
from typing import Any, Callable

from core.logging_config import get_logger, log_with_context
from core.response import ErrorCode, Response
from core.storage import KeyValueStore
from core.utils import generate_student_id
from models.seed import seed_students
from models.student import Student

logger = get_logger("roster")
storage_logger = get_logger("storage")


class RosterStore:
    STORAGE_KEY = "student_ledger_data"
    MAX_ID_ATTEMPTS = 100

    def __init__(
        self,
        storage: KeyValueStore,
        id_factory: Callable[[], str] = generate_student_id,
        today: Callable[[], datetime.date] = datetime.date.today,
    ):
        self._storage: KeyValueStore = storage
        self._id_factory: Callable[[], str] = id_factory
        self._today: Callable[[], datetime.date] = today
        self._students: list[Student] = []
        self._issued_ids: set[str] = set()
        self._is_loaded: bool = False

    # === properties ===

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    def snapshot(self) -> tuple[Student, ...]:
        return self.students

    # === persistence and import ===

    def load(self) -> Response:
        """
        Reads the persisted roster from storage and replaces the in-memory roster with it.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - Always True. Missing or unreadable data falls back to the seed roster.
                - detail (str | None):
                    - A short description of where the roster came from.
                - error (ErrorCode | str | None):
                    - Always None.
                - status_code (int | None):
                    - 200
                - data (dict | None): Payload with the following keys:
                    - "records" (tuple[Student, ...]): A snapshot of the loaded roster.
                    - "source" (str): "storage" if persisted data was used, "seed" otherwise.

        Notes:
            - This method mutates `RosterStore` state and enables `save()` for the rest of the session.
            - Malformed data (invalid or too deeply nested JSON, a non-list document, an undeserializable
              or out-of-range record, a duplicate record)
              is logged on the storage channel and never surfaced as a failure.
            - A seed fallback is not written back until the next mutation.
        """
        source = "storage"

        try:
            raw = self._storage.get(self.STORAGE_KEY)

            if raw is None:
                source = "seed"
                students = seed_students()
                log_with_context(
                    storage_logger,
                    "INFO",
                    "No persisted roster found, using seed roster.",
                    context={"key": self.STORAGE_KEY},
                )
            else:
                students = self._deserialize_roster(raw)

        except (ValueError, TypeError, KeyError, OSError, RecursionError) as e:
            source = "seed"
            students = seed_students()
            log_with_context(
                storage_logger,
                "WARNING",
                f"Failed to parse persisted roster, using seed roster: {e}",
                context={"key": self.STORAGE_KEY},
            )

        self._students = students
        self._issued_ids.update(student.id for student in students)
        self._is_loaded = True

        log_with_context(
            logger,
            "INFO",
            "Roster loaded.",
            extra_data={"records": len(students), "source": source},
        )

        return Response.succeed(
            detail=f"Roster loaded from {source}.",
            data={
                "records": self.students,
                "source": source,
            },
        )

    def save(self) -> Response:
        """
        Serializes the full roster and overwrites the persisted slot.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was written to storage.
                    - False if the roster has not been loaded yet, or the write failed.
                - detail (str | None):
                    - On success, a simple confirmation message.
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.LOGIC_ERROR` if called before `load()` has completed.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record is not JSON serializable.
                    - `ErrorCode.STORAGE_ERROR` if the storage backend raised `OSError`.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - Refusing to save before `load()` prevents an empty roster from overwriting existing data.
            - This intentionally overwrites the existing slot.
        """
        if not self._is_loaded:
            return Response.fail(
                detail="Roster cannot be saved before it has been loaded.",
                error=ErrorCode.LOGIC_ERROR,
            )

        try:
            self._storage.set(self.STORAGE_KEY, self.serialize())

        except (ValueError, TypeError) as e:
            log_with_context(
                storage_logger, "ERROR", f"Roster is not serializable: {e}"
            )
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            log_with_context(
                storage_logger,
                "ERROR",
                f"Failed to write roster: {e}",
                context={"key": self.STORAGE_KEY},
            )
            return Response.fail(
                detail=f"Failed to write roster to storage: {e}",
                error=ErrorCode.STORAGE_ERROR,
            )

        else:
            log_with_context(
                storage_logger,
                "DEBUG",
                "Roster saved.",
                extra_data={"records": len(self._students)},
            )
            return Response.succeed(detail="Roster successfully saved.")

    def serialize(self) -> str:
        return json.dumps(
            [student.to_dict() for student in self._students], indent=2, sort_keys=True
        )

    def _deserialize_roster(self, raw: str) -> list[Student]:
        """
        Parses a persisted roster document.

        Raises:
            - ValueError:
                - If the document is not valid JSON (`json.JSONDecodeError` is a `ValueError`).
                - If the document is not a list.
                - If two records share an id.
            - KeyError, TypeError:
                - If a record dictionary is missing fields or has the wrong structure.
        """
        data: Any = json.loads(raw)

        if not isinstance(data, list):
            raise ValueError("Expected the persisted roster to contain a list.")

        students = [Student.from_dict(record) for record in data]

        seen: set[str] = set()
        for student in students:
            if student.id in seen:
                raise ValueError(f"Duplicate student id in persisted roster: {student.id}")
            seen.add(student.id)

        return students

    # === data accessors ===

    def find_student_by_id(self, student_id: str) -> Response:
        """
        Finds a `Student` object by id.

        Args:
            student_id (str): The id of the student, e.g. "STU-7K2Q".

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - The id comparison is exact (case-sensitive, no trimming).
        """
        for student in self._students:
            if student.id == student_id:
                return Response.succeed(
                    data={
                        "record": student,
                    },
                )

        return Response.fail(
            detail=f"No matching student found for {student_id}.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    # === data manipulators ===

    def add_student(self, student: Student) -> Response:
        """
        Appends a `Student` object to the roster and persists the roster.

        Args:
            student (Student): The complete record to be added.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was added.
                    - False if its id has already been issued during this session.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if the id is not unique.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.
                        - "saved" (bool): Whether the roster was persisted afterwards.
                    - On failure:
                        - None

        Notes:
            - Duplicate names and emails are allowed; only the id must be unique.
            - Persistence is fire-and-forget: a failed save is logged and reported in "saved",
              but the student remains in the in-memory roster.
        """
        try:
            self.require_unique_student_id(student.id)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        self._students.append(student)
        self._issued_ids.add(student.id)

        log_with_context(
            logger, "INFO", "Student added.", context={"student_id": student.id}
        )

        save_response = self.save()

        return Response.succeed(
            detail=f"{student.full_name} successfully added to the roster.",
            data={
                "record": student,
                "saved": save_response.success,
            },
        )

    def enroll_student(
        self,
        first_name: str,
        last_name: str,
        email: str,
        date_of_birth: str,
        grade_level: str,
        course: str,
        mobile_no: str,
        guardian_name: str,
        photo: str | None = None,
    ) -> Response:
        """
        Validates enrollment input, builds a new `Student` with creation defaults, and adds it to the roster.

        Used by both administrator enrollment and student self-registration.

        Args:
            first_name (str): Required.
            last_name (str): Required.
            email (str): A valid email address; normalized to lowercase.
            date_of_birth (str): An ISO-formatted date (YYYY-MM-DD).
            grade_level (str): A member of `GRADE_LEVELS`.
            course (str): A member of `COURSE_CATALOG`.
            mobile_no (str): Required.
            guardian_name (str): Required.
            photo (str | None): An optional data-URI string.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the new student was created and added.
                    - False if any field is invalid or no unused id could be generated.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if a field fails validation.
                    - `ErrorCode.INTERNAL_ERROR` if id generation is exhausted.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The new `Student` object.
                        - "saved" (bool): Whether the roster was persisted afterwards.
                    - On failure:
                        - None

        Notes:
            - New students are Active, with 100% attendance, a GPA of 0, no subjects, and no notes.
            - The enrollment date is today's date.
        """
        try:
            student = Student(
                id=self.generate_unique_id(),
                first_name=Student.validate_required_input(first_name, "First name"),
                last_name=Student.validate_required_input(last_name, "Last name"),
                email=Student.validate_email_input(email),
                date_of_birth=Student.validate_date_input(date_of_birth),
                enrollment_date=self._today(),
                grade_level=Student.validate_grade_level_input(grade_level),
                course=Student.validate_course_input(course),
                mobile_no=Student.validate_required_input(mobile_no, "Mobile number"),
                guardian_name=Student.validate_required_input(
                    guardian_name, "Guardian name"
                ),
                photo=photo,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except RuntimeError as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        return self.add_student(student)

    def remove_student(self, student_id: str) -> Response:
        """
        Removes the student with the given id from the roster and persists the roster.

        Args:
            student_id (str): The id of the student to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - Always True. Removing an unknown id is a no-op.
                - detail (str | None):
                    - A simple confirmation message.
                - error (ErrorCode | str | None):
                    - Always None.
                - status_code (int | None):
                    - 200
                - data (dict | None): Payload with the following keys:
                    - "removed" (bool): True if a student was removed.
                    - "saved" (bool): Whether the roster was persisted afterwards.

        Notes:
            - Removal is permanent. The id stays reserved and will never be issued again.
            - The roster is only saved when a student was actually removed.
        """
        remaining = [s for s in self._students if s.id != student_id]

        if len(remaining) == len(self._students):
            return Response.succeed(
                detail=f"No student with id {student_id}; nothing removed.",
                data={
                    "removed": False,
                    "saved": False,
                },
            )

        self._students = remaining

        log_with_context(
            logger, "INFO", "Student removed.", context={"student_id": student_id}
        )

        save_response = self.save()

        return Response.succeed(
            detail="Student successfully removed from the roster.",
            data={
                "removed": True,
                "saved": save_response.success,
            },
        )

    # === data validators ===

    def require_unique_student_id(self, student_id: str) -> None:
        """
        Validates that an id has never been issued during this session.

        Raises:
            ValueError: If the id belongs to a current or previously removed student.
        """
        if student_id in self._issued_ids:
            raise ValueError(f"The student id '{student_id}' has already been issued.")

    # === helper methods ===

    def generate_unique_id(self) -> str:
        """
        Draws ids from the id factory until one has not been issued before.

        Raises:
            RuntimeError: If no unused id is produced within `MAX_ID_ATTEMPTS` draws.
        """
        for _ in range(self.MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in self._issued_ids:
                return candidate

        raise RuntimeError(
            f"Could not generate an unused student id after {self.MAX_ID_ATTEMPTS} attempts."
        )
