# core/report.py

"""
Semester report generation.

`export_csv()` is a pure serializer: every data field is wrapped in double quotes and embedded
quotes are not escaped, so values containing `"` produce a malformed row. `generate_report()` is
the download boundary; it waits a fixed delay for the progress indicator, serializes the roster,
and writes `Semester_Report_<year>.csv` into a directory.
"""

import datetime
import os
import time
from collections.abc import Callable, Sequence

from core.formatters import format_attendance, format_gpa
from core.logging_config import get_logger, log_with_context
from core.response import ErrorCode, Response
from models.student import Student

logger = get_logger("report")

REPORT_MIME_TYPE = "text/csv"
REPORT_DELAY_SECONDS = 2.0

REPORT_HEADERS: tuple[str, ...] = (
    "ID",
    "First Name",
    "Last Name",
    "Email",
    "Grade Level",
    "Course",
    "GPA",
    "Attendance",
    "Status",
    "Guardian",
    "Mobile",
)


def report_row(student: Student) -> list[str]:
    return [
        student.id,
        student.first_name,
        student.last_name,
        student.email,
        student.grade_level,
        student.course,
        format_gpa(student.gpa),
        format_attendance(student.attendance),
        student.status.value,
        student.guardian_name,
        student.mobile_no,
    ]


def export_csv(students: Sequence[Student]) -> str:
    """
    Serializes a roster into the semester report CSV text.

    Args:
        students (Sequence[Student]): A roster snapshot, exported in order.

    Returns:
        The header line followed by one line per student, joined with "\\n" and no trailing newline.
    """
    lines = [",".join(REPORT_HEADERS)]

    for student in students:
        lines.append(",".join(f'"{cell}"' for cell in report_row(student)))

    return "\n".join(lines)


def report_filename(year: int | None = None) -> str:
    if year is None:
        year = datetime.date.today().year
    return f"Semester_Report_{year}.csv"


def generate_report(
    students: Sequence[Student],
    dir_path: str,
    year: int | None = None,
    delay: float = REPORT_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> Response:
    """
    Serializes a roster and writes the semester report into a directory.

    Args:
        students (Sequence[Student]): A roster snapshot.
        dir_path (str): The directory to write into; created if missing.
        year (int | None): The year in the filename. Defaults to the current year.
        delay (float): Seconds to wait before generating. The wait is unconditional and not cancellable.
        sleep (Callable[[float], None]): The wait function, replaceable in tests.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the report was written.
                - False for any error during serialization or writing.
            - detail (str | None):
                - On success, a confirmation message naming the file.
                - On failure, a description of the error.
            - error (ErrorCode | str | None):
                - `ErrorCode.STORAGE_ERROR` if the file could not be written.
                - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "path" (str): The written file path.
                    - "mime_type" (str): Always "text/csv".
                    - "rows" (int): The number of student rows.
                - On failure:
                    - None

    Notes:
        - Failures are logged on the report channel. Callers are not expected to show them to the user.
    """
    sleep(delay)

    try:
        content = export_csv(students)

        os.makedirs(dir_path, exist_ok=True)
        path = os.path.join(dir_path, report_filename(year))

        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    except OSError as e:
        log_with_context(
            logger,
            "ERROR",
            f"Failed to generate report: {e}",
            context={"dir_path": dir_path},
        )
        return Response.fail(
            detail=f"Failed to write report: {e}",
            error=ErrorCode.STORAGE_ERROR,
        )

    except Exception as e:
        log_with_context(
            logger, "ERROR", f"Failed to generate report: {e}", exc_info=True
        )
        return Response.fail(
            detail=f"Unexpected error: {e}",
            error=ErrorCode.INTERNAL_ERROR,
        )

    else:
        log_with_context(
            logger,
            "INFO",
            "Report generated.",
            context={"path": path},
            extra_data={"rows": len(students)},
        )
        return Response.succeed(
            detail=f"Report saved to {path}.",
            data={
                "path": path,
                "mime_type": REPORT_MIME_TYPE,
                "rows": len(students),
            },
        )
