# cli/model_formatters.py

# anything that renders domain objects or roster-derived data
from textwrap import dedent

import core.formatters as formatters
from core.stats import DashboardStats
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return (
        f"{student.id:<8} | {student.full_name:<20} | {student.grade_level:<10} | "
        f"GPA {formatters.format_gpa(student.gpa)} | {student.status.value}"
    )


def format_student_multiline(student: Student) -> str:
    photo = "On file" if student.has_photo else "[NO PHOTO]"
    notes = student.notes.replace("\n", " ") or "[NO NOTES]"

    return dedent(
        f"""\
        Student {student.id}:
        ... Name: {student.full_name}
        ... Email: {student.email}
        ... Date of Birth: {student.date_of_birth.isoformat()}
        ... Mobile: {student.mobile_no}
        ... Guardian: {student.guardian_name}
        ... Photo: {photo}
        ... Enrolled: {student.enrollment_date.isoformat()}
        ... Grade Level: {student.grade_level}
        ... Course: {student.course}
        ... Status: {student.status.value}
        ... Attendance: {formatters.format_attendance(student.attendance)}
        ... GPA: {formatters.format_gpa(student.gpa)}
        ... Notes: {notes}"""
    )


def format_subjects(student: Student) -> str:
    if not student.subjects:
        return "No subject records yet."

    return "\n".join(
        f"... {subject.name:<20} | {subject.score:>5} | {subject.grade.value}"
        for subject in student.subjects
    )


# === dashboard formatters ===


def format_dashboard(stats: DashboardStats) -> str:
    distribution = "\n".join(
        f"   {grade.value} | {count:>3} {formatters.format_bar(count, stats.total_students)}"
        for grade, count in stats.grade_distribution
    )

    return (
        dedent(
            f"""\
            ... Total Students: {stats.total_students}
            ... Average GPA: {formatters.format_gpa(stats.average_gpa)}
            ... Average Attendance: {formatters.format_average_attendance(stats.average_attendance)}
            ... Grade Distribution:"""
        )
        + f"\n{distribution}"
    )
