# cli/menus/students_menu.py

"""
Manage Students menu for the Student Ledger CLI.

This module defines the administrator interface for managing `Student` records, including:
- Enrolling new students
- Permanently removing students
- Viewing student records (individual, searched, or filtered by status)

It also provides the enrollment form prompts shared with student self-registration.

All operations are routed through the `RosterStore` API, which persists the roster after every change.
"""

from typing import Any, cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.filters import STATUS_FILTER_ALL, filter_students
from core.utils import encode_photo_data_uri
from models.catalog import COURSE_CATALOG, GRADE_LEVELS, StudentStatus
from models.roster import RosterStore
from models.student import Student

STATUS_FILTER_OPTIONS: tuple[str, ...] = (STATUS_FILTER_ALL,) + tuple(
    status.value for status in StudentStatus
)


def run(roster: RosterStore) -> None:
    """
    Top-level loop with dispatch for the Manage Students menu.

    Args:
        roster (RosterStore): The loaded roster.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Manage Students")
    options = [
        ("Add Student", add_student),
        ("Remove Student", find_and_remove_student),
        ("View Students", view_students),
    ]
    zero_option = "Return to Admin Dashboard"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(roster)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Admin Dashboard")


# === add student ===


def add_student(roster: RosterStore) -> None:
    """
    Loops a prompt to enroll new students.

    Args:
        roster (RosterStore): The loaded roster.

    Notes:
        - The roster is saved by `RosterStore` as soon as a student is added.
    """
    while True:
        form = prompt_enrollment_form()

        if form is not None:
            roster_response = roster.enroll_student(**form)

            if not roster_response.success:
                helpers.display_response_failure(roster_response)
                print(f"\n{form['first_name']} {form['last_name']} was not added.")

            else:
                student = roster_response.data["record"]
                print(f"\n{roster_response.detail}")
                print(f"Assigned Student ID: {student.id}")

        if not helpers.confirm_action(
            "Would you like to continue adding new students?"
        ):
            break

    helpers.returning_to("Manage Students menu")


def prompt_enrollment_form() -> dict[str, Any] | None:
    """
    Collects and validates the fields needed to enroll a student.

    Returns:
        A dictionary of keyword arguments for `RosterStore.enroll_student()`, or None if the user cancels.

    Notes:
        - Every required prompt treats blank input as 'cancel'.
        - The photo prompt is optional; blank input means no photo.
    """
    first_name = helpers.prompt_validated_input_or_cancel(
        "Enter first name (leave blank to cancel):",
        lambda x: Student.validate_required_input(x, "First name"),
    )
    if first_name is MenuSignal.CANCEL:
        return None

    last_name = helpers.prompt_validated_input_or_cancel(
        "Enter last name (leave blank to cancel):",
        lambda x: Student.validate_required_input(x, "Last name"),
    )
    if last_name is MenuSignal.CANCEL:
        return None

    email = helpers.prompt_validated_input_or_cancel(
        "Enter email address (leave blank to cancel):",
        Student.validate_email_input,
    )
    if email is MenuSignal.CANCEL:
        return None

    date_of_birth = helpers.prompt_validated_input_or_cancel(
        "Enter date of birth as YYYY-MM-DD (leave blank to cancel):",
        lambda x: Student.validate_date_input(x).isoformat(),
    )
    if date_of_birth is MenuSignal.CANCEL:
        return None

    mobile_no = helpers.prompt_validated_input_or_cancel(
        "Enter mobile number (leave blank to cancel):",
        lambda x: Student.validate_required_input(x, "Mobile number"),
    )
    if mobile_no is MenuSignal.CANCEL:
        return None

    guardian_name = helpers.prompt_validated_input_or_cancel(
        "Enter guardian name (leave blank to cancel):",
        lambda x: Student.validate_required_input(x, "Guardian name"),
    )
    if guardian_name is MenuSignal.CANCEL:
        return None

    grade_level = helpers.prompt_selection_from_list(list(GRADE_LEVELS), "Grade Levels")
    if grade_level is MenuSignal.CANCEL:
        return None

    course = helpers.prompt_selection_from_list(list(COURSE_CATALOG), "Courses")
    if course is MenuSignal.CANCEL:
        return None

    return {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "date_of_birth": date_of_birth,
        "grade_level": grade_level,
        "course": course,
        "mobile_no": mobile_no,
        "guardian_name": guardian_name,
        "photo": prompt_photo_or_none(),
    }


def prompt_photo_or_none() -> str | None:
    while True:
        photo_path = helpers.prompt_user_input_or_none(
            "Enter path to a photo (leave blank for no photo):"
        )

        if photo_path is None:
            return None

        try:
            return encode_photo_data_uri(photo_path)

        except OSError as e:
            print(f"\n[ERROR] Could not read photo: {e}")
            print("Please try again.")


# === remove student ===


def find_and_remove_student(roster: RosterStore) -> None:
    """
    Prompts the user to find a student, confirms, and removes them from the roster.

    Args:
        roster (RosterStore): The loaded roster.

    Notes:
        - Removal is permanent and cannot be undone.
    """
    student = prompt_find_student(roster)

    if student is MenuSignal.CANCEL:
        helpers.returning_to("Manage Students menu")
        return
    student = cast(Student, student)

    helpers.caution_banner()
    print("You are about to permanently remove the following student:")
    print(model_formatters.format_student_multiline(student))

    if not helpers.confirm_action("This cannot be undone. Do you want to continue?"):
        print(f"\n{student.full_name} was not removed.")
        return

    roster_response = roster.remove_student(student.id)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\n{student.full_name} was not removed.")

    else:
        print(f"\n{roster_response.detail}")


# === view students ===


def view_students(roster: RosterStore) -> None:
    """
    Searches and filters the roster, then shows the selected student's full record.

    Args:
        roster (RosterStore): The loaded roster.
    """
    student = prompt_find_student(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print(f"\n{model_formatters.format_student_multiline(student)}")
    print("\nSubjects:")
    print(model_formatters.format_subjects(student))


# === finder helpers ===


def prompt_find_student(roster: RosterStore) -> Student | MenuSignal:
    """
    Prompts for a search query and a status filter and lets the user pick from the matches.

    Returns:
        The selected `Student`, or `MenuSignal.CANCEL`.
    """
    query = helpers.prompt_user_input_or_none(
        "Search by name or ID (leave blank to list everyone):"
    )

    status = helpers.prompt_selection_from_list(
        list(STATUS_FILTER_OPTIONS), "Status Filter"
    )

    if status is MenuSignal.CANCEL:
        return MenuSignal.CANCEL

    matches = filter_students(roster.students, query or "", cast(str, status))

    return helpers.prompt_selection_from_list(
        matches, "Students", model_formatters.format_student_oneline
    )
