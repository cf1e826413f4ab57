# cli/main.py

"""
Sign In menu for the Student Ledger CLI.

Loads the roster from the data directory, then lets a user sign in as the administrator,
sign in as a student by id, or register as a new student.
"""

from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import admin_menu, student_menu, students_menu
from cli.path_utils import get_reports_dir, resolve_data_dir
from core.identity import Authorized, Role, authenticate
from core.logging_config import setup_logging
from core.storage import JsonFileStore
from models.roster import RosterStore


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Sign In menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - The roster is loaded once before the menu is shown; stored data that cannot be read
          falls back to the example roster.
    """
    setup_logging()

    data_dir = resolve_data_dir()
    reports_dir = get_reports_dir(data_dir)

    roster = RosterStore(JsonFileStore(data_dir))
    roster.load()

    title = formatters.format_banner_text("STUDENT LEDGER")
    options = [
        ("Admin Sign In", lambda: sign_in_admin(roster, reports_dir)),
        ("Student Sign In", lambda: sign_in_student(roster)),
        ("Register as a New Student", lambda: register_student(roster)),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def sign_in_admin(roster: RosterStore, reports_dir: str) -> None:
    identifier = helpers.prompt_user_input_or_cancel(
        "Enter admin ID (leave blank to cancel):"
    )

    if identifier is MenuSignal.CANCEL:
        return

    password = helpers.prompt_user_input("Enter password:")

    result = authenticate(Role.ADMIN, cast(str, identifier), password, roster)

    if isinstance(result, Authorized):
        admin_menu.run(roster, reports_dir)
    else:
        print(f"\n{result.reason}")


def sign_in_student(roster: RosterStore) -> None:
    student_id = helpers.prompt_user_input_or_cancel(
        "Enter your Student ID (leave blank to cancel):"
    )

    if student_id is MenuSignal.CANCEL:
        return

    result = authenticate(Role.STUDENT, cast(str, student_id), "", roster)

    if isinstance(result, Authorized):
        student_menu.run(roster, cast(str, result.student_id))
    else:
        print(f"\n{result.reason}")


def register_student(roster: RosterStore) -> None:
    """
    Self-registration: enrolls a new student and shows the id they will sign in with.
    """
    form = students_menu.prompt_enrollment_form()

    if form is None:
        helpers.returning_to("Sign In menu")
        return

    roster_response = roster.enroll_student(**form)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    student = roster_response.data["record"]
    print(f"\n{formatters.format_banner_text('Registration Complete')}")
    print(f"Your Student ID is {student.id}. Use it to sign in.")


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
