# cli/menus/student_menu.py

"""
Student Portal menu for the Student Ledger CLI.

A signed-in student can only view their own record.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.roster import RosterStore


def run(roster: RosterStore, student_id: str) -> None:
    """
    Top-level loop with dispatch for the Student Portal menu.

    Args:
        roster (RosterStore): The loaded roster.
        student_id (str): The id of the signed-in student.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Student Portal")
    options = [
        ("View My Profile", lambda: view_profile(roster, student_id)),
        ("View My Subjects", lambda: view_subjects(roster, student_id)),
    ]
    zero_option = "Sign out"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Sign In menu")


def view_profile(roster: RosterStore, student_id: str) -> None:
    roster_response = roster.find_student_by_id(student_id)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"\n{model_formatters.format_student_multiline(roster_response.data['record'])}")


def view_subjects(roster: RosterStore, student_id: str) -> None:
    roster_response = roster.find_student_by_id(student_id)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print("\nSubjects:")
    print(model_formatters.format_subjects(roster_response.data["record"]))
