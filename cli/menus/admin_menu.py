# cli/menus/admin_menu.py

"""
Admin Dashboard menu for the Student Ledger CLI.

Provides the roster statistics view, the Manage Students menu, and semester report generation.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import students_menu
from core.report import generate_report
from core.stats import compute_stats
from models.roster import RosterStore


def run(roster: RosterStore, reports_dir: str) -> None:
    """
    Top-level loop with dispatch for the Admin Dashboard menu.

    Args:
        roster (RosterStore): The loaded roster.
        reports_dir (str): The directory semester reports are written to.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Admin Dashboard")
    options = [
        ("View Statistics", lambda: view_statistics(roster)),
        ("Manage Students", lambda: students_menu.run(roster)),
        ("Generate Semester Report", lambda: export_report(roster, reports_dir)),
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


def view_statistics(roster: RosterStore) -> None:
    stats = compute_stats(roster.students)

    print(f"\n{formatters.format_banner_text('Roster Statistics')}")
    print(model_formatters.format_dashboard(stats))


def export_report(roster: RosterStore, reports_dir: str) -> None:
    """
    Generates the semester report for the full roster.

    Notes:
        - Failures are logged by `generate_report()` and not shown here; the progress line is always closed.
    """
    print("\nGenerating report ...")

    report_response = generate_report(roster.students, reports_dir)

    if report_response.success:
        print(f"... {report_response.detail}")
    else:
        print("...")
