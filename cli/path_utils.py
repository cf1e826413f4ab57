# cli/path_utils.py

import os

DATA_DIR_ENV = "STUDENT_LEDGER_HOME"
REPORTS_DIR_ENV = "STUDENT_LEDGER_REPORTS"


def get_data_dir() -> str:
    """
    Resolves the directory that holds the persisted roster.

    Returns:
        The path in `STUDENT_LEDGER_HOME` if set, expanded.
        Otherwise, defaults to: `~/Documents/StudentLedger`.
    """
    user_input = os.getenv(DATA_DIR_ENV, "").strip()

    if user_input:
        return os.path.expanduser(user_input)
    else:
        documents = os.path.join(os.path.expanduser("~"), "Documents")
        return os.path.join(documents, "StudentLedger")


def get_reports_dir(data_dir: str) -> str:
    """
    Resolves the directory semester reports are written to.

    Args:
        data_dir (str): The resolved data directory.

    Returns:
        The path in `STUDENT_LEDGER_REPORTS` if set, expanded.
        Otherwise, defaults to: `<data_dir>/reports`.
    """
    user_input = os.getenv(REPORTS_DIR_ENV, "").strip()

    if user_input:
        return os.path.expanduser(user_input)
    else:
        return os.path.join(data_dir, "reports")


def resolve_data_dir() -> str:
    """
    Produces and ensures a valid data directory.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
    """
    data_dir = os.path.abspath(get_data_dir())

    os.makedirs(data_dir, exist_ok=True)

    return data_dir
