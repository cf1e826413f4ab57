# core/identity.py

"""
Role resolution for the two kinds of user.

This is a view toggle, not a security boundary: the administrator credentials are a
hardcoded equality check, and a student "logs in" with nothing more than their id.
Failures are returned as `Rejected` values carrying a user-facing reason; nothing here raises.
"""

from dataclasses import dataclass
from enum import Enum

from core.logging_config import get_logger, log_with_context
from models.roster import RosterStore

logger = get_logger("identity")

ADMIN_IDENTIFIER = "Suva@123456"
ADMIN_PASSWORD = "1234567"

INVALID_ADMIN_CREDENTIALS = "Invalid Admin credentials"
STUDENT_ID_NOT_FOUND = "Student ID not found"


class Role(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"


@dataclass(frozen=True)
class Authorized:
    role: Role
    student_id: str | None = None


@dataclass(frozen=True)
class Rejected:
    reason: str


AuthResult = Authorized | Rejected


def authenticate_admin(identifier: str, password: str) -> AuthResult:
    if identifier == ADMIN_IDENTIFIER and password == ADMIN_PASSWORD:
        log_with_context(logger, "INFO", "Admin signed in.")
        return Authorized(role=Role.ADMIN)

    log_with_context(logger, "INFO", "Admin sign-in rejected.")
    return Rejected(reason=INVALID_ADMIN_CREDENTIALS)


def authenticate_student(student_id: str, roster: RosterStore) -> AuthResult:
    response = roster.find_student_by_id(student_id)

    if not response.success:
        log_with_context(
            logger,
            "INFO",
            "Student sign-in rejected.",
            context={"student_id": student_id},
        )
        return Rejected(reason=STUDENT_ID_NOT_FOUND)

    log_with_context(
        logger, "INFO", "Student signed in.", context={"student_id": student_id}
    )
    return Authorized(role=Role.STUDENT, student_id=response.data["record"].id)


def authenticate(
    role: Role,
    identifier: str,
    password: str,
    roster: RosterStore,
) -> AuthResult:
    """
    Resolves a sign-in attempt for either role.

    Args:
        role (Role): The role being requested.
        identifier (str): The admin identifier, or the student's id.
        password (str): The admin password. Ignored for students.
        roster (RosterStore): The loaded roster, used to look up student ids.

    Returns:
        `Authorized` with the role (and student id, for students), or `Rejected` with a reason.
    """
    if role is Role.ADMIN:
        return authenticate_admin(identifier, password)

    return authenticate_student(identifier, roster)
