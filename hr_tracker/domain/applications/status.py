"""
Application Status Value Objects

Closed enumerations for the workflow state of a job application and for the
subset of states that trigger applicant-facing email.

Business Rules:
    - Any status may move to any other status (no transition graph)
    - Only SHORTLISTED and REJECTED produce applicant notifications
    - Values match the "application_status" enumerated type in the database
"""

from enum import Enum
from typing import Optional


class ApplicationStatus(str, Enum):
    """
    Workflow state of a job application.

    No ordering is enforced among these values.

    Usage:
        >>> status = ApplicationStatus("under_review")
        >>> status is ApplicationStatus.UNDER_REVIEW
        True
    """

    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    SHORTLISTED = "shortlisted"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    REJECTED = "rejected"
    OFFERED = "offered"
    HIRED = "hired"

    @classmethod
    def values(cls) -> list[str]:
        """All raw values in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: object) -> Optional["ApplicationStatus"]:
        """
        Look up a member by raw value.

        Returns None for anything that is not exactly one of the values
        (wrong case, non-string, unknown label).
        """
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class NotificationStatus(str, Enum):
    """Statuses that trigger an email to the applicant."""

    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_application_status(
        cls, status: ApplicationStatus
    ) -> Optional["NotificationStatus"]:
        """
        Map a workflow status to its notification status.

        Returns None for statuses that do not notify the applicant.
        """
        if status is ApplicationStatus.SHORTLISTED:
            return cls.SHORTLISTED
        if status is ApplicationStatus.REJECTED:
            return cls.REJECTED
        return None
