"""
Shared Application Models

Responsibility:
    DTOs shared by commands, services, tasks and the API Layer.

Contains:
    - Caller: Identity and role resolved from a session
    - NotificationRequest: One applicant email to send
    - FailedEmail / DispatchSummary: Aggregated batch dispatch outcome

Does NOT contain:
    - Business rules (belongs to Domain Layer)
    - HTTP models (belongs to API Layer)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hr_tracker.domain.applications.status import NotificationStatus


class Caller(BaseModel):
    """
    Authenticated caller of the API.

    The role is compared by exact string equality against the privileged
    role; no hierarchy or case folding is applied.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable user identifier")
    role: str = Field(description="Role string stored with the session")


class NotificationRequest(BaseModel):
    """
    Applicant email request.

    Transient value created per affected application after a committed
    transition. Field aliases match the JSON body of the notification
    endpoints.

    Attributes:
        to: Recipient address
        job_title: Job posting title shown in subject and body
        applicant_name: Display name used in the greeting
        status: Notification status selecting the template
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: str = Field(min_length=1)
    job_title: str = Field(alias="jobTitle", min_length=1)
    applicant_name: str = Field(alias="applicantName", min_length=1)
    status: NotificationStatus


class FailedEmail(BaseModel):
    """One failed recipient and the captured failure reason."""

    email: str
    error: str


class DispatchSummary(BaseModel):
    """
    Aggregated result of a batch dispatch.

    Invariants:
        - success_count + failed_count == number of recipients
        - success is True iff failed_count == 0
        - failed_emails lists exactly the failed recipients, in input order
    """

    success_count: int = Field(ge=0)
    failed_count: int = Field(ge=0)
    failed_emails: list[FailedEmail] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success_count + self.failed_count

    @property
    def success(self) -> bool:
        return self.failed_count == 0

    @property
    def message(self) -> str:
        return f"Successfully sent {self.success_count} emails, {self.failed_count} failed"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form used as the Celery task return value."""
        return {
            "message": self.message,
            "success_count": self.success_count,
            "failed_count": self.failed_count,
            "failed_emails": [failed.model_dump() for failed in self.failed_emails],
            "success": self.success,
        }

