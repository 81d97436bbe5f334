"""
Notification API Schemas

HTTP request/response bodies for the notifications router.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hr_tracker.application.models import DispatchSummary, FailedEmail, NotificationRequest


class MassEmailRequest(BaseModel):
    """Body of the batch endpoints (documentation only; validated by the dispatcher)."""

    recipients: List[NotificationRequest]


class EmailSentResponse(BaseModel):
    message: str = "Email sent successfully"


class MassEmailResponse(BaseModel):
    """
    Aggregated batch outcome.

    failedEmails is omitted when every send succeeded.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    success_count: int = Field(alias="successCount")
    failed_count: int = Field(alias="failedCount")
    failed_emails: Optional[List[FailedEmail]] = Field(default=None, alias="failedEmails")
    success: bool

    @classmethod
    def from_summary(cls, summary: DispatchSummary) -> "MassEmailResponse":
        return cls(
            message=summary.message,
            success_count=summary.success_count,
            failed_count=summary.failed_count,
            failed_emails=summary.failed_emails or None,
            success=summary.success,
        )


class QueuedEmailResponse(BaseModel):
    """Batch accepted for background sending."""

    model_config = ConfigDict(populate_by_name=True)

    task_id: str = Field(alias="taskId", description="Celery task id")
    status: str = "queued"
    recipients_count: int = Field(alias="recipientsCount")
