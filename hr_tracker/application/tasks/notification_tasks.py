"""
Celery Task for Background Applicant Notifications

Sends the applicant emails for a batch outside the request cycle. The API
validates the batch before queueing; the task validates again because the
payload crossed a serialization boundary.

Responsibility:
    - Rebuild NotificationRequests from the JSON payload
    - Run the NotificationDispatcher against the SMTP transport
    - Return the DispatchSummary as a plain dict

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Thin orchestrator - delivery and aggregation live in the dispatcher
    - The dispatcher is async; the task drives it with asyncio.run()
    - Per-recipient failures are part of the result, not task failures.
      Only an invalid payload fails the task, and it is not retried.
"""

import asyncio
import logging
import time
from typing import Any, Optional

from celery import Task

from .celery_app import celery_app
from hr_tracker.application.ports.email_transport import EmailTransportProtocol
from hr_tracker.application.services.notification_dispatcher import (
    NotificationDispatcher,
    validate_recipients,
)
from hr_tracker.infrastructure.email.smtp_transport import SmtpEmailTransport
from hr_tracker.shared.config import Settings

logger = logging.getLogger(__name__)


def build_dispatcher(
    settings: Settings, transport: Optional[EmailTransportProtocol] = None
) -> NotificationDispatcher:
    """Dispatcher wired to the SMTP transport unless one is given."""
    return NotificationDispatcher(
        transport or SmtpEmailTransport(settings),
        max_concurrency=settings.notification_max_concurrency,
    )


@celery_app.task(
    bind=True,
    name="send_status_notifications",
    time_limit=300,
    soft_time_limit=270,
)
def send_status_notifications(self: Task, recipients: list[dict[str, Any]]) -> dict:
    """
    Send status notification emails for a batch of applicants.

    Args:
        self: Celery task instance (bind=True gives access to self.request.id)
        recipients: List of {to, jobTitle, applicantName, status} dicts

    Returns:
        dict: DispatchSummary.to_dict() plus task_id and processing_time:
            {
                "message": "Successfully sent 2 emails, 1 failed",
                "success_count": 2,
                "failed_count": 1,
                "failed_emails": [{"email": str, "error": str}],
                "success": False,
                "task_id": str,
                "processing_time": float,
            }

    Raises:
        ValidationError: Payload is not a non-empty list of valid recipients
    """
    start_time = time.time()
    task_id = self.request.id
    logger.info(f"Task {task_id}: sending {len(recipients or [])} notifications")

    requests = validate_recipients(recipients)
    dispatcher = build_dispatcher(Settings.from_env())
    summary = asyncio.run(dispatcher.dispatch(requests))

    result = summary.to_dict()
    result["task_id"] = task_id
    result["processing_time"] = time.time() - start_time
    logger.info(f"Task {task_id}: {summary.message}")
    return result
