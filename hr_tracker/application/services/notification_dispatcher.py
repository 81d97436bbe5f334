"""
Notification Dispatcher

Responsibility:
    Validates a batch of applicant notifications and sends them concurrently,
    aggregating per-recipient success/failure into a DispatchSummary.

Architecture Notes:
    - Part of Application Layer (Services)
    - Uses an EmailTransportProtocol implementation (SMTP in production)
    - The transport is blocking; each send runs in a worker thread
    - Concurrency bounded by an asyncio.Semaphore

Business Rules:
    - A batch with any structurally invalid recipient is rejected wholesale
      before any send is attempted
    - One recipient's failure never cancels or hides the others
    - No retry here; retry belongs to the mail transport
    - success_count + failed_count == len(recipients)
"""

import asyncio
import logging
from typing import Any, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from hr_tracker.application.models import (
    DispatchSummary,
    FailedEmail,
    NotificationRequest,
)
from hr_tracker.application.ports.email_transport import EmailTransportProtocol
from hr_tracker.domain.applications.status import NotificationStatus
from hr_tracker.domain.shared.exceptions import NotificationDeliveryError, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("to", "jobTitle", "applicantName", "status")


def _is_valid_entry(entry: Any) -> bool:
    if not isinstance(entry, dict):
        return False
    for name in REQUIRED_FIELDS:
        value = entry.get(name)
        if not isinstance(value, str) or not value.strip():
            return False
    return entry["status"] in NotificationStatus.values()


def parse_recipient(entry: Any) -> NotificationRequest:
    """
    Validate one raw notification body.

    Raises:
        ValidationError: Missing field or non-notifying status
    """
    if not _is_valid_entry(entry):
        raise ValidationError(
            "Missing required fields or invalid status. Status must be one of: "
            + ", ".join(NotificationStatus.values())
        )
    try:
        return NotificationRequest.model_validate(entry)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid notification request: {e}") from e


def validate_recipients(raw: Any) -> list[NotificationRequest]:
    """
    Validate a raw `recipients` array as a whole.

    Raises:
        ValidationError: Batch missing, not a list, empty, or containing any
            invalid entry (all invalid entries are listed on the error)
    """
    if not isinstance(raw, list) or len(raw) == 0:
        raise ValidationError(
            "Recipients array is required and must not be empty", field_name="recipients"
        )

    invalid = [entry for entry in raw if not _is_valid_entry(entry)]
    if invalid:
        raise ValidationError(
            "Some recipients have missing required fields or invalid status",
            field_name="recipients",
            invalid_entries=invalid,
        )

    return [NotificationRequest.model_validate(entry) for entry in raw]


class NotificationDispatcher:
    """
    Concurrent fan-out of applicant emails with aggregated partial failure.

    Usage:
        >>> dispatcher = NotificationDispatcher(SmtpEmailTransport(settings))
        >>> summary = await dispatcher.dispatch(recipients)
        >>> summary.success, summary.failed_count
        (False, 1)
    """

    def __init__(self, transport: EmailTransportProtocol, max_concurrency: int = 3) -> None:
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")
        self.transport = transport
        self.max_concurrency = max_concurrency

    async def _send(
        self, request: NotificationRequest, semaphore: Optional[asyncio.Semaphore] = None
    ) -> str:
        if semaphore is None:
            return await asyncio.to_thread(self.transport.send, request)
        async with semaphore:
            return await asyncio.to_thread(self.transport.send, request)

    async def send_one(self, request: NotificationRequest) -> str:
        """
        Send a single notification.

        Returns:
            Message id reported by the transport

        Raises:
            NotificationDeliveryError: Transport failed
        """
        try:
            message_id = await self._send(request)
        except Exception as e:
            logger.error(f"Error sending email to {request.to}: {e}")
            raise NotificationDeliveryError(request.to, str(e) or e.__class__.__name__) from e

        logger.info(f"Email sent successfully to {request.to}: {message_id}")
        return message_id

    async def dispatch(self, recipients: Sequence[NotificationRequest]) -> DispatchSummary:
        """
        Send every recipient concurrently and aggregate the outcomes.

        Results are joined in input order; exceptions are captured per slot
        rather than raised, so the call itself only fails on an empty batch.

        Raises:
            ValidationError: Empty batch
        """
        if not recipients:
            raise ValidationError(
                "Recipients array is required and must not be empty", field_name="recipients"
            )

        semaphore = asyncio.Semaphore(self.max_concurrency)
        logger.info(
            f"Dispatching {len(recipients)} notifications "
            f"(max_concurrency={self.max_concurrency})"
        )

        results = await asyncio.gather(
            *(self._send(request, semaphore) for request in recipients),
            return_exceptions=True,
        )

        failed_emails: list[FailedEmail] = []
        for request, outcome in zip(recipients, results):
            if isinstance(outcome, BaseException):
                reason = str(outcome) or outcome.__class__.__name__
                logger.warning(f"Notification to {request.to} failed: {reason}")
                failed_emails.append(FailedEmail(email=request.to, error=reason))

        summary = DispatchSummary(
            success_count=len(recipients) - len(failed_emails),
            failed_count=len(failed_emails),
            failed_emails=failed_emails,
        )
        logger.info(summary.message)
        return summary
