"""
API Router for Applicant Email Notifications

Responsibility:
    HTTP interface for sending status notification emails to applicants,
    one at a time, as a synchronous batch, or queued to a Celery worker.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (NotificationDispatcher, Celery task)
    - A batch with any invalid recipient is rejected before any send
    - Per-recipient failures in a batch are reported in the body (200),
      never as an error status

Contains:
    - POST /notifications/email - Send one notification
    - POST /notifications/email/mass - Send a batch and wait for the outcome
    - POST /notifications/email/mass/queue - Queue a batch (202)
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status

from hr_tracker.api.dependencies import get_notification_dispatcher, read_json_body
from hr_tracker.api.schemas.common import ErrorResponse
from hr_tracker.api.schemas.notifications import (
    EmailSentResponse,
    MassEmailRequest,
    MassEmailResponse,
    QueuedEmailResponse,
)
from hr_tracker.application.models import NotificationRequest
from hr_tracker.application.services.notification_dispatcher import (
    NotificationDispatcher,
    parse_recipient,
    validate_recipients,
)
from hr_tracker.application.tasks.notification_tasks import send_status_notifications

logger = logging.getLogger(__name__)


router = APIRouter(
    prefix="/notifications",
    tags=["notifications"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid recipients"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)

_MASS_BODY = {
    "requestBody": {
        "content": {"application/json": {"schema": MassEmailRequest.model_json_schema()}}
    }
}


def _recipients_of(payload: Any) -> Any:
    return payload.get("recipients") if isinstance(payload, dict) else None


@router.post(
    "/email",
    status_code=status.HTTP_200_OK,
    response_model=EmailSentResponse,
    summary="Send one status notification email",
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": NotificationRequest.model_json_schema()}
            }
        }
    },
)
async def send_email(
    request: Request,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> EmailSentResponse:
    notification = parse_recipient(await read_json_body(request))
    await dispatcher.send_one(notification)
    return EmailSentResponse(message="Email sent successfully")


@router.post(
    "/email/mass",
    status_code=status.HTTP_200_OK,
    response_model=MassEmailResponse,
    response_model_exclude_none=True,
    summary="Send status notification emails to a batch of applicants",
    description=(
        "Validates the whole batch first (any invalid entry rejects the batch "
        "with 400 and nothing is sent), then sends concurrently. Partial "
        "failures are reported in failedEmails."
    ),
    openapi_extra=_MASS_BODY,
)
async def send_mass_email(
    request: Request,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> MassEmailResponse:
    recipients = validate_recipients(_recipients_of(await read_json_body(request)))
    summary = await dispatcher.dispatch(recipients)
    return MassEmailResponse.from_summary(summary)


@router.post(
    "/email/mass/queue",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=QueuedEmailResponse,
    summary="Queue a batch of status notification emails",
    description="Validates the batch, then hands it to a Celery worker. Poll the task id for the outcome.",
    openapi_extra=_MASS_BODY,
)
async def queue_mass_email(request: Request) -> QueuedEmailResponse:
    recipients = validate_recipients(_recipients_of(await read_json_body(request)))

    task = send_status_notifications.delay(
        [recipient.model_dump(mode="json", by_alias=True) for recipient in recipients]
    )
    logger.info(f"Queued {len(recipients)} notifications as task {task.id}")

    return QueuedEmailResponse(task_id=task.id, recipients_count=len(recipients))
