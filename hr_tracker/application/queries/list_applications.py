"""
ListApplicationsQuery - CQRS Read Query

Query object and handler for listing the active applications of a job,
optionally filtered by status. Same gate as the write side: HR only,
UUID v4 job id, status in ApplicationStatus.
"""

import logging
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from hr_tracker.application.commands.transition_status import (
    StatusTransitionGate,
    invalid_status_message,
    is_uuid_v4,
)
from hr_tracker.application.models import Caller
from hr_tracker.domain.applications.entities import JobApplication
from hr_tracker.domain.applications.repositories import ApplicationRepositoryProtocol
from hr_tracker.domain.applications.status import ApplicationStatus
from hr_tracker.domain.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ListApplicationsQuery(BaseModel):
    """Raw query parameters (validated by the handler, not by Pydantic)."""

    job_id: Optional[str] = Field(default=None, description="Job posting id")
    status: Optional[str] = Field(default=None, description="Optional status filter")


class ListApplicationsQueryHandler:
    """
    Handler for listing applications of a job.

    Usage:
        handler = ListApplicationsQueryHandler(gate, repository)
        applications = await handler.handle(caller, query)
    """

    def __init__(
        self, gate: StatusTransitionGate, repository: ApplicationRepositoryProtocol
    ) -> None:
        self.gate = gate
        self.repository = repository

    async def handle(
        self, caller: Optional[Caller], query: ListApplicationsQuery
    ) -> list[JobApplication]:
        self.gate.authorize(caller)

        if not query.job_id:
            raise ValidationError("Job ID is required", field_name="jobId")
        if not is_uuid_v4(query.job_id):
            raise ValidationError("Invalid Job ID format", field_name="jobId")

        status: Optional[ApplicationStatus] = None
        if query.status:
            status = ApplicationStatus.parse(query.status)
            if status is None:
                raise ValidationError(invalid_status_message(), field_name="status")

        applications = await self.repository.list_for_job(UUID(query.job_id), status=status)
        logger.debug(f"Listed {len(applications)} applications for job {query.job_id}")
        return applications
