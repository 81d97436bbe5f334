"""
Tests for ListApplicationsQueryHandler.
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from hr_tracker.application.commands.transition_status import StatusTransitionGate
from hr_tracker.application.queries.list_applications import (
    ListApplicationsQuery,
    ListApplicationsQueryHandler,
)
from hr_tracker.domain.applications.status import ApplicationStatus
from hr_tracker.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)

JOB_ID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"


@pytest.fixture
def mock_repository():
    repository = MagicMock()
    repository.list_for_job = AsyncMock(return_value=[])
    return repository


@pytest.fixture
def handler(mock_repository):
    return ListApplicationsQueryHandler(StatusTransitionGate("HR"), mock_repository)


@pytest.mark.asyncio
async def test_lists_by_job(handler, mock_repository, hr_caller):
    await handler.handle(hr_caller, ListApplicationsQuery(job_id=JOB_ID))

    mock_repository.list_for_job.assert_awaited_once_with(uuid.UUID(JOB_ID), status=None)


@pytest.mark.asyncio
async def test_lists_by_job_and_status(handler, mock_repository, hr_caller):
    await handler.handle(hr_caller, ListApplicationsQuery(job_id=JOB_ID, status="shortlisted"))

    mock_repository.list_for_job.assert_awaited_once_with(
        uuid.UUID(JOB_ID), status=ApplicationStatus.SHORTLISTED
    )


@pytest.mark.asyncio
async def test_requires_caller(handler):
    with pytest.raises(AuthenticationError):
        await handler.handle(None, ListApplicationsQuery(job_id=JOB_ID))


@pytest.mark.asyncio
async def test_requires_hr(handler, staff_caller):
    with pytest.raises(AuthorizationError):
        await handler.handle(staff_caller, ListApplicationsQuery(job_id=JOB_ID))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "query,message",
    [
        (ListApplicationsQuery(), "Job ID is required"),
        (ListApplicationsQuery(job_id="abc"), "Invalid Job ID format"),
        (ListApplicationsQuery(job_id=JOB_ID, status="archived"), None),
    ],
)
async def test_invalid_query(handler, mock_repository, hr_caller, query, message):
    with pytest.raises(ValidationError) as exc_info:
        await handler.handle(hr_caller, query)

    if message:
        assert exc_info.value.message == message
    else:
        assert exc_info.value.message.startswith("Invalid status value.")
    mock_repository.list_for_job.assert_not_awaited()
