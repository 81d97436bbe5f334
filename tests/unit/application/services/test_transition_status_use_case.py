"""
Tests for TransitionStatusUseCase.

Covers:
- Gate runs before the repository
- Repository called with typed arguments
- Repository errors propagate unchanged
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from hr_tracker.application.commands.transition_status import StatusTransitionGate
from hr_tracker.application.services.transition_status_use_case import TransitionStatusUseCase
from hr_tracker.domain.applications.repositories import TransitionResult, UpdatedApplication
from hr_tracker.domain.applications.status import ApplicationStatus
from hr_tracker.domain.shared.exceptions import (
    AuthorizationError,
    PreconditionFailedError,
    TransientStoreError,
    ValidationError,
)

JOB_ID = uuid.UUID("3fa85f64-5717-4562-b3fc-2c963f66afa6")


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_repository():
    repository = MagicMock()
    repository.apply_single_transition = AsyncMock()
    repository.apply_mass_transition = AsyncMock()
    return repository


@pytest.fixture
def use_case(mock_repository):
    return TransitionStatusUseCase(StatusTransitionGate("HR"), mock_repository)


# ============================================================================
# TESTS
# ============================================================================


@pytest.mark.asyncio
async def test_execute_mass_calls_repository(use_case, mock_repository, hr_caller):
    rows = [UpdatedApplication(id=uuid.uuid4(), status=ApplicationStatus.SHORTLISTED)]
    mock_repository.apply_mass_transition.return_value = TransitionResult(1, rows)

    result = await use_case.execute_mass(
        hr_caller,
        {"jobId": str(JOB_ID), "fromStatus": "pending", "toStatus": "shortlisted"},
    )

    assert result.matched_count == 1
    assert result.updated_rows == rows
    mock_repository.apply_mass_transition.assert_awaited_once_with(
        job_id=JOB_ID,
        from_status=ApplicationStatus.PENDING,
        to_status=ApplicationStatus.SHORTLISTED,
    )


@pytest.mark.asyncio
async def test_execute_single_calls_repository(use_case, mock_repository, hr_caller):
    application_id = uuid.uuid4()
    mock_repository.apply_single_transition.return_value = TransitionResult(
        1, [UpdatedApplication(id=application_id, status=ApplicationStatus.OFFERED)]
    )

    result = await use_case.execute_single(
        hr_caller, {"applicationId": str(application_id), "status": "offered"}
    )

    assert result.updated_rows[0].id == application_id
    mock_repository.apply_single_transition.assert_awaited_once_with(
        application_id=application_id, status=ApplicationStatus.OFFERED
    )


@pytest.mark.asyncio
async def test_rejected_caller_never_reaches_repository(use_case, mock_repository, staff_caller):
    with pytest.raises(AuthorizationError):
        await use_case.execute_mass(
            staff_caller,
            {"jobId": str(JOB_ID), "fromStatus": "pending", "toStatus": "rejected"},
        )

    mock_repository.apply_mass_transition.assert_not_awaited()


@pytest.mark.asyncio
async def test_invalid_payload_never_reaches_repository(use_case, mock_repository, hr_caller):
    with pytest.raises(ValidationError):
        await use_case.execute_single(hr_caller, {"applicationId": "x", "status": "pending"})

    mock_repository.apply_single_transition.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        PreconditionFailedError("No matching applications found"),
        TransientStoreError("Database operation failed"),
    ],
)
async def test_repository_errors_propagate(use_case, mock_repository, hr_caller, error):
    mock_repository.apply_mass_transition.side_effect = error

    with pytest.raises(type(error)):
        await use_case.execute_mass(
            hr_caller,
            {"jobId": str(JOB_ID), "fromStatus": "pending", "toStatus": "rejected"},
        )


@pytest.mark.asyncio
async def test_execute_routes_payload_by_shape(use_case, mock_repository, hr_caller):
    application_id = uuid.uuid4()
    mock_repository.apply_single_transition.return_value = TransitionResult(
        1, [UpdatedApplication(id=application_id, status=ApplicationStatus.OFFERED)]
    )
    mock_repository.apply_mass_transition.return_value = TransitionResult(
        2, [UpdatedApplication(id=uuid.uuid4(), status=ApplicationStatus.HIRED)] * 2
    )

    single = await use_case.execute(
        hr_caller, {"applicationId": str(application_id), "status": "offered"}
    )
    mass = await use_case.execute(
        hr_caller, {"jobId": str(JOB_ID), "fromStatus": "offered", "toStatus": "hired"}
    )

    assert single.matched_count == 1
    assert mass.matched_count == 2
    mock_repository.apply_single_transition.assert_awaited_once_with(
        application_id=application_id, status=ApplicationStatus.OFFERED
    )
    mock_repository.apply_mass_transition.assert_awaited_once_with(
        job_id=JOB_ID,
        from_status=ApplicationStatus.OFFERED,
        to_status=ApplicationStatus.HIRED,
    )


@pytest.mark.asyncio
async def test_execute_rejects_non_hr_before_shape(use_case, mock_repository, staff_caller):
    with pytest.raises(AuthorizationError):
        await use_case.execute(staff_caller, {"jobId": "not-a-uuid"})

    mock_repository.apply_mass_transition.assert_not_awaited()
    mock_repository.apply_single_transition.assert_not_awaited()
