"""
API Router for Application Status Transitions

Responsibility:
    HTTP interface for HR-initiated status changes on job applications and
    for listing the active applications of a job.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (TransitionStatusUseCase, ListApplicationsQueryHandler)
    - No business logic - pure HTTP concerns
    - Bodies are read as raw JSON and handed to the gate, so a missing or
      unprivileged caller is reported before any payload problem

Contains:
    - PATCH /applications/mass-update - Move every active application of a job
    - PATCH /applications - Set the status of one application
    - GET /applications - List active applications of a job

Error Responses (via global exception handlers):
    400 ValidationError, 401 AuthenticationError, 403 AuthorizationError,
    404 PreconditionFailedError, 500 TransientStoreError
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from hr_tracker.api.dependencies import (
    get_current_caller,
    get_list_applications_handler,
    get_transition_use_case,
    read_json_body,
)
from hr_tracker.api.schemas.applications import (
    ApplicationListResponse,
    MassUpdateData,
    MassUpdateRequest,
    MassUpdateResponse,
    SingleUpdateRequest,
    SingleUpdateResponse,
    UpdatedApplicationSchema,
)
from hr_tracker.api.schemas.common import ErrorResponse
from hr_tracker.application.models import Caller
from hr_tracker.application.queries.list_applications import (
    ListApplicationsQuery,
    ListApplicationsQueryHandler,
)
from hr_tracker.application.services.transition_status_use_case import TransitionStatusUseCase

logger = logging.getLogger(__name__)


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/applications",
    tags=["applications"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid payload"},
        401: {"model": ErrorResponse, "description": "Unauthorized - No session"},
        403: {"model": ErrorResponse, "description": "Forbidden - Caller is not HR"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.patch(
    "/mass-update",
    status_code=status.HTTP_200_OK,
    response_model=MassUpdateResponse,
    summary="Move all applications of a job from one status to another",
    description=(
        "Atomically updates every active application of the job whose status "
        "equals fromStatus. Either all matching rows change or none do. "
        "Returns 404 when no active application is in fromStatus."
    ),
    responses={404: {"model": ErrorResponse, "description": "No matching applications"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": MassUpdateRequest.model_json_schema()}}
        }
    },
)
async def mass_update_status(
    request: Request,
    caller: Optional[Caller] = Depends(get_current_caller),
    use_case: TransitionStatusUseCase = Depends(get_transition_use_case),
) -> MassUpdateResponse:
    payload = await read_json_body(request)
    result = await use_case.execute_mass(caller, payload)

    return MassUpdateResponse(
        success=True,
        data=MassUpdateData(
            updated_count=result.matched_count,
            updated_applications=[
                UpdatedApplicationSchema(**row.to_dict()) for row in result.updated_rows
            ],
        ),
        message=(
            f"Successfully updated {result.matched_count} applications "
            f"from {payload['fromStatus']} to {payload['toStatus']}"
        ),
    )


@router.patch(
    "",
    status_code=status.HTTP_200_OK,
    response_model=SingleUpdateResponse,
    summary="Set the status of one application",
    description="Updates one active application. Returns 404 when it is missing or inactive.",
    responses={404: {"model": ErrorResponse, "description": "Application not found"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": SingleUpdateRequest.model_json_schema()}}
        }
    },
)
async def update_status(
    request: Request,
    caller: Optional[Caller] = Depends(get_current_caller),
    use_case: TransitionStatusUseCase = Depends(get_transition_use_case),
) -> SingleUpdateResponse:
    payload = await read_json_body(request)
    result = await use_case.execute_single(caller, payload)
    row = result.updated_rows[0]

    return SingleUpdateResponse(
        success=True,
        data=UpdatedApplicationSchema(**row.to_dict()),
        message=f"Application status updated to {row.status.value}",
    )


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ApplicationListResponse,
    summary="List active applications of a job",
    description="Active applications of the job, newest first, optionally filtered by status.",
)
async def list_applications(
    job_id: Optional[str] = Query(default=None, alias="jobId"),
    status_filter: Optional[str] = Query(default=None, alias="status"),
    caller: Optional[Caller] = Depends(get_current_caller),
    handler: ListApplicationsQueryHandler = Depends(get_list_applications_handler),
) -> ApplicationListResponse:
    applications = await handler.handle(
        caller, ListApplicationsQuery(job_id=job_id, status=status_filter)
    )
    return ApplicationListResponse(
        success=True, data=[application.to_dict() for application in applications]
    )
