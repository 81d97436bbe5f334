"""
Application Status API Schemas

HTTP request/response bodies for the applications router. Field names are
camelCase on the wire (aliases) and snake_case in Python.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from hr_tracker.domain.applications.status import ApplicationStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ============================================================================
# REQUEST BODIES (documentation only; payloads are validated by the gate)
# ============================================================================


class MassUpdateRequest(_CamelModel):
    """Body of PATCH /api/applications/mass-update."""

    job_id: str = Field(alias="jobId", description="Job posting id (UUID v4)")
    from_status: ApplicationStatus = Field(alias="fromStatus")
    to_status: ApplicationStatus = Field(alias="toStatus")


class SingleUpdateRequest(_CamelModel):
    """Body of PATCH /api/applications."""

    application_id: str = Field(alias="applicationId", description="Application id (UUID v4)")
    status: ApplicationStatus


# ============================================================================
# RESPONSES
# ============================================================================


class UpdatedApplicationSchema(_CamelModel):
    id: str
    status: ApplicationStatus


class MassUpdateData(_CamelModel):
    updated_count: int = Field(alias="updatedCount", ge=1)
    updated_applications: List[UpdatedApplicationSchema] = Field(alias="updatedApplications")


class MassUpdateResponse(_CamelModel):
    """
    Result of a committed mass transition.

    Example:
        {
          "success": true,
          "data": {"updatedCount": 3, "updatedApplications": [{"id": "...", "status": "shortlisted"}]},
          "message": "Successfully updated 3 applications from pending to shortlisted"
        }
    """

    success: bool = True
    data: MassUpdateData
    message: str


class SingleUpdateResponse(_CamelModel):
    success: bool = True
    data: UpdatedApplicationSchema
    message: str


class ApplicationListResponse(_CamelModel):
    """Active applications of a job, newest first."""

    success: bool = True
    data: List[Dict[str, Any]] = Field(default_factory=list)
