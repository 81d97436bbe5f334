"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for all API errors.

    Provides consistent error structure across all endpoints.

    Attributes:
        code: Machine-readable error code (e.g., "VALIDATION_ERROR", "FORBIDDEN")
        message: Human-readable error message
        details: Optional additional error context (field, invalid recipients)
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": "PRECONDITION_FAILED",
                "message": "No matching applications found",
                "details": {
                    "exception_type": "PreconditionFailedError",
                    "job_id": "a3bb189e-8bf9-4888-9912-ace4e6543002",
                    "from_status": "pending",
                },
            }
        }
    )

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error context"
    )
