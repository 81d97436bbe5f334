"""
API Schemas Package

Contains shared Pydantic models for API Layer.
"""

from hr_tracker.api.schemas.common import ErrorResponse

__all__ = ["ErrorResponse"]
