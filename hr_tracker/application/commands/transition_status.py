"""
Status Transition Commands and Gate

Validated write commands for moving applications between workflow states,
and the gate that produces them from a raw JSON payload.

Responsibility:
    - Authorize the caller (present, privileged role)
    - Validate payload shape: required fields, UUID v4 identifiers, enum values
    - Normalize the payload into a typed command for the repository

Architecture Notes:
    - Part of Application Layer (CQRS write side)
    - Pure and synchronous: no I/O, never opens a transaction
    - Fail fast: the first failing check raises and later checks are skipped

Check Order:
    1. caller present          -> AuthenticationError
    2. caller role privileged  -> AuthorizationError
    3. required fields present -> ValidationError
    4. identifiers are UUID v4 -> ValidationError
    5. statuses in enum        -> ValidationError (lists the allowed set)
"""

import re
from typing import Any, Final, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hr_tracker.application.models import Caller
from hr_tracker.domain.applications.status import ApplicationStatus
from hr_tracker.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)

UUID_V4_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


# ============================================================================
# COMMANDS
# ============================================================================


class SingleTransitionCommand(BaseModel):
    """
    Set the status of one application.

    Precondition: the application exists and is active at write time.
    """

    model_config = ConfigDict(frozen=True)

    application_id: UUID = Field(description="Application to update")
    status: ApplicationStatus = Field(description="Target status")


class MassTransitionCommand(BaseModel):
    """
    Move every active application of a job from one status to another.

    Precondition: (job_id, from_status), evaluated atomically with the write.
    """

    model_config = ConfigDict(frozen=True)

    job_id: UUID = Field(description="Job posting whose applications move")
    from_status: ApplicationStatus = Field(description="Required current status")
    to_status: ApplicationStatus = Field(description="Target status")


TransitionCommand = Union[SingleTransitionCommand, MassTransitionCommand]


# ============================================================================
# VALIDATION HELPERS
# ============================================================================


def invalid_status_message() -> str:
    return "Invalid status value. Must be one of: " + ", ".join(ApplicationStatus.values())


def is_uuid_v4(value: Any) -> bool:
    """True when value is canonical UUID v4 text (hyphenated, any case)."""
    return isinstance(value, str) and UUID_V4_PATTERN.match(value) is not None


def _require_fields(payload: Any, fields: tuple[str, ...], message: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError(message)
    for name in fields:
        value = payload.get(name)
        if value is None or value == "":
            raise ValidationError(message, field_name=name)
    return payload


def _require_uuid(value: Any, field_name: str, message: str) -> UUID:
    if not is_uuid_v4(value):
        raise ValidationError(message, field_name=field_name)
    return UUID(value)


def _require_status(value: Any, field_name: str) -> ApplicationStatus:
    status = ApplicationStatus.parse(value)
    if status is None:
        raise ValidationError(invalid_status_message(), field_name=field_name)
    return status


# ============================================================================
# GATE
# ============================================================================


class StatusTransitionGate:
    """
    Authorization and shape gate in front of the transactional updater.

    Usage:
        >>> gate = StatusTransitionGate(privileged_role="HR")
        >>> command = gate.validate_mass(caller, {"jobId": ..., "fromStatus": ..., "toStatus": ...})
    """

    def __init__(self, privileged_role: str = "HR") -> None:
        self.privileged_role = privileged_role

    def authorize(self, caller: Optional[Caller]) -> Caller:
        """
        Check that a caller is present and holds the privileged role.

        Raises:
            AuthenticationError: No caller
            AuthorizationError: Caller role differs from the privileged role
        """
        if caller is None:
            raise AuthenticationError()
        if caller.role != self.privileged_role:
            raise AuthorizationError(role=caller.role, required_role=self.privileged_role)
        return caller

    def validate_single(self, caller: Optional[Caller], payload: Any) -> SingleTransitionCommand:
        """Gate a `{applicationId, status}` payload."""
        self.authorize(caller)

        data = _require_fields(
            payload, ("applicationId", "status"), "Application ID and status are required"
        )
        application_id = _require_uuid(
            data["applicationId"], "applicationId", "Invalid Application ID format"
        )
        status = _require_status(data["status"], "status")

        return SingleTransitionCommand(application_id=application_id, status=status)

    def validate_mass(self, caller: Optional[Caller], payload: Any) -> MassTransitionCommand:
        """Gate a `{jobId, fromStatus, toStatus}` payload."""
        self.authorize(caller)

        data = _require_fields(
            payload,
            ("jobId", "fromStatus", "toStatus"),
            "Job ID, fromStatus, and toStatus are required",
        )
        job_id = _require_uuid(data["jobId"], "jobId", "Invalid Job ID format")
        from_status = _require_status(data["fromStatus"], "fromStatus")
        to_status = _require_status(data["toStatus"], "toStatus")

        return MassTransitionCommand(job_id=job_id, from_status=from_status, to_status=to_status)

    def authorize_and_validate(self, caller: Optional[Caller], payload: Any) -> TransitionCommand:
        """
        Gate either payload form.

        A payload carrying "jobId" is treated as a mass transition; anything
        else as a single transition.
        """
        if isinstance(payload, dict) and "jobId" in payload:
            return self.validate_mass(caller, payload)
        return self.validate_single(caller, payload)
