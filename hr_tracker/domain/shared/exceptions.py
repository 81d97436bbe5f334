"""
Domain Layer Exceptions

Base exception class and the error taxonomy of the status-transition
subsystem. Every exception here derives from DomainException so that the
API Layer can translate the whole family with one set of handlers.

Responsibility:
    - Type-safe error handling across layers
    - Carry enough context (field names, invalid entries) for error bodies
    - Clear separation from framework exceptions (FastAPI, SQLAlchemy, Redis)

HTTP mapping (applied in hr_tracker.api.main):
    - ValidationError -> 400 Bad Request
    - AuthenticationError -> 401 Unauthorized
    - AuthorizationError -> 403 Forbidden
    - PreconditionFailedError -> 404 Not Found
    - TransientStoreError -> 500 Internal Server Error
    - NotificationDeliveryError -> 500 (single send only; aggregated in batches)
"""

from typing import Any, Optional


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"

    def details(self) -> dict[str, Any]:
        """Extra context for the error response body."""
        return {"exception_type": self.__class__.__name__}


class ValidationError(DomainException):
    """
    Raised when a request is malformed, incomplete or out of enum range.

    Covers missing required fields, identifiers that are not canonical
    UUID v4 text, status values outside ApplicationStatus, and notification
    batches with structurally invalid recipients.

    Attributes:
        field_name: Offending field, when a single field is at fault
        invalid_entries: Offending batch entries, for notification batches

    Examples:
        >>> raise ValidationError("Invalid Job ID format", field_name="jobId")
    """

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        invalid_entries: Optional[list[Any]] = None,
    ) -> None:
        self.field_name = field_name
        self.invalid_entries = invalid_entries or []
        super().__init__(message)

    def details(self) -> dict[str, Any]:
        details = super().details()
        if self.field_name:
            details["field"] = self.field_name
        if self.invalid_entries:
            details["invalid_recipients"] = self.invalid_entries
        return details


class AuthenticationError(DomainException):
    """Raised when no caller could be resolved for the request."""

    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class AuthorizationError(DomainException):
    """
    Raised when the caller is known but lacks the privileged role.

    Attributes:
        role: Role the caller presented
        required_role: Role the operation requires
    """

    code = "FORBIDDEN"

    def __init__(
        self,
        message: str = "Forbidden",
        role: Optional[str] = None,
        required_role: Optional[str] = None,
    ) -> None:
        self.role = role
        self.required_role = required_role
        super().__init__(message)

    def details(self) -> dict[str, Any]:
        details = super().details()
        if self.required_role:
            details["required_role"] = self.required_role
        return details


class PreconditionFailedError(DomainException):
    """
    Raised when zero rows satisfy a transition precondition.

    For a mass transition the precondition is (job_id, from_status); for a
    single transition it is the application id of an active row. Replaying a
    mass transition that already succeeded lands here because no rows remain
    in from_status.

    Attributes:
        precondition: Key/value description of the failed predicate
    """

    code = "PRECONDITION_FAILED"

    def __init__(self, message: str, precondition: Optional[dict[str, str]] = None) -> None:
        self.precondition = precondition or {}
        super().__init__(message)

    def details(self) -> dict[str, Any]:
        details = super().details()
        details.update(self.precondition)
        return details


class TransientStoreError(DomainException):
    """
    Raised when the database or session store fails mid-operation.

    The transaction has already been rolled back when this propagates.

    Attributes:
        original_error: Underlying driver exception (optional)
    """

    code = "STORE_UNAVAILABLE"

    def __init__(self, message: str, original_error: Optional[BaseException] = None) -> None:
        self.original_error = original_error
        super().__init__(message)


class NotificationDeliveryError(DomainException):
    """
    Raised when a single notification cannot be handed to the mail transport.

    Batch dispatch never lets this escape: it is captured per recipient and
    reported in the dispatch summary.

    Attributes:
        recipient: Email address that failed
        reason: Captured failure reason from the transport
    """

    code = "NOTIFICATION_DELIVERY_FAILED"

    def __init__(self, recipient: str, reason: str) -> None:
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to send email notification to {recipient}: {reason}")

    def details(self) -> dict[str, Any]:
        details = super().details()
        details["email"] = self.recipient
        return details
