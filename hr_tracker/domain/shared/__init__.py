"""
Shared Domain Module

Shared domain concepts used across the applications subdomain.

This module exports:
    - DomainException: Base exception for all domain errors
    - The transition/notification error taxonomy
"""

from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainException,
    NotificationDeliveryError,
    PreconditionFailedError,
    TransientStoreError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "PreconditionFailedError",
    "TransientStoreError",
    "NotificationDeliveryError",
]
