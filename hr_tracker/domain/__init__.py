"""
Domain Layer - Core Business Concepts

Framework-independent entities, value objects and the error taxonomy of the
application status-transition subsystem.

Subdomains:
    - applications: JobApplication entity and status enums
    - shared: Cross-subdomain exceptions

Usage:
    >>> from hr_tracker.domain import ApplicationStatus, DomainException
"""

from .applications import ApplicationStatus, JobApplication, NotificationStatus
from .shared import DomainException

__all__ = [
    "ApplicationStatus",
    "NotificationStatus",
    "JobApplication",
    "DomainException",
]
