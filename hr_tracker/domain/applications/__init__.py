"""
Applications Subdomain

Job application entity and its workflow status enumerations.

Exports:
    - JobApplication: Application row entity
    - ApplicationStatus: Closed enum of workflow states
    - NotificationStatus: Statuses that trigger applicant email
    - ApplicationRepositoryProtocol: Transactional store contract
    - TransitionResult, UpdatedApplication: Committed transition outcome
"""

from .entities import JobApplication
from .repositories import (
    ApplicationRepositoryProtocol,
    TransitionResult,
    UpdatedApplication,
)
from .status import ApplicationStatus, NotificationStatus

__all__ = [
    "JobApplication",
    "ApplicationStatus",
    "NotificationStatus",
    "ApplicationRepositoryProtocol",
    "TransitionResult",
    "UpdatedApplication",
]
