"""
Application Services

Responsibility:
    Orchestration services that coordinate domain rules and infrastructure.

Contains:
    - TransitionStatusUseCase: gate -> transactional updater
    - NotificationDispatcher: concurrent applicant email fan-out

Does NOT contain:
    - HTTP concerns (belongs to API Layer)
    - Direct infrastructure calls (use dependency injection)
"""

from hr_tracker.application.services.notification_dispatcher import (
    NotificationDispatcher,
    parse_recipient,
    validate_recipients,
)
from hr_tracker.application.services.transition_status_use_case import (
    TransitionStatusUseCase,
)

__all__ = [
    "TransitionStatusUseCase",
    "NotificationDispatcher",
    "parse_recipient",
    "validate_recipients",
]
