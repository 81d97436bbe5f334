"""
Celery Tasks

Responsibility:
    Background task definitions; results stored in the Redis result backend.

Contains:
    - celery_app.py - Celery configuration and health_check task
    - notification_tasks.py - Batch applicant notification sending

Does NOT contain:
    - Business logic (delegates to Application services)
"""

from .celery_app import celery_app, health_check
from .notification_tasks import send_status_notifications

__all__ = ["celery_app", "health_check", "send_status_notifications"]
