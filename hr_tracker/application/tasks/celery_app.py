"""
Celery application initialization.

Broker and result backend come from Settings (CELERY_BROKER_URL,
CELERY_RESULT_BACKEND), which loads .env via python-dotenv.

Architecture Note:
- Part of Application Layer (orchestration)
- No business logic - pure infrastructure setup
"""

from datetime import datetime

from celery import Celery

from hr_tracker.shared.config import Settings

settings = Settings.from_env()

celery_app = Celery(
    "hr_tracker",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
)

celery_app.conf.update(
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    result_expires=3600,  # Results expire after 1 hour
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
)

celery_app.autodiscover_tasks(["hr_tracker.application.tasks"], related_name="notification_tasks")


@celery_app.task(name="health_check")
def health_check() -> dict:
    """
    Simple health check task to verify the broker and result backend.

    Returns:
        dict: status, message, ISO timestamp and executing worker hostname

    Example:
        >>> from hr_tracker.application.tasks.celery_app import health_check
        >>> health_check.delay().get(timeout=5)["status"]
        'ok'
    """
    return {
        "status": "ok",
        "message": "Celery worker is healthy",
        "timestamp": datetime.now().isoformat(),
        "worker": (
            celery_app.current_task.request.hostname
            if celery_app.current_task
            else "unknown"
        ),
    }
