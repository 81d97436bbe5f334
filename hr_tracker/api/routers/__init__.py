"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Routers are thin wrappers around Application Layer use cases
    - All routers follow dependency injection pattern

Available Routers:
    - applications_router: Status transitions and applicant listing
    - notifications_router: Applicant email notifications
"""

from .applications import router as applications_router
from .notifications import router as notifications_router

__all__ = ["applications_router", "notifications_router"]
