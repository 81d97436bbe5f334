"""
Application Queries (CQRS read side)

Exports:
    - ListApplicationsQuery: Raw list parameters
    - ListApplicationsQueryHandler: Gated listing of active applications
"""

from hr_tracker.application.queries.list_applications import (
    ListApplicationsQuery,
    ListApplicationsQueryHandler,
)

__all__ = ["ListApplicationsQuery", "ListApplicationsQueryHandler"]
