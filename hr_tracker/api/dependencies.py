"""
API Dependencies

FastAPI dependency providers. Long-lived resources (settings, database
handle, session store, mail transport) are created in the application
lifespan and stored on app.state; request-scoped handlers are assembled
from them here.

Architecture Pattern:
    API Layer -> Use Case / Query Handler -> Infrastructure Service
"""

import logging
from typing import Any, Optional

from fastapi import Request

from hr_tracker.application.commands.transition_status import StatusTransitionGate
from hr_tracker.application.models import Caller
from hr_tracker.application.queries.list_applications import ListApplicationsQueryHandler
from hr_tracker.application.services.notification_dispatcher import NotificationDispatcher
from hr_tracker.application.services.transition_status_use_case import TransitionStatusUseCase
from hr_tracker.infrastructure.persistence.repositories.application_repository import (
    SqlApplicationRepository,
)
from hr_tracker.shared.config import Settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _session_token(request: Request, cookie_name: str) -> Optional[str]:
    authorization = request.headers.get("Authorization", "")
    if authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX):].strip()
        if token:
            return token
    return request.cookies.get(cookie_name) or None


def get_current_caller(request: Request) -> Optional[Caller]:
    """
    Resolve the caller from the session token.

    Token sources, in order: `Authorization: Bearer <token>` header, then the
    session cookie. Returns None when no token is sent or the session is
    unknown; the gate turns that into 401.

    Declared sync so the blocking Redis lookup runs in the threadpool.

    Raises:
        TransientStoreError: Session store unreachable
    """
    settings = get_settings(request)
    token = _session_token(request, settings.session_cookie_name)
    if token is None:
        return None
    return request.app.state.session_store.resolve(token)


def get_transition_use_case(request: Request) -> TransitionStatusUseCase:
    settings = get_settings(request)
    return TransitionStatusUseCase(
        gate=StatusTransitionGate(privileged_role=settings.privileged_role),
        repository=SqlApplicationRepository(request.app.state.database),
    )


def get_list_applications_handler(request: Request) -> ListApplicationsQueryHandler:
    settings = get_settings(request)
    return ListApplicationsQueryHandler(
        gate=StatusTransitionGate(privileged_role=settings.privileged_role),
        repository=SqlApplicationRepository(request.app.state.database),
    )


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    settings = get_settings(request)
    return NotificationDispatcher(
        request.app.state.email_transport,
        max_concurrency=settings.notification_max_concurrency,
    )


async def read_json_body(request: Request) -> Any:
    """
    Parsed JSON body, or None when the body is empty or not valid JSON.

    Shape checks are left to the gate/dispatcher so that authorization
    failures are reported before payload errors.
    """
    try:
        return await request.json()
    except ValueError:
        logger.debug(f"Unparseable JSON body on {request.method} {request.url.path}")
        return None
