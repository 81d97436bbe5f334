"""
Session Store Port

Contract for the authorization context: resolving a session token to the
caller's identity and role. How tokens are issued is outside this service.
"""

from typing import Optional, Protocol

from hr_tracker.application.models import Caller


class SessionStoreProtocol(Protocol):
    """Looks up the caller behind a session token."""

    def resolve(self, token: str) -> Optional[Caller]:
        """Return the caller, or None for unknown or malformed sessions."""
        ...
