"""
Infrastructure Layer - External Dependencies

Implements technical capabilities behind Domain and Application interfaces:
the SQL database, the Redis session store and SMTP mail delivery.

Modules:
    - persistence: Database handle, application repository, Redis sessions
    - email: SMTP transport and applicant email templates

Usage:
    >>> from hr_tracker.infrastructure import Database, SqlApplicationRepository
    >>> from hr_tracker.infrastructure.email import SmtpEmailTransport
"""

from .email import SmtpEmailTransport
from .persistence import Database, RedisSessionStore, SqlApplicationRepository

__all__ = [
    "Database",
    "SqlApplicationRepository",
    "RedisSessionStore",
    "SmtpEmailTransport",
]
