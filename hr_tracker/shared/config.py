"""
Application Settings

Environment-based configuration for the API, the Celery worker and scripts.
Values are read once into an immutable Settings object which is then passed
explicitly to the components that need it (database handle, Redis client,
mail transport, dispatcher).

Environment Variables:
    DATABASE_URL: SQLAlchemy async URL (default postgresql+asyncpg://localhost/hr_tracker)
    DB_POOL_SIZE / DB_MAX_OVERFLOW / DB_POOL_TIMEOUT / DB_POOL_RECYCLE: pool sizing
    REDIS_URL, REDIS_MAX_CONNECTIONS, REDIS_TIMEOUT, REDIS_RETRY_ATTEMPTS
    SESSION_KEY_PREFIX, SESSION_COOKIE_NAME, PRIVILEGED_ROLE
    SMTP_HOST, SMTP_PORT, SMTP_USERNAME, SMTP_PASSWORD, SMTP_USE_STARTTLS, SMTP_TIMEOUT
    MAIL_FROM_ADDRESS, MAIL_FROM_NAME, ORGANIZATION_NAME
    NOTIFICATION_MAX_CONCURRENCY
    CELERY_BROKER_URL, CELERY_RESULT_BACKEND
    LOG_LEVEL

A .env file in the working directory is loaded first (python-dotenv);
variables already set in the process environment win.
"""

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from dotenv import load_dotenv

DEFAULT_DATABASE_URL: Final[str] = "postgresql+asyncpg://localhost:5432/hr_tracker"
DEFAULT_REDIS_URL: Final[str] = "redis://localhost:6379/0"
DEFAULT_PRIVILEGED_ROLE: Final[str] = "HR"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Immutable runtime configuration.

    Usage:
        >>> settings = Settings.from_env()
        >>> settings.privileged_role
        'HR'
    """

    database_url: str = DEFAULT_DATABASE_URL
    db_pool_size: int = 20
    db_max_overflow: int = 0
    db_pool_timeout: float = 2.0
    db_pool_recycle: int = 1800
    db_echo: bool = False

    redis_url: str = DEFAULT_REDIS_URL
    redis_max_connections: int = 10
    redis_timeout: int = 5
    redis_retry_attempts: int = 3

    session_key_prefix: str = "session:"
    session_cookie_name: str = "session_token"
    privileged_role: str = DEFAULT_PRIVILEGED_ROLE

    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_starttls: bool = True
    smtp_timeout: float = 10.0
    mail_from_address: str = "hr@example.com"
    mail_from_name: str = "HR Office"
    organization_name: str = "Our Organization"

    notification_max_concurrency: int = 3

    celery_broker_url: str = "redis://localhost:6379/1"
    celery_result_backend: str = "redis://localhost:6379/2"

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.db_pool_size < 1:
            raise ValueError(f"DB_POOL_SIZE must be >= 1, got {self.db_pool_size}")
        if self.notification_max_concurrency < 1:
            raise ValueError(
                "NOTIFICATION_MAX_CONCURRENCY must be >= 1, "
                f"got {self.notification_max_concurrency}"
            )
        if not self.privileged_role:
            raise ValueError("PRIVILEGED_ROLE must not be empty")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, load_dotenv_file: bool = True
    ) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (tests)
            load_dotenv_file: Load .env before reading os.environ

        Raises:
            ValueError: If a numeric variable cannot be parsed or is out of range
        """
        if environ is None:
            if load_dotenv_file:
                load_dotenv()
            environ = os.environ

        def get(name: str, default: str) -> str:
            return environ.get(name, default)

        return cls(
            database_url=get("DATABASE_URL", DEFAULT_DATABASE_URL),
            db_pool_size=int(get("DB_POOL_SIZE", "20")),
            db_max_overflow=int(get("DB_MAX_OVERFLOW", "0")),
            db_pool_timeout=float(get("DB_POOL_TIMEOUT", "2")),
            db_pool_recycle=int(get("DB_POOL_RECYCLE", "1800")),
            db_echo=_as_bool(get("DB_ECHO", "false")),
            redis_url=get("REDIS_URL", DEFAULT_REDIS_URL),
            redis_max_connections=int(get("REDIS_MAX_CONNECTIONS", "10")),
            redis_timeout=int(get("REDIS_TIMEOUT", "5")),
            redis_retry_attempts=int(get("REDIS_RETRY_ATTEMPTS", "3")),
            session_key_prefix=get("SESSION_KEY_PREFIX", "session:"),
            session_cookie_name=get("SESSION_COOKIE_NAME", "session_token"),
            privileged_role=get("PRIVILEGED_ROLE", DEFAULT_PRIVILEGED_ROLE),
            smtp_host=get("SMTP_HOST", "localhost"),
            smtp_port=int(get("SMTP_PORT", "587")),
            smtp_username=environ.get("SMTP_USERNAME") or None,
            smtp_password=environ.get("SMTP_PASSWORD") or None,
            smtp_use_starttls=_as_bool(get("SMTP_USE_STARTTLS", "true")),
            smtp_timeout=float(get("SMTP_TIMEOUT", "10")),
            mail_from_address=get("MAIL_FROM_ADDRESS", "hr@example.com"),
            mail_from_name=get("MAIL_FROM_NAME", "HR Office"),
            organization_name=get("ORGANIZATION_NAME", "Our Organization"),
            notification_max_concurrency=int(get("NOTIFICATION_MAX_CONCURRENCY", "3")),
            celery_broker_url=get("CELERY_BROKER_URL", "redis://localhost:6379/1"),
            celery_result_backend=get("CELERY_RESULT_BACKEND", "redis://localhost:6379/2"),
            log_level=get("LOG_LEVEL", "INFO").upper(),
        )
