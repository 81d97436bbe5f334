"""
Tests for Settings.

Covers: defaults, environment parsing, validation.
"""

from dataclasses import FrozenInstanceError

import pytest

from hr_tracker.shared.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.privileged_role == "HR"
    assert settings.db_pool_size == 20
    assert settings.db_pool_timeout == 2.0
    assert settings.notification_max_concurrency == 3
    assert settings.session_cookie_name == "session_token"
    assert settings.is_sqlite is False


def test_from_env_reads_variables():
    settings = Settings.from_env(
        {
            "DATABASE_URL": "sqlite+aiosqlite:///tmp/x.db",
            "DB_POOL_SIZE": "5",
            "DB_POOL_TIMEOUT": "0.5",
            "REDIS_URL": "redis://cache:6379/3",
            "PRIVILEGED_ROLE": "HR_ADMIN",
            "SMTP_PORT": "2525",
            "SMTP_USE_STARTTLS": "false",
            "SMTP_USERNAME": "mailer",
            "SMTP_PASSWORD": "secret",
            "NOTIFICATION_MAX_CONCURRENCY": "8",
            "ORGANIZATION_NAME": "Example University",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.is_sqlite is True
    assert settings.db_pool_size == 5
    assert settings.db_pool_timeout == 0.5
    assert settings.redis_url == "redis://cache:6379/3"
    assert settings.privileged_role == "HR_ADMIN"
    assert settings.smtp_port == 2525
    assert settings.smtp_use_starttls is False
    assert settings.smtp_username == "mailer"
    assert settings.smtp_password == "secret"
    assert settings.notification_max_concurrency == 8
    assert settings.organization_name == "Example University"
    assert settings.log_level == "DEBUG"


def test_from_env_empty_credentials_become_none():
    settings = Settings.from_env({"SMTP_USERNAME": "", "SMTP_PASSWORD": ""})

    assert settings.smtp_username is None
    assert settings.smtp_password is None


def test_from_env_rejects_non_numeric():
    with pytest.raises(ValueError):
        Settings.from_env({"DB_POOL_SIZE": "many"})


@pytest.mark.parametrize(
    "overrides",
    [
        {"db_pool_size": 0},
        {"notification_max_concurrency": 0},
        {"privileged_role": ""},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)


def test_settings_are_immutable():
    settings = Settings()

    with pytest.raises(FrozenInstanceError):
        settings.privileged_role = "ADMIN"
