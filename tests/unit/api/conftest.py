"""
Common fixtures for API unit tests.

The app, client, session store and auth headers come from tests/conftest.py.
"""

from uuid import uuid4

import pytest


@pytest.fixture
def sample_job_id():
    """Generate a sample job ID (UUID v4)."""
    return uuid4()


@pytest.fixture
def cookie_name(sqlite_settings):
    return sqlite_settings.session_cookie_name
