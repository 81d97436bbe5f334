"""
Persistence Infrastructure Module

Data persistence implementations (SQL database, Redis sessions).

Exports:
    From database:
        - Database
    From repositories:
        - SqlApplicationRepository
    From redis:
        - RedisSessionStore
"""

from .database import Database
from .redis import RedisSessionStore
from .repositories import SqlApplicationRepository

__all__ = [
    "Database",
    "SqlApplicationRepository",
    "RedisSessionStore",
]
