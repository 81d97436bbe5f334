"""
Database Infrastructure Module

Exports:
    - Database: Injected engine/pool handle with scoped transactions
    - job_applications, metadata: SQLAlchemy Core schema
"""

from .connection import Database, build_engine, database_from_url
from .tables import job_applications, metadata

__all__ = [
    "Database",
    "build_engine",
    "database_from_url",
    "job_applications",
    "metadata",
]
