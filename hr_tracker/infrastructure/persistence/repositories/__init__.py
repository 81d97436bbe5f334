"""
Repository Implementations

Concrete implementations of domain repository interfaces.

Exports:
    - SqlApplicationRepository: Transactional application status store
"""

from .application_repository import SqlApplicationRepository

__all__ = ["SqlApplicationRepository"]
