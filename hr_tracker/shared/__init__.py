"""
Shared Utilities

Responsibility:
    Cross-cutting concerns used across all layers.

Contains:
    - Settings: environment-based configuration

Does NOT contain:
    - Business logic
    - Infrastructure implementations
"""

from .config import Settings

__all__ = ["Settings"]
