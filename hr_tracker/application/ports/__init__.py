"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from hr_tracker.application.ports.email_transport import EmailTransportProtocol
from hr_tracker.application.ports.session_store import SessionStoreProtocol

__all__ = ["EmailTransportProtocol", "SessionStoreProtocol"]
