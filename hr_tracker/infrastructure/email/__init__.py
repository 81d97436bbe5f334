"""
Email Infrastructure Module

Exports:
    - SmtpEmailTransport: SMTP implementation of EmailTransportProtocol
    - render_status_email: Subject/HTML templates per notification status
"""

from .smtp_transport import SmtpEmailTransport
from .templates import RenderedEmail, render_status_email

__all__ = ["SmtpEmailTransport", "RenderedEmail", "render_status_email"]
