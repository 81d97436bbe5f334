"""
Email Transport Port

Contract for the external mail-transport collaborator. Delivery retry, if
any, belongs to the transport; the dispatcher never retries.
"""

from typing import Protocol

from hr_tracker.application.models import NotificationRequest


class EmailTransportProtocol(Protocol):
    """
    Blocking mail transport.

    send() either hands the message to the mail server and returns its
    message id, or raises. Any exception is treated as a delivery failure
    for that recipient.
    """

    def send(self, request: NotificationRequest) -> str:
        ...
