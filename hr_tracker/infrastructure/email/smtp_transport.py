"""
SMTP Email Transport

Blocking mail transport implementing EmailTransportProtocol with the
standard library SMTP client. One SMTP session per message; the dispatcher
runs sends in worker threads and bounds how many run at once.

Responsibility:
    - Render the status template for the recipient
    - Build a multipart (plain + HTML) message with high-priority headers
    - Open STARTTLS session, authenticate when credentials are configured

Error Handling:
    - smtplib.SMTPException / OSError propagate to the caller; the
      dispatcher records them per recipient
"""

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

from hr_tracker.application.models import NotificationRequest
from hr_tracker.infrastructure.email.templates import render_status_email
from hr_tracker.shared.config import Settings

logger = logging.getLogger(__name__)


class SmtpEmailTransport:
    """
    SMTP implementation of the mail transport.

    Usage:
        >>> transport = SmtpEmailTransport(settings)
        >>> transport.send(request)
        '<171...@hr.example.com>'
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def build_message(self, request: NotificationRequest) -> EmailMessage:
        rendered = render_status_email(
            request.status,
            applicant_name=request.applicant_name,
            job_title=request.job_title,
            organization=self.settings.organization_name,
            sender_name=self.settings.mail_from_name,
        )

        message = EmailMessage()
        message["From"] = formataddr(
            (self.settings.mail_from_name, self.settings.mail_from_address)
        )
        message["To"] = request.to
        message["Subject"] = rendered.subject
        message["Message-ID"] = make_msgid(domain=self.settings.mail_from_address.split("@")[-1])
        message["X-Priority"] = "1"
        message["X-MSMail-Priority"] = "High"
        message["Importance"] = "high"

        message.set_content(rendered.text)
        message.add_alternative(rendered.html, subtype="html")
        return message

    def send(self, request: NotificationRequest) -> str:
        """
        Deliver one notification.

        Returns:
            Message-ID header of the sent message
        """
        message = self.build_message(request)

        with smtplib.SMTP(
            self.settings.smtp_host, self.settings.smtp_port, timeout=self.settings.smtp_timeout
        ) as smtp:
            if self.settings.smtp_use_starttls:
                smtp.starttls()
            if self.settings.smtp_username and self.settings.smtp_password:
                smtp.login(self.settings.smtp_username, self.settings.smtp_password)
            smtp.send_message(message)

        logger.debug(f"SMTP accepted message {message['Message-ID']} for {request.to}")
        return message["Message-ID"]

    def verify(self) -> bool:
        """Check that the SMTP server accepts a session (NOOP). Never raises."""
        try:
            with smtplib.SMTP(
                self.settings.smtp_host,
                self.settings.smtp_port,
                timeout=self.settings.smtp_timeout,
            ) as smtp:
                if self.settings.smtp_use_starttls:
                    smtp.starttls()
                if self.settings.smtp_username and self.settings.smtp_password:
                    smtp.login(self.settings.smtp_username, self.settings.smtp_password)
                code, _ = smtp.noop()
            return code == 250
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"SMTP connection check failed: {e}")
            return False
