"""
Applicant Email Templates

Subject, HTML body and plain-text body for each notification status. Both
bodies are rendered from the same paragraphs; values are HTML-escaped only
in the HTML body.
"""

from dataclasses import dataclass
from html import escape

from hr_tracker.domain.applications.status import NotificationStatus

_LAYOUT = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Application Status Update</title>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ margin-bottom: 20px; }}
    .footer {{ margin-top: 30px; color: #333; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <p>Dear {applicant_name},</p>
    </div>
{content}
    <div class="footer">
      <p>{closing}</p>
      <p>Regards,</p>
      <p style="margin: 0;">{sender_name}</p>
      <p style="margin: 0;">{organization}</p>
    </div>
  </div>
</body>
</html>
"""

_CLOSING = "For any inquiries, do not hesitate to contact the HR Office."

_PARAGRAPHS = {
    NotificationStatus.SHORTLISTED: (
        "We are pleased to inform you that your application for the {job_title} "
        "position at {organization} has been shortlisted.",
        "Our hiring team was impressed with your qualifications and experience. "
        "The specific date, time, and venue for your interview will be "
        "communicated to you shortly. Please monitor your email for these details.",
    ),
    NotificationStatus.REJECTED: (
        "Thank you for your interest in the {job_title} position at {organization} "
        "and for taking the time to apply.",
        "After careful consideration, we regret to inform you that we have decided "
        "to move forward with other candidates whose qualifications more closely "
        "match our current needs.",
        "We appreciate your interest in {organization} and wish you the best in "
        "your job search.",
    ),
}

_SUBJECTS = {
    NotificationStatus.SHORTLISTED: "Congratulations! You've Been Shortlisted for {job_title} at {organization}",
    NotificationStatus.REJECTED: "Update on Your Application for {job_title} at {organization}",
}


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str
    text: str


def render_status_email(
    status: NotificationStatus,
    applicant_name: str,
    job_title: str,
    organization: str,
    sender_name: str,
) -> RenderedEmail:
    """Render the subject and both bodies for one applicant."""
    if status not in _PARAGRAPHS:
        raise ValueError(f"No email template for status {status!r}")

    plain = {"job_title": job_title, "organization": organization}
    markup = {
        "job_title": f"<strong>{escape(job_title)}</strong>",
        "organization": escape(organization),
    }
    paragraphs = _PARAGRAPHS[status]

    content = "\n".join(f"    <p>{p.format(**markup)}</p>" for p in paragraphs)
    html = _LAYOUT.format(
        content=content,
        closing=_CLOSING,
        applicant_name=escape(applicant_name),
        sender_name=escape(sender_name),
        organization=escape(organization),
    )

    text = "\n\n".join(
        [f"Dear {applicant_name},"]
        + [p.format(**plain) for p in paragraphs]
        + [_CLOSING, f"Regards,\n{sender_name}\n{organization}"]
    ) + "\n"

    return RenderedEmail(subject=_SUBJECTS[status].format(**plain), html=html, text=text)
