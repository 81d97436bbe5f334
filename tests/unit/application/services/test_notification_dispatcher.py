"""
Tests for NotificationDispatcher and recipient validation.

Covers:
- Wholesale rejection of invalid batches (zero sends)
- Partial failure aggregation in input order
- Concurrency bound
- Single send error wrapping
"""

import threading
import time

import pytest

from hr_tracker.application.models import DispatchSummary, FailedEmail, NotificationRequest
from hr_tracker.application.services.notification_dispatcher import (
    NotificationDispatcher,
    parse_recipient,
    validate_recipients,
)
from hr_tracker.domain.applications.status import NotificationStatus
from hr_tracker.domain.shared.exceptions import NotificationDeliveryError, ValidationError


# ============================================================================
# VALIDATION
# ============================================================================


def test_parse_recipient_valid(recipient_payload):
    request = parse_recipient(recipient_payload(status="rejected"))

    assert request == NotificationRequest(
        to="ada@example.org",
        job_title="Lecturer in Statistics",
        applicant_name="Ada Banda",
        status=NotificationStatus.REJECTED,
    )


@pytest.mark.parametrize("status", ["pending", "hired", "Shortlisted", ""])
def test_parse_recipient_rejects_non_notifying_status(recipient_payload, status):
    with pytest.raises(ValidationError) as exc_info:
        parse_recipient(recipient_payload(status=status))

    assert exc_info.value.message == (
        "Missing required fields or invalid status. Status must be one of: shortlisted, rejected"
    )


@pytest.mark.parametrize("missing", ["to", "jobTitle", "applicantName", "status"])
def test_parse_recipient_rejects_missing_field(recipient_payload, missing):
    payload = recipient_payload()
    del payload[missing]

    with pytest.raises(ValidationError):
        parse_recipient(payload)


def test_parse_recipient_rejects_blank_field(recipient_payload):
    with pytest.raises(ValidationError):
        parse_recipient(recipient_payload(applicantName="   "))


@pytest.mark.parametrize("raw", [None, [], {}, "recipients"])
def test_validate_recipients_requires_non_empty_list(raw):
    with pytest.raises(ValidationError) as exc_info:
        validate_recipients(raw)

    assert exc_info.value.message == "Recipients array is required and must not be empty"


def test_validate_recipients_lists_every_invalid_entry(recipient_payload):
    bad_status = recipient_payload(to="b@example.org", status="offered")
    missing_name = recipient_payload(to="c@example.org")
    del missing_name["applicantName"]
    batch = [recipient_payload(), bad_status, missing_name, "not-an-object"]

    with pytest.raises(ValidationError) as exc_info:
        validate_recipients(batch)

    error = exc_info.value
    assert error.message == "Some recipients have missing required fields or invalid status"
    assert error.invalid_entries == [bad_status, missing_name, "not-an-object"]


def test_validate_recipients_returns_requests_in_order(recipient_payload):
    requests = validate_recipients(
        [recipient_payload(to="a@example.org"), recipient_payload(to="b@example.org")]
    )

    assert [request.to for request in requests] == ["a@example.org", "b@example.org"]


# ============================================================================
# DISPATCH
# ============================================================================


def _requests(addresses, status=NotificationStatus.SHORTLISTED):
    return [
        NotificationRequest(to=address, job_title="Accountant", applicant_name="A", status=status)
        for address in addresses
    ]


def test_max_concurrency_must_be_positive(fake_transport):
    with pytest.raises(ValueError):
        NotificationDispatcher(fake_transport, max_concurrency=0)


@pytest.mark.asyncio
async def test_dispatch_all_succeed(fake_transport):
    dispatcher = NotificationDispatcher(fake_transport)

    summary = await dispatcher.dispatch(_requests(["a@x.org", "b@x.org", "c@x.org"]))

    assert summary == DispatchSummary(success_count=3, failed_count=0, failed_emails=[])
    assert summary.success is True
    assert summary.message == "Successfully sent 3 emails, 0 failed"
    assert sorted(request.to for request in fake_transport.sent) == [
        "a@x.org",
        "b@x.org",
        "c@x.org",
    ]


@pytest.mark.asyncio
async def test_dispatch_partial_failure(make_transport):
    transport = make_transport(fail_for={"b@x.org", "d@x.org"})
    dispatcher = NotificationDispatcher(transport, max_concurrency=2)

    summary = await dispatcher.dispatch(_requests(["a@x.org", "b@x.org", "c@x.org", "d@x.org"]))

    assert summary.success_count == 2
    assert summary.failed_count == 2
    assert summary.total == 4
    assert summary.success is False
    assert summary.failed_emails == [
        FailedEmail(email="b@x.org", error="mailbox unavailable: b@x.org"),
        FailedEmail(email="d@x.org", error="mailbox unavailable: d@x.org"),
    ]
    assert summary.message == "Successfully sent 2 emails, 2 failed"


@pytest.mark.asyncio
async def test_dispatch_all_fail(make_transport):
    transport = make_transport(fail_for={"a@x.org", "b@x.org"})

    summary = await NotificationDispatcher(transport).dispatch(_requests(["a@x.org", "b@x.org"]))

    assert summary.success_count == 0
    assert summary.failed_count == 2
    assert transport.sent == []


@pytest.mark.asyncio
async def test_dispatch_empty_batch_rejected(fake_transport):
    with pytest.raises(ValidationError):
        await NotificationDispatcher(fake_transport).dispatch([])


@pytest.mark.asyncio
async def test_dispatch_respects_concurrency_bound():
    class SlowTransport:
        def __init__(self):
            self.active = 0
            self.peak = 0
            self.lock = threading.Lock()

        def send(self, request):
            with self.lock:
                self.active += 1
                self.peak = max(self.peak, self.active)
            time.sleep(0.02)
            with self.lock:
                self.active -= 1
            return "<id>"

    transport = SlowTransport()
    dispatcher = NotificationDispatcher(transport, max_concurrency=2)

    summary = await dispatcher.dispatch(_requests([f"u{i}@x.org" for i in range(6)]))

    assert summary.success_count == 6
    assert transport.peak == 2


@pytest.mark.asyncio
async def test_dispatch_uses_exception_class_when_message_empty():
    class SilentFailure:
        def send(self, request):
            raise TimeoutError()

    summary = await NotificationDispatcher(SilentFailure()).dispatch(_requests(["a@x.org"]))

    assert summary.failed_emails == [FailedEmail(email="a@x.org", error="TimeoutError")]


# ============================================================================
# SINGLE SEND
# ============================================================================


@pytest.mark.asyncio
async def test_send_one_returns_message_id(fake_transport):
    message_id = await NotificationDispatcher(fake_transport).send_one(_requests(["a@x.org"])[0])

    assert message_id == "<msg-1@example.org>"


@pytest.mark.asyncio
async def test_send_one_wraps_transport_failure(make_transport):
    dispatcher = NotificationDispatcher(make_transport(fail_for={"a@x.org"}))

    with pytest.raises(NotificationDeliveryError) as exc_info:
        await dispatcher.send_one(_requests(["a@x.org"])[0])

    assert exc_info.value.recipient == "a@x.org"
    assert exc_info.value.reason == "mailbox unavailable: a@x.org"


def test_summary_to_dict():
    summary = DispatchSummary(
        success_count=1,
        failed_count=1,
        failed_emails=[FailedEmail(email="b@x.org", error="refused")],
    )

    assert summary.to_dict() == {
        "message": "Successfully sent 1 emails, 1 failed",
        "success_count": 1,
        "failed_count": 1,
        "failed_emails": [{"email": "b@x.org", "error": "refused"}],
        "success": False,
    }


@pytest.mark.asyncio
async def test_dispatch_sends_overlap():
    """Every send blocks until all of them are in flight at once."""

    class RendezvousTransport:
        def __init__(self, parties):
            self.barrier = threading.Barrier(parties, timeout=2)

        def send(self, request):
            self.barrier.wait()
            return f"<{request.to}>"

    recipients = _requests([f"u{i}@x.org" for i in range(3)])
    dispatcher = NotificationDispatcher(RendezvousTransport(len(recipients)), max_concurrency=3)

    summary = await dispatcher.dispatch(recipients)

    assert summary.success_count == 3
    assert summary.failed_emails == []
