"""
Hospital responses to donor willingness requests.

A request starts PENDING and moves to APPROVED or REJECTED exactly once.
The status change is a conditional UPDATE (only rows still pending match),
so when two hospitals answer the same request at the same time one of them
updates 1 row and the other updates 0 rows and gets RequestAlreadyResponded.

Approval writes the DonationRecord in the same transaction as the status
change: either both land or neither does.
"""
import logging

from django.db import transaction
from django.utils import timezone

from communication.services import notify_after_commit
from .models import WillingnessRequest, DonationRecord
from .realtime import push_request_responded

logger = logging.getLogger(__name__)

DECISIONS = (WillingnessRequest.APPROVED, WillingnessRequest.REJECTED)


class WorkflowError(Exception):
    pass


class InvalidDecision(WorkflowError):
    pass


class RequestNotFound(WorkflowError):
    pass


class RequestAlreadyResponded(WorkflowError):
    pass


def _claim(request_id, decision, hospital, now) -> int:
    return (
        WillingnessRequest.objects
        .filter(pk=request_id, status=WillingnessRequest.PENDING)
        .update(status=decision, responded_by=hospital, responded_at=now)
    )


def _after_response(req, hospital):
    if req.status == WillingnessRequest.APPROVED:
        title = "Donation approved"
        body = f"{hospital.name} approved your offer to donate {req.blood_group}. Your certificate is ready."
        level = "SUCCESS"
    else:
        title = "Donation request declined"
        body = f"{hospital.name} declined your offer to donate {req.blood_group}."
        level = "WARNING"

    notify_after_commit(req.donor.user_id, title=title, body=body, level=level, category="DONATION")
    transaction.on_commit(lambda: push_request_responded(req, hospital))


def respond(request_id, decision, hospital):
    """
    Answer a pending request on behalf of `hospital`.

    Returns (request, donation_record); the record is None for a rejection.
    Raises InvalidDecision, RequestNotFound or RequestAlreadyResponded; in
    every error case nothing has been written.
    """
    decision = (decision or "").strip().lower()
    if decision not in DECISIONS:
        raise InvalidDecision(f"Decision must be one of {', '.join(DECISIONS)}.")

    now = timezone.now()

    with transaction.atomic():
        if not _claim(request_id, decision, hospital, now):
            if not WillingnessRequest.objects.filter(pk=request_id).exists():
                raise RequestNotFound(f"Willingness request {request_id} does not exist.")
            raise RequestAlreadyResponded(f"Willingness request {request_id} has already been answered.")

        req = WillingnessRequest.objects.select_related("donor", "responded_by").get(pk=request_id)

        record = None
        if decision == WillingnessRequest.APPROVED:
            record = DonationRecord.objects.create(
                request=req,
                donor_id=req.donor_id,
                hospital=hospital,
                blood_group=req.blood_group,
                donation_date=now,
            )

        _after_response(req, hospital)

    logger.info("Hospital %s %s willingness request %s", hospital.pk, decision, request_id)
    return req, record
