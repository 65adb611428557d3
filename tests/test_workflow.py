import pytest

from blood.models import WillingnessRequest, DonationRecord
from blood.workflow import (
    respond,
    InvalidDecision,
    RequestNotFound,
    RequestAlreadyResponded,
)
from communication.models import Notification


def _offer(donor):
    return WillingnessRequest.objects.create(
        donor=donor,
        donor_name=donor.full_name,
        blood_group=donor.blood_group,
        city=donor.city,
        address=donor.address,
    )


def test_new_request_starts_pending(make_donor):
    req = _offer(make_donor())
    assert req.status == WillingnessRequest.PENDING
    assert req.responded_by is None


def test_approval_sets_status_and_writes_one_record(make_donor, make_hospital):
    donor = make_donor(blood_group="A+")
    hospital = make_hospital()
    req = _offer(donor)

    updated, record = respond(req.pk, "approved", hospital)

    assert updated.status == WillingnessRequest.APPROVED
    assert updated.responded_by_id == hospital.pk
    assert updated.responded_at is not None

    assert DonationRecord.objects.count() == 1
    assert record.request_id == req.pk
    assert record.donor_id == donor.pk
    assert record.hospital_id == hospital.pk
    assert record.blood_group == "A+"


def test_rejection_writes_no_record(make_donor, make_hospital):
    req = _offer(make_donor())

    updated, record = respond(req.pk, "rejected", make_hospital())

    assert updated.status == WillingnessRequest.REJECTED
    assert record is None
    assert not DonationRecord.objects.exists()


def test_decision_is_case_and_space_insensitive(make_donor, make_hospital):
    req = _offer(make_donor())
    updated, _ = respond(req.pk, "  Approved ", make_hospital())
    assert updated.status == WillingnessRequest.APPROVED


@pytest.mark.parametrize("decision", ["pending", "accept", "", None])
def test_invalid_decision_changes_nothing(make_donor, make_hospital, decision):
    req = _offer(make_donor())

    with pytest.raises(InvalidDecision):
        respond(req.pk, decision, make_hospital())

    req.refresh_from_db()
    assert req.status == WillingnessRequest.PENDING
    assert not DonationRecord.objects.exists()


def test_unknown_request(make_hospital):
    with pytest.raises(RequestNotFound):
        respond(987654, "approved", make_hospital())


@pytest.mark.parametrize("first,second", [
    ("approved", "approved"),
    ("approved", "rejected"),
    ("rejected", "approved"),
    ("rejected", "rejected"),
])
def test_answered_request_never_changes_again(make_donor, make_hospital, first, second):
    h1, h2 = make_hospital(), make_hospital()
    req = _offer(make_donor())

    respond(req.pk, first, h1)
    with pytest.raises(RequestAlreadyResponded):
        respond(req.pk, second, h2)

    req.refresh_from_db()
    assert req.status == first
    assert req.responded_by_id == h1.pk
    assert DonationRecord.objects.count() == (1 if first == "approved" else 0)


def test_racing_hospitals_with_stale_reads(make_donor, make_hospital):
    # both hospitals loaded the request while it was still pending
    h1, h2 = make_hospital(), make_hospital()
    req = _offer(make_donor())
    seen_by_h1 = WillingnessRequest.objects.get(pk=req.pk)
    seen_by_h2 = WillingnessRequest.objects.get(pk=req.pk)
    assert seen_by_h1.is_pending and seen_by_h2.is_pending

    respond(seen_by_h1.pk, "rejected", h1)
    with pytest.raises(RequestAlreadyResponded):
        respond(seen_by_h2.pk, "approved", h2)

    req.refresh_from_db()
    assert req.status == WillingnessRequest.REJECTED
    assert not DonationRecord.objects.exists()


def test_failed_record_insert_rolls_back_status(make_donor, make_hospital, monkeypatch):
    req = _offer(make_donor())

    def boom(**kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(DonationRecord.objects, "create", boom)

    with pytest.raises(RuntimeError):
        respond(req.pk, "approved", make_hospital())

    req.refresh_from_db()
    assert req.status == WillingnessRequest.PENDING
    assert req.responded_by is None


def test_donor_is_notified_after_commit(make_donor, make_hospital, django_capture_on_commit_callbacks):
    donor = make_donor()
    hospital = make_hospital(name="Teaching Hospital")
    req = _offer(donor)

    with django_capture_on_commit_callbacks(execute=True):
        respond(req.pk, "approved", hospital)

    note = Notification.objects.get(user=donor.user)
    assert note.title == "Donation approved"
    assert "Teaching Hospital" in note.body
    assert note.category == "DONATION"


def test_scenario_donor_h1_approves_h2_is_refused(make_donor, make_hospital):
    donor = make_donor(blood_group="O-")
    h1, h2 = make_hospital(), make_hospital()

    req = _offer(donor)
    assert req.status == "pending"

    respond(req.pk, "approved", h1)
    req.refresh_from_db()
    assert req.status == "approved"
    assert req.responded_by_id == h1.pk
    record = DonationRecord.objects.get()
    assert record.blood_group == "O-"

    with pytest.raises(RequestAlreadyResponded):
        respond(req.pk, "approved", h2)
    assert DonationRecord.objects.count() == 1


def test_donation_records_are_immutable(make_donor, make_hospital):
    req = _offer(make_donor())
    _, record = respond(req.pk, "approved", make_hospital())

    record.blood_group = "AB+"
    with pytest.raises(ValueError):
        record.save()
