import pytest
from django.urls import reverse

from blood.models import WillingnessRequest, DonationRecord, RequestDismissal


def _offer(donor, **extra):
    return WillingnessRequest.objects.create(
        donor=donor,
        donor_name=donor.full_name,
        blood_group=donor.blood_group,
        city=donor.city,
        address=donor.address,
        **extra,
    )


# ---------- willingness creation ----------

def test_donor_offers_to_donate(make_donor, client_for):
    donor = make_donor(full_name="Sita Sharma", blood_group="O-", city="Lalitpur", address="Mangalbazar, Lalitpur")

    res = client_for(donor.user).post(reverse("willingness_requests"))

    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "pending"
    assert body["donor_name"] == "Sita Sharma"
    assert body["blood_group"] == "O-"
    assert body["city"] == "Lalitpur"
    assert body["responded_by"] is None
    assert WillingnessRequest.objects.filter(donor=donor).count() == 1


def test_offer_requires_blood_group(make_donor, client_for):
    donor = make_donor(blood_group="")

    res = client_for(donor.user).post(reverse("willingness_requests"))

    assert res.status_code == 400
    assert "Profile incomplete" in res.json()["detail"]
    assert not WillingnessRequest.objects.exists()


def test_hospital_cannot_offer(make_hospital, client_for):
    res = client_for(make_hospital().user).post(reverse("willingness_requests"))
    assert res.status_code == 403


def test_anonymous_is_rejected(api_client, db):
    assert api_client.get(reverse("willingness_requests")).status_code == 403


# ---------- hospital feed ----------

def test_hospital_feed_is_newest_first(make_donor, make_hospital, client_for):
    d1, d2 = make_donor(), make_donor()
    older = _offer(d1)
    newer = _offer(d2)

    res = client_for(make_hospital().user).get(reverse("willingness_requests"))

    assert res.status_code == 200
    assert [r["id"] for r in res.json()] == [newer.pk, older.pk]


def test_feed_status_filter(make_donor, make_hospital, client_for):
    hospital = make_hospital()
    pending = _offer(make_donor())
    _offer(make_donor(), status="rejected", responded_by=hospital)

    res = client_for(hospital.user).get(reverse("willingness_requests"), {"status": "pending"})

    assert [r["id"] for r in res.json()] == [pending.pk]


def test_donor_cannot_read_hospital_feed(make_donor, client_for):
    assert client_for(make_donor().user).get(reverse("willingness_requests")).status_code == 403


def test_donor_sees_own_requests_only(make_donor, client_for):
    me, other = make_donor(), make_donor()
    mine = _offer(me)
    _offer(other)

    res = client_for(me.user).get(reverse("my_willingness_requests"))

    assert [r["id"] for r in res.json()] == [mine.pk]


# ---------- respond ----------

def test_hospital_approves(make_donor, make_hospital, client_for):
    hospital = make_hospital(name="Bir Hospital")
    req = _offer(make_donor(blood_group="AB+"))

    res = client_for(hospital.user).post(
        reverse("respond_request", args=[req.pk]), {"decision": "approved"}, format="json",
    )

    assert res.status_code == 200
    body = res.json()
    assert body["request"]["status"] == "approved"
    assert body["request"]["responded_by"] == hospital.pk
    assert body["request"]["responded_by_name"] == "Bir Hospital"
    assert body["donation_record"]["blood_group"] == "AB+"
    assert body["donation_record"]["hospital_name"] == "Bir Hospital"


def test_hospital_rejects(make_donor, make_hospital, client_for):
    req = _offer(make_donor())

    res = client_for(make_hospital().user).post(
        reverse("respond_request", args=[req.pk]), {"decision": "rejected"}, format="json",
    )

    assert res.status_code == 200
    assert res.json()["donation_record"] is None
    assert not DonationRecord.objects.exists()


def test_second_hospital_gets_conflict(make_donor, make_hospital, client_for):
    h1, h2 = make_hospital(), make_hospital()
    req = _offer(make_donor())
    url = reverse("respond_request", args=[req.pk])

    assert client_for(h1.user).post(url, {"decision": "approved"}, format="json").status_code == 200
    res = client_for(h2.user).post(url, {"decision": "approved"}, format="json")

    assert res.status_code == 409
    assert DonationRecord.objects.count() == 1


@pytest.mark.parametrize("payload,expected", [
    ({"decision": "maybe"}, 400),
    ({}, 400),
])
def test_bad_decisions(make_donor, make_hospital, client_for, payload, expected):
    req = _offer(make_donor())
    res = client_for(make_hospital().user).post(reverse("respond_request", args=[req.pk]), payload, format="json")
    assert res.status_code == expected


def test_respond_unknown_request(make_hospital, client_for):
    res = client_for(make_hospital().user).post(
        reverse("respond_request", args=[424242]), {"decision": "approved"}, format="json",
    )
    assert res.status_code == 404


def test_donor_cannot_respond(make_donor, client_for):
    donor = make_donor()
    req = _offer(donor)
    res = client_for(donor.user).post(reverse("respond_request", args=[req.pk]), {"decision": "approved"}, format="json")
    assert res.status_code == 403
    req.refresh_from_db()
    assert req.status == "pending"


# ---------- clear history ----------

def test_clear_history_hides_answered_requests_for_this_hospital_only(make_donor, make_hospital, client_for):
    h1, h2 = make_hospital(), make_hospital()
    pending = _offer(make_donor())
    answered = _offer(make_donor(), status="approved", responded_by=h2)

    res = client_for(h1.user).post(reverse("clear_request_history"))
    assert res.json()["cleared"] == 1

    feed_h1 = client_for(h1.user).get(reverse("willingness_requests")).json()
    feed_h2 = client_for(h2.user).get(reverse("willingness_requests")).json()
    assert [r["id"] for r in feed_h1] == [pending.pk]
    assert {r["id"] for r in feed_h2} == {pending.pk, answered.pk}

    answered.refresh_from_db()
    assert answered.status == "approved"


def test_clear_history_survives_reload_and_is_repeatable(make_donor, make_hospital, client_for):
    hospital = make_hospital()
    _offer(make_donor(), status="rejected", responded_by=hospital)
    client = client_for(hospital.user)

    assert client.post(reverse("clear_request_history")).json()["cleared"] == 1
    second = client.post(reverse("clear_request_history")).json()
    assert second["cleared"] == 0
    assert RequestDismissal.objects.filter(hospital=hospital).count() == 1
    assert client.get(reverse("willingness_requests")).json() == []


def test_clear_history_with_nothing_answered(make_donor, make_hospital, client_for):
    _offer(make_donor())
    res = client_for(make_hospital().user).post(reverse("clear_request_history"))
    assert res.status_code == 200
    assert res.json()["cleared"] == 0


# ---------- history & certificates ----------

def test_donor_history_and_certificate(make_donor, make_hospital, client_for):
    donor = make_donor(full_name="Ram Bahadur Thapa", blood_group="B-")
    hospital = make_hospital(name="Patan Hospital")
    req = _offer(donor)
    client_for(hospital.user).post(reverse("respond_request", args=[req.pk]), {"decision": "approved"}, format="json")

    history = client_for(donor.user).get(reverse("donation_history")).json()
    assert len(history) == 1
    assert history[0]["hospital_name"] == "Patan Hospital"

    record = DonationRecord.objects.get()
    cert = client_for(donor.user).get(reverse("donation_certificate", args=[record.pk])).json()
    assert cert["donor_name"] == "Ram Bahadur Thapa"
    assert cert["blood_group"] == "B-"
    assert cert["hospital_name"] == "Patan Hospital"
    assert cert["issuer"] == "BloodConnect Authority"
    assert cert["filename"] == (
        f"BloodDonation_Certificate_Ram_Bahadur_Thapa_{record.donation_date.date().isoformat()}.pdf"
    )


def test_certificate_of_another_donor_is_hidden(make_donor, make_hospital, client_for):
    owner, other = make_donor(), make_donor()
    req = _offer(owner)
    client_for(make_hospital().user).post(reverse("respond_request", args=[req.pk]), {"decision": "approved"}, format="json")
    record = DonationRecord.objects.get()

    res = client_for(other.user).get(reverse("donation_certificate", args=[record.pk]))
    assert res.status_code == 404
