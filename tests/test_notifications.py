from datetime import timedelta

from django.urls import reverse
from django.utils import timezone

from communication.models import Notification
from communication.services import notify_user


def test_inbox_lists_own_notifications(make_donor, client_for):
    me, other = make_donor(), make_donor()
    notify_user(me.user_id, "Donation approved", level="SUCCESS", category="donation")
    notify_user(other.user_id, "Not yours")

    body = client_for(me.user).get(reverse("inbox")).json()

    assert body["unread"] == 1
    assert [n["title"] for n in body["items"]] == ["Donation approved"]
    assert body["items"][0]["category"] == "DONATION"


def test_inbox_hides_expired(make_donor, client_for, settings):
    settings.BC_NOTIFICATION_RETENTION_DAYS = 7
    donor = make_donor()
    old = notify_user(donor.user_id, "Old news")
    Notification.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=8))
    notify_user(donor.user_id, "Fresh")

    body = client_for(donor.user).get(reverse("inbox")).json()

    assert [n["title"] for n in body["items"]] == ["Fresh"]


def test_mark_read_and_mark_all(make_donor, client_for):
    donor = make_donor()
    first = notify_user(donor.user_id, "One")
    notify_user(donor.user_id, "Two")
    client = client_for(donor.user)

    res = client.post(reverse("notification_mark_read", args=[first.pk]))
    assert res.status_code == 200
    assert res.json()["read_at"] is not None

    assert client.post(reverse("notification_mark_all_read")).json() == {"marked": 1}
    assert client.get(reverse("inbox")).json()["unread"] == 0


def test_cannot_mark_someone_elses(make_donor, client_for):
    owner, other = make_donor(), make_donor()
    n = notify_user(owner.user_id, "Private")
    assert client_for(other.user).post(reverse("notification_mark_read", args=[n.pk])).status_code == 404
