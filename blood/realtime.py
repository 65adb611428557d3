import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.conf import settings

from .serializers import WillingnessRequestSerializer

logger = logging.getLogger(__name__)


def hospital_group() -> str:
    return getattr(settings, "BC_HOSPITAL_GROUP", "hospitals")


def donor_group(profile_id) -> str:
    return f"donor_{profile_id}"


def _group_send(group: str, message: dict) -> bool:
    """
    Fire-and-forget: sessions that are offline right now never see the event.
    A failed send is logged, never raised, so the write that triggered it stands.
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        logger.warning("No channel layer configured; dropping %s event", message.get("type"))
        return False

    try:
        async_to_sync(channel_layer.group_send)(group, message)
    except Exception:
        logger.exception("Realtime push to group %s failed", group)
        return False
    return True


def request_payload(req) -> dict:
    return dict(WillingnessRequestSerializer(req).data)


def push_new_request(req) -> bool:
    """
    Every connected hospital session gets the new request.
    """
    sent = _group_send(
        hospital_group(),
        {
            "type": "willingness_created",
            "data": {"type": "WILLINGNESS_CREATED", "request": request_payload(req)},
        },
    )
    if sent:
        logger.info("Fanned out willingness request %s to hospitals", req.pk)
    return sent


def push_request_responded(req, hospital) -> bool:
    return _group_send(
        donor_group(req.donor_id),
        {
            "type": "request_responded",
            "data": {
                "type": "REQUEST_RESPONDED",
                "request_id": req.pk,
                "status": req.status,
                "hospital": {"id": hospital.pk, "name": hospital.name},
            },
        },
    )
