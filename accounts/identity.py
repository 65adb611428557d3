"""
Who is this account?

An account is a donor when a DonorProfile points at it, a hospital when a
Hospital points at it, and the platform administrator when it is staff.
Checks run in that order, so the answer is always exactly one role (or
none at all).
"""
import logging
from collections import namedtuple

from django.db import DatabaseError

from hospitals.models import Hospital
from .models import DonorProfile

logger = logging.getLogger(__name__)

ROLE_DONOR = "donor"
ROLE_HOSPITAL = "hospital"
ROLE_ADMIN = "admin"

Identity = namedtuple("Identity", ["role", "profile_id", "hospital_id"])

UNRESOLVED = Identity(role=None, profile_id=None, hospital_id=None)


def resolve_identity(user) -> Identity:
    """
    Read-only. A failed lookup is logged and treated as "no role" so the
    caller can keep rendering; it never raises.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return UNRESOLVED

    try:
        profile_id = (
            DonorProfile.objects
            .filter(user_id=user.pk)
            .values_list("id", flat=True)
            .first()
        )
        if profile_id is not None:
            return Identity(role=ROLE_DONOR, profile_id=profile_id, hospital_id=None)

        hospital_id = (
            Hospital.objects
            .filter(user_id=user.pk)
            .values_list("id", flat=True)
            .first()
        )
        if hospital_id is not None:
            return Identity(role=ROLE_HOSPITAL, profile_id=None, hospital_id=hospital_id)
    except DatabaseError:
        logger.exception("Role lookup failed for user %s", user.pk)
        return UNRESOLVED

    if user.is_staff:
        return Identity(role=ROLE_ADMIN, profile_id=None, hospital_id=None)

    return UNRESOLVED
