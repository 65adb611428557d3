"""
Administrator operations that span several apps.
"""
import logging

from django.db import transaction

from accounts.models import DonorProfile
from blood.models import WillingnessRequest, DonationRecord
from hospitals.models import Hospital

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_hospital(hospital: Hospital):
    """
    Removes the hospital account together with its stock, its donation
    records and its dismissals. Requests it answered keep their final
    status; only the responded_by link is cleared.
    """
    hospital_id = hospital.pk
    released = WillingnessRequest.objects.filter(responded_by=hospital).update(responded_by=None)
    hospital.user.delete()
    logger.info("Deleted hospital %s (%s answered requests unlinked)", hospital_id, released)


@transaction.atomic
def delete_donor(profile: DonorProfile):
    """
    Removes the donor account; its willingness requests, donation records
    and notifications go with it.
    """
    profile_id = profile.pk
    profile.user.delete()
    logger.info("Deleted donor %s", profile_id)


def platform_stats() -> dict:
    return {
        "donors": DonorProfile.objects.count(),
        "hospitals": Hospital.objects.count(),
        "pending_requests": WillingnessRequest.objects.filter(status=WillingnessRequest.PENDING).count(),
        "donations": DonationRecord.objects.count(),
    }
