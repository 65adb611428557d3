import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from blood.groups import BLOOD_GROUP_CODES, normalize_blood_group
from .models import BloodStock

logger = logging.getLogger(__name__)


def _clean_units(units) -> int:
    # bool is an int subclass; True must not become 1 unit
    if isinstance(units, bool) or not isinstance(units, int):
        raise ValidationError({"units": "Units must be a whole number."})
    if units < 0:
        raise ValidationError({"units": "Units cannot be negative."})
    return units


def set_stock(hospital, blood_group, units):
    """
    Upsert the (hospital, blood group) row to `units`.

    Last write wins: two staff members saving the same row at once simply
    overwrite each other. Calling it twice with the same values leaves one
    row with those values.
    """
    group = normalize_blood_group(blood_group)
    if group not in BLOOD_GROUP_CODES:
        raise ValidationError({"blood_group": f"Unknown blood group: {blood_group!r}."})
    units = _clean_units(units)

    try:
        with transaction.atomic():
            entry, created = BloodStock.objects.update_or_create(
                hospital=hospital,
                blood_group=group,
                defaults={"units_available": units},
            )
    except IntegrityError:
        # another session inserted the same key first; overwrite its value
        BloodStock.objects.filter(hospital=hospital, blood_group=group).update(
            units_available=units,
            updated_at=timezone.now(),
        )
        entry = BloodStock.objects.get(hospital=hospital, blood_group=group)
        created = False

    logger.info(
        "Stock %s for hospital %s: %s=%s",
        "created" if created else "updated", hospital.pk, group, units,
    )
    return entry


def stock_levels(hospital) -> dict:
    """
    Every blood group with its units; groups never entered read as 0.
    """
    levels = {code: 0 for code in BLOOD_GROUP_CODES}
    for group, units in BloodStock.objects.filter(hospital=hospital).values_list("blood_group", "units_available"):
        levels[group] = units
    return levels
