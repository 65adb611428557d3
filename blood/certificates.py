import re

from django.conf import settings


def certificate_filename(full_name: str, donation_date) -> str:
    name = re.sub(r"\s+", "_", (full_name or "").strip()) or "Donor"
    return f"BloodDonation_Certificate_{name}_{donation_date.date().isoformat()}.pdf"


def certificate_data(record) -> dict:
    """
    Everything the client needs to draw the certificate for one donation.
    """
    donor_name = record.donor.full_name
    return {
        "donation_id": record.pk,
        "donor_name": donor_name,
        "blood_group": record.blood_group,
        "donation_date": record.donation_date.isoformat(),
        "hospital_name": record.hospital.name,
        "issuer": getattr(settings, "BC_CERTIFICATE_ISSUER", "BloodConnect Authority"),
        "filename": certificate_filename(donor_name, record.donation_date),
    }
