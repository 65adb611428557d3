from django.db import models
from django.utils import timezone

from .groups import BLOOD_GROUPS


class WillingnessRequest(models.Model):
    """
    A donor telling every hospital "I can donate".
    Status leaves PENDING once and never comes back; see blood.workflow.
    """
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    STATUS = [
        (PENDING, "Pending"),
        (APPROVED, "Approved"),
        (REJECTED, "Rejected"),
    ]

    donor = models.ForeignKey("accounts.DonorProfile", on_delete=models.CASCADE, related_name="willingness_requests")

    # copied from the profile at creation so hospitals see what the donor offered
    donor_name = models.CharField(max_length=200)
    blood_group = models.CharField(max_length=5, choices=BLOOD_GROUPS)
    city = models.CharField(max_length=100, blank=True)
    address = models.CharField(max_length=255, blank=True)

    status = models.CharField(max_length=10, choices=STATUS, default=PENDING, db_index=True)
    responded_by = models.ForeignKey(
        "hospitals.Hospital",
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name="responded_requests",
    )
    responded_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="willingness_status_created"),
        ]

    @property
    def is_pending(self):
        return self.status == self.PENDING

    def __str__(self):
        return f"{self.donor_name} ({self.blood_group}) [{self.status}]"


class DonationRecord(models.Model):
    """
    Written once, by an approval. Never edited afterwards.
    """
    request = models.OneToOneField(WillingnessRequest, on_delete=models.CASCADE, related_name="donation_record")
    donor = models.ForeignKey("accounts.DonorProfile", on_delete=models.CASCADE, related_name="donation_records")
    hospital = models.ForeignKey("hospitals.Hospital", on_delete=models.CASCADE, related_name="donation_records")
    blood_group = models.CharField(max_length=5, choices=BLOOD_GROUPS)
    donation_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-donation_date"]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Donation records cannot be modified once created.")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"Donation#{self.pk} {self.blood_group} at hospital #{self.hospital_id}"


class RequestDismissal(models.Model):
    """
    A hospital hiding an answered request from its own feed.
    The request row itself stays as it is for every other hospital.
    """
    hospital = models.ForeignKey("hospitals.Hospital", on_delete=models.CASCADE, related_name="dismissals")
    request = models.ForeignKey(WillingnessRequest, on_delete=models.CASCADE, related_name="dismissals")
    dismissed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["hospital", "request"], name="uniq_dismissal_hospital_request"),
        ]
