from django.conf import settings
from django.db import models

from blood.groups import BLOOD_GROUPS


class Hospital(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="hospital")

    # registration number issued outside the platform ("Hospital ID" on the sign-up form)
    hospital_code = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=200)

    city = models.CharField(max_length=100)
    address = models.CharField(max_length=255)
    phone = models.CharField(max_length=30)
    email = models.EmailField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.hospital_code})"


class BloodStock(models.Model):
    """
    Manual inventory: units are whatever the hospital staff last entered.
    """
    hospital = models.ForeignKey(Hospital, on_delete=models.CASCADE, related_name="stock")
    blood_group = models.CharField(max_length=5, choices=BLOOD_GROUPS)
    units_available = models.PositiveIntegerField(default=0)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["blood_group"]
        constraints = [
            models.UniqueConstraint(fields=["hospital", "blood_group"], name="uniq_stock_hospital_blood_group"),
        ]

    def __str__(self):
        return f"{self.hospital.name}: {self.blood_group} x{self.units_available}"
