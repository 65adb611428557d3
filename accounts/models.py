from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.core.validators import FileExtensionValidator, MaxValueValidator, MinValueValidator
from django.db import models

from blood.groups import BLOOD_GROUPS

DONOR_MIN_AGE = 18
DONOR_MAX_AGE = 65


class CustomUser(AbstractUser):
    """
    Login account. The email doubles as the username.
    Donor and hospital details hang off this account in their own tables;
    the platform administrator is a staff account with neither.
    """
    email = models.EmailField(unique=True)

    def __str__(self):
        return self.email or self.username


class DonorProfile(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="donor_profile")

    full_name = models.CharField(max_length=200)
    age = models.PositiveSmallIntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(DONOR_MIN_AGE), MaxValueValidator(DONOR_MAX_AGE)],
    )
    blood_group = models.CharField(max_length=5, choices=BLOOD_GROUPS, blank=True)

    city = models.CharField(max_length=100, blank=True)
    address = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=30, blank=True)

    avatar = models.ImageField(
        upload_to="avatars/",
        null=True, blank=True,
        validators=[FileExtensionValidator(allowed_extensions=["jpg", "jpeg", "png", "webp"])],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.full_name} ({self.blood_group or '?'})"
