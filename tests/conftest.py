import itertools

import pytest
from rest_framework.test import APIClient

from accounts.models import CustomUser, DonorProfile
from hospitals.models import Hospital

_seq = itertools.count(1)

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def _test_settings(settings, tmp_path):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.CHANNEL_LAYERS = {"default": {"BACKEND": "channels.layers.InMemoryChannelLayer"}}


def _user(email):
    return CustomUser.objects.create_user(username=email, email=email, password=PASSWORD)


@pytest.fixture
def make_donor(db):
    def _make(email=None, **fields):
        n = next(_seq)
        user = _user(email or f"donor{n}@example.com")
        data = {
            "full_name": f"Donor Number{n}",
            "age": 30,
            "blood_group": "O-",
            "city": "Kathmandu",
            "address": "Ward 4, Baneshwor",
            "phone": "9800000001",
        }
        data.update(fields)
        return DonorProfile.objects.create(user=user, **data)
    return _make


@pytest.fixture
def make_hospital(db):
    def _make(email=None, **fields):
        n = next(_seq)
        email = email or f"hospital{n}@example.com"
        user = _user(email)
        data = {
            "hospital_code": f"HOSP-{n:04d}",
            "name": f"City Hospital {n}",
            "city": "Kathmandu",
            "address": "Maharajgunj Road",
            "phone": "014412303",
            "email": email,
        }
        data.update(fields)
        return Hospital.objects.create(user=user, **data)
    return _make


@pytest.fixture
def make_admin(db):
    def _make(email=None):
        user = _user(email or f"admin{next(_seq)}@example.com")
        user.is_staff = True
        user.save(update_fields=["is_staff"])
        return user
    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(user):
        c = APIClient()
        c.force_authenticate(user=user)
        return c
    return _client
