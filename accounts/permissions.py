from rest_framework.permissions import BasePermission

from hospitals.models import Hospital
from .identity import resolve_identity, ROLE_DONOR, ROLE_HOSPITAL, ROLE_ADMIN
from .models import DonorProfile


def get_identity(request):
    """
    Resolve once per request; permission classes and views share the result.
    """
    identity = getattr(request, "_bc_identity", None)
    if identity is None:
        identity = resolve_identity(request.user)
        request._bc_identity = identity
    return identity


def current_hospital(request):
    return Hospital.objects.get(pk=get_identity(request).hospital_id)


def current_donor(request):
    return DonorProfile.objects.get(pk=get_identity(request).profile_id)


class IsDonor(BasePermission):
    message = "Only donor accounts can do this."

    def has_permission(self, request, view):
        return get_identity(request).role == ROLE_DONOR


class IsHospital(BasePermission):
    message = "Only hospital accounts can do this."

    def has_permission(self, request, view):
        return get_identity(request).role == ROLE_HOSPITAL


class IsPlatformAdmin(BasePermission):
    message = "Administrator access required."

    def has_permission(self, request, view):
        return get_identity(request).role == ROLE_ADMIN
