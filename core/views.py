from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.models import DonorProfile
from accounts.permissions import IsPlatformAdmin
from accounts.serializers import DonorProfileSerializer
from hospitals.models import Hospital
from hospitals.serializers import HospitalSerializer
from .console import delete_hospital, delete_donor, platform_stats


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsPlatformAdmin])
def console_hospitals(request):
    qs = Hospital.objects.order_by("-created_at", "-id")
    return Response(HospitalSerializer(qs, many=True).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsPlatformAdmin])
def console_donors(request):
    qs = DonorProfile.objects.order_by("-created_at", "-id")
    return Response(DonorProfileSerializer(qs, many=True).data)


@api_view(["DELETE"])
@permission_classes([IsAuthenticated, IsPlatformAdmin])
def console_delete_hospital(request, hospital_id):
    hospital = get_object_or_404(Hospital.objects.select_related("user"), pk=hospital_id)
    delete_hospital(hospital)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["DELETE"])
@permission_classes([IsAuthenticated, IsPlatformAdmin])
def console_delete_donor(request, profile_id):
    profile = get_object_or_404(DonorProfile.objects.select_related("user"), pk=profile_id)
    delete_donor(profile)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsPlatformAdmin])
def console_stats(request):
    return Response(platform_stats())
