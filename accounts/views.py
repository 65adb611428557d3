from django.contrib.auth import authenticate, login, logout
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from hospitals.serializers import HospitalSerializer
from .permissions import get_identity
from .serializers import (
    DonorRegistrationSerializer,
    HospitalRegistrationSerializer,
    LoginSerializer,
    UserSerializer,
    DonorProfileSerializer,
)


def _session_payload(request, user):
    identity = get_identity(request)
    return {
        "user": UserSerializer(user).data,
        "role": identity.role,
        "profile_id": identity.profile_id,
        "hospital_id": identity.hospital_id,
    }


@api_view(["POST"])
@permission_classes([AllowAny])
def register_donor(request):
    serializer = DonorRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    profile = serializer.save()
    login(request, profile.user)
    return Response(
        {"user": UserSerializer(profile.user).data, "profile": DonorProfileSerializer(profile).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@permission_classes([AllowAny])
def register_hospital(request):
    serializer = HospitalRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    hospital = serializer.save()
    login(request, hospital.user)
    return Response(
        {"user": UserSerializer(hospital.user).data, "hospital": HospitalSerializer(hospital).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@permission_classes([AllowAny])
def login_view(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    email = serializer.validated_data["email"].strip().lower()
    user = authenticate(request, username=email, password=serializer.validated_data["password"])
    if user is None:
        return Response({"detail": "Invalid email or password."}, status=status.HTTP_400_BAD_REQUEST)

    login(request, user)
    return Response(_session_payload(request, user))


@api_view(["POST"])
@permission_classes([AllowAny])
def logout_view(request):
    logout(request)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def me(request):
    return Response(_session_payload(request, request.user))
