import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsDonor, IsHospital, get_identity, current_donor, current_hospital
from .certificates import certificate_data
from .models import WillingnessRequest, DonationRecord, RequestDismissal
from .serializers import WillingnessRequestSerializer, DonationRecordSerializer, RespondSerializer
from .workflow import respond, InvalidDecision, RequestNotFound, RequestAlreadyResponded

logger = logging.getLogger(__name__)


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated])
def requests_collection(request):
    if request.method == "POST":
        return _create_request(request)
    return _hospital_feed(request)


def _create_request(request):
    # donor broadcasts willingness; the fan-out runs from blood.signals after commit
    if not IsDonor().has_permission(request, None):
        return Response({"detail": IsDonor.message}, status=status.HTTP_403_FORBIDDEN)

    profile = current_donor(request)
    if not profile.blood_group:
        return Response(
            {"detail": "Profile incomplete: add your blood group before offering to donate."},
            status=status.HTTP_400_BAD_REQUEST,
        )

    req = WillingnessRequest.objects.create(
        donor=profile,
        donor_name=profile.full_name,
        blood_group=profile.blood_group,
        city=profile.city or "",
        address=profile.address or "",
        status=WillingnessRequest.PENDING,
    )
    logger.info("Donor %s created willingness request %s", profile.pk, req.pk)
    return Response(WillingnessRequestSerializer(req).data, status=status.HTTP_201_CREATED)


def _hospital_feed(request):
    if not IsHospital().has_permission(request, None):
        return Response({"detail": IsHospital.message}, status=status.HTTP_403_FORBIDDEN)

    hospital = current_hospital(request)
    qs = (
        WillingnessRequest.objects
        .exclude(dismissals__hospital=hospital)
        .select_related("responded_by")
        .order_by("-created_at", "-id")
    )
    status_filter = (request.GET.get("status") or "").strip().lower()
    if status_filter:
        qs = qs.filter(status=status_filter)
    return Response(WillingnessRequestSerializer(qs, many=True).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsDonor])
def my_requests(request):
    qs = (
        WillingnessRequest.objects
        .filter(donor_id=get_identity(request).profile_id)
        .select_related("responded_by")
        .order_by("-created_at", "-id")
    )
    return Response(WillingnessRequestSerializer(qs, many=True).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated, IsHospital])
def respond_request(request, request_id):
    serializer = RespondSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    hospital = current_hospital(request)
    try:
        req, record = respond(request_id, serializer.validated_data["decision"], hospital)
    except InvalidDecision as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except RequestNotFound as e:
        return Response({"detail": str(e)}, status=status.HTTP_404_NOT_FOUND)
    except RequestAlreadyResponded as e:
        return Response({"detail": str(e)}, status=status.HTTP_409_CONFLICT)

    return Response({
        "request": WillingnessRequestSerializer(req).data,
        "donation_record": DonationRecordSerializer(record).data if record else None,
    })


@api_view(["POST"])
@permission_classes([IsAuthenticated, IsHospital])
def clear_history(request):
    """
    Hide every answered request from this hospital's feed.
    Pending requests stay; other hospitals are unaffected.
    """
    hospital = current_hospital(request)
    answered_ids = list(
        WillingnessRequest.objects
        .exclude(status=WillingnessRequest.PENDING)
        .exclude(dismissals__hospital=hospital)
        .values_list("id", flat=True)
    )
    if not answered_ids:
        return Response({"cleared": 0, "detail": "There are no responded requests to clear."})

    RequestDismissal.objects.bulk_create(
        [RequestDismissal(hospital=hospital, request_id=rid) for rid in answered_ids],
        ignore_conflicts=True,
    )
    return Response({"cleared": len(answered_ids), "detail": "Responded requests cleared from view."})


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsDonor])
def donation_history(request):
    qs = (
        DonationRecord.objects
        .filter(donor_id=get_identity(request).profile_id)
        .select_related("hospital")
        .order_by("-donation_date", "-id")
    )
    return Response(DonationRecordSerializer(qs, many=True).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsDonor])
def donation_certificate(request, record_id):
    record = get_object_or_404(
        DonationRecord.objects.select_related("donor", "hospital"),
        pk=record_id,
        donor_id=get_identity(request).profile_id,
    )
    return Response(certificate_data(record))
