from django.db.models import Prefetch
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsHospital, current_hospital
from .models import Hospital, BloodStock
from .serializers import HospitalSerializer, HospitalDirectorySerializer, StockUpdateSerializer, BloodStockSerializer
from .stock import set_stock, stock_levels


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def hospital_directory(request):
    """
    Donor-facing list of hospitals with their current stock.
    ?city= matches any part of the city name, case-insensitively.
    """
    qs = Hospital.objects.prefetch_related(
        Prefetch("stock", queryset=BloodStock.objects.order_by("blood_group"))
    )
    city = (request.GET.get("city") or "").strip()
    if city:
        qs = qs.filter(city__icontains=city)
    return Response(HospitalDirectorySerializer(qs.order_by("name"), many=True).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsHospital])
def my_hospital(request):
    return Response(HospitalSerializer(current_hospital(request)).data)


@api_view(["GET", "PUT"])
@permission_classes([IsAuthenticated, IsHospital])
def my_stock(request):
    hospital = current_hospital(request)

    if request.method == "PUT":
        serializer = StockUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = set_stock(
            hospital,
            serializer.validated_data["blood_group"],
            serializer.validated_data["units"],
        )
        return Response(BloodStockSerializer(entry).data, status=status.HTTP_200_OK)

    return Response({"hospital": hospital.pk, "levels": stock_levels(hospital)})
