from datetime import timedelta

from django.conf import settings
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Notification
from .serializers import NotificationSerializer


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def inbox(request):
    days = int(getattr(settings, "BC_NOTIFICATION_RETENTION_DAYS", 30))
    cutoff = timezone.now() - timedelta(days=days)

    items = (
        request.user.notifications
        .filter(created_at__gte=cutoff)
        .order_by("-created_at", "-id")[:200]
    )
    unread = request.user.notifications.filter(created_at__gte=cutoff, read_at__isnull=True).count()
    return Response({
        "unread": unread,
        "items": NotificationSerializer(items, many=True).data,
    })


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def mark_read(request, pk):
    n = get_object_or_404(Notification, pk=pk, user=request.user)
    n.mark_read()
    return Response(NotificationSerializer(n).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def mark_all_read(request):
    updated = request.user.notifications.filter(read_at__isnull=True).update(read_at=timezone.now())
    return Response({"marked": updated})
