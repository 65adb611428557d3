from django.contrib import admin

from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "category", "level", "title", "created_at", "read_at")
    list_filter = ("category", "level", "created_at")
    search_fields = ("title", "body", "user__email")
    ordering = ("-created_at",)
