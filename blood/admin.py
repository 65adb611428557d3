from django.contrib import admin

from .models import WillingnessRequest, DonationRecord, RequestDismissal


@admin.register(WillingnessRequest)
class WillingnessRequestAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "donor_name",
        "blood_group",
        "city",
        "status",
        "responded_by",
        "responded_at",
        "created_at",
    )
    list_filter = ("status", "blood_group", "created_at", "city")
    search_fields = ("donor_name", "city", "address", "responded_by__name")
    ordering = ("-created_at",)
    # status only moves through blood.workflow
    readonly_fields = ("status", "responded_by", "responded_at", "created_at")

    fieldsets = (
        ("Donor", {
            "fields": ("donor", "donor_name", "blood_group")
        }),
        ("Location", {
            "fields": ("city", "address")
        }),
        ("Response", {
            "fields": ("status", "responded_by", "responded_at", "created_at")
        }),
    )


@admin.register(DonationRecord)
class DonationRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "donor", "hospital", "blood_group", "donation_date")
    list_filter = ("blood_group", "donation_date")
    search_fields = ("donor__full_name", "hospital__name")
    ordering = ("-donation_date",)

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(RequestDismissal)
class RequestDismissalAdmin(admin.ModelAdmin):
    list_display = ("id", "hospital", "request", "dismissed_at")
    search_fields = ("hospital__name", "request__donor_name")
    ordering = ("-dismissed_at",)
