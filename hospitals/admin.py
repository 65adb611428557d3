from django.contrib import admin

from .models import Hospital, BloodStock


class BloodStockInline(admin.TabularInline):
    model = BloodStock
    extra = 0
    fields = ("blood_group", "units_available", "updated_at")
    readonly_fields = ("updated_at",)


@admin.register(Hospital)
class HospitalAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "hospital_code", "city", "phone", "email", "created_at")
    list_filter = ("city", "created_at")
    search_fields = ("name", "hospital_code", "city", "email", "user__email")
    ordering = ("-created_at",)
    readonly_fields = ("created_at",)
    inlines = [BloodStockInline]


@admin.register(BloodStock)
class BloodStockAdmin(admin.ModelAdmin):
    list_display = ("id", "hospital", "blood_group", "units_available", "updated_at")
    list_filter = ("blood_group",)
    search_fields = ("hospital__name", "hospital__hospital_code")
    ordering = ("hospital__name", "blood_group")
