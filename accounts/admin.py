from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import CustomUser, DonorProfile

class DonorProfileInline(admin.StackedInline):
    model = DonorProfile
    can_delete = False
    verbose_name_plural = 'Donor Profile'

class CustomUserAdmin(UserAdmin):
    inlines = (DonorProfileInline,)

    list_display = ('email', 'username', 'is_staff', 'is_active', 'date_joined')
    list_filter = ('is_staff', 'is_active')
    search_fields = ('email', 'username')
    ordering = ('-date_joined',)

admin.site.register(CustomUser, CustomUserAdmin)


@admin.register(DonorProfile)
class DonorProfileAdmin(admin.ModelAdmin):
    list_display = ('id', 'full_name', 'blood_group', 'age', 'city', 'phone', 'created_at')
    list_filter = ('blood_group', 'city')
    search_fields = ('full_name', 'phone', 'city', 'user__email')
    ordering = ('-created_at',)
    readonly_fields = ('created_at', 'updated_at')
