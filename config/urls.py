from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("accounts.urls")),
    path("api/hospitals/", include("hospitals.urls")),
    path("api/blood/", include("blood.urls")),
    path("api/notifications/", include("communication.urls")),
    path("api/console/", include("core.urls")),
]

# Avatars are served by Django only during development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
