from django.urls import path
from . import views

urlpatterns = [
    path("hospitals/", views.console_hospitals, name="console_hospitals"),
    path("hospitals/<int:hospital_id>/", views.console_delete_hospital, name="console_delete_hospital"),
    path("donors/", views.console_donors, name="console_donors"),
    path("donors/<int:profile_id>/", views.console_delete_donor, name="console_delete_donor"),
    path("stats/", views.console_stats, name="console_stats"),
]
