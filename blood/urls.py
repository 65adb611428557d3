from django.urls import path
from . import views

urlpatterns = [
    path("requests/", views.requests_collection, name="willingness_requests"),
    path("requests/mine/", views.my_requests, name="my_willingness_requests"),
    path("requests/clear-history/", views.clear_history, name="clear_request_history"),
    path("requests/<int:request_id>/respond/", views.respond_request, name="respond_request"),
    path("history/", views.donation_history, name="donation_history"),
    path("history/<int:record_id>/certificate/", views.donation_certificate, name="donation_certificate"),
]
