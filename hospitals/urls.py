from django.urls import path
from . import views

urlpatterns = [
    path("", views.hospital_directory, name="hospital_directory"),
    path("me/", views.my_hospital, name="my_hospital"),
    path("me/stock/", views.my_stock, name="my_stock"),
]
