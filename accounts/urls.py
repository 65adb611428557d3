from django.urls import path
from . import views

urlpatterns = [
    path("register/donor/", views.register_donor, name="register_donor"),
    path("register/hospital/", views.register_hospital, name="register_hospital"),
    path("login/", views.login_view, name="login"),
    path("logout/", views.logout_view, name="logout"),
    path("me/", views.me, name="me"),
]
