from django.urls import path
from . import consumers

websocket_urlpatterns = [
    path("hospital/", consumers.HospitalFeedConsumer.as_asgi()),
    path("donor/", consumers.DonorFeedConsumer.as_asgi()),
]
