from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import WillingnessRequest
from .realtime import push_new_request


# New rows only; status changes are pushed to the donor by blood.workflow.
@receiver(post_save, sender=WillingnessRequest)
def fan_out_new_request(sender, instance, created, **kwargs):
    if not created:
        return
    transaction.on_commit(lambda: push_new_request(instance))
