from django.db.models.signals import pre_save, post_delete
from django.dispatch import receiver

from .models import DonorProfile


def _stored_avatar(instance):
    f = getattr(instance, "avatar", None)
    if f and getattr(f, "name", ""):
        return f
    return None


# --- Avatar cleanup: storage must not keep files no profile points at ---
@receiver(pre_save, sender=DonorProfile)
def donor_avatar_cleanup_on_change(sender, instance, **kwargs):
    if not instance.pk:
        return

    old = DonorProfile.objects.filter(pk=instance.pk).only("avatar").first()
    if old is None:
        return

    old_file = _stored_avatar(old)
    if old_file is None:
        return

    new_file = _stored_avatar(instance)
    if new_file is None or new_file.name != old_file.name:
        old_file.delete(save=False)


@receiver(post_delete, sender=DonorProfile)
def donor_avatar_cleanup_on_delete(sender, instance, **kwargs):
    f = _stored_avatar(instance)
    if f is not None:
        f.delete(save=False)
