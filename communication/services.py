from django.db import transaction

from .models import Notification


def notify_user(user_id, title, body="", level="INFO", category="SYSTEM"):
    if not user_id:
        return None
    return Notification.objects.create(
        user_id=user_id,
        category=(category or "SYSTEM").upper(),
        title=title,
        body=body,
        level=level,
    )


def notify_after_commit(user_id, title, body="", level="INFO", category="SYSTEM"):
    """
    Queue the notification for after the surrounding transaction commits,
    so a rolled-back action never leaves a message behind.
    """
    def _run():
        notify_user(user_id, title=title, body=body, level=level, category=category)

    transaction.on_commit(_run)
