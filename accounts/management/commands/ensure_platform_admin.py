from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.identity import resolve_identity, ROLE_ADMIN
from accounts.models import CustomUser


class Command(BaseCommand):
    help = "Create or refresh the platform administrator account (staff, no donor/hospital role)."

    def add_arguments(self, parser):
        parser.add_argument("--email", default=None, help="Defaults to settings.BC_ADMIN_EMAIL")
        parser.add_argument("--password", default=None, help="Defaults to settings.BC_ADMIN_PASSWORD")

    @transaction.atomic
    def handle(self, *args, **options):
        email = (options["email"] or getattr(settings, "BC_ADMIN_EMAIL", "") or "").strip().lower()
        password = options["password"] or getattr(settings, "BC_ADMIN_PASSWORD", "") or ""

        if not email or not password:
            raise CommandError("Admin email and password are required (flags or BC_ADMIN_EMAIL / BC_ADMIN_PASSWORD).")

        user = CustomUser.objects.filter(email__iexact=email).first()
        created = user is None
        if created:
            user = CustomUser(username=email, email=email)

        user.is_staff = True
        user.is_superuser = True
        user.is_active = True
        user.set_password(password)
        user.save()

        identity = resolve_identity(user)
        if identity.role != ROLE_ADMIN:
            raise CommandError(f"{email} already belongs to a {identity.role} account; pick another email.")

        self.stdout.write(f"{'Created' if created else 'Updated'} administrator {email}")
