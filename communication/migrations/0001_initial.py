import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("category", models.CharField(choices=[("SYSTEM", "System"), ("BLOOD", "Blood"), ("DONATION", "Donation")], db_index=True, default="SYSTEM", max_length=20)),
                ("title", models.CharField(max_length=120)),
                ("body", models.TextField(blank=True)),
                ("level", models.CharField(choices=[("INFO", "Info"), ("SUCCESS", "Success"), ("WARNING", "Warning"), ("DANGER", "Danger")], default="INFO", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user", "created_at"], name="notif_user_created"),
                    models.Index(fields=["user", "read_at"], name="notif_user_read"),
                ],
            },
        ),
    ]
