import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        ("hospitals", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="WillingnessRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("donor_name", models.CharField(max_length=200)),
                ("blood_group", models.CharField(choices=[("A+", "A+"), ("A-", "A-"), ("B+", "B+"), ("B-", "B-"), ("O+", "O+"), ("O-", "O-"), ("AB+", "AB+"), ("AB-", "AB-")], max_length=5)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("address", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")], db_index=True, default="pending", max_length=10)),
                ("responded_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("donor", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="willingness_requests", to="accounts.donorprofile")),
                ("responded_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="responded_requests", to="hospitals.hospital")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["status", "created_at"], name="willingness_status_created")],
            },
        ),
        migrations.CreateModel(
            name="DonationRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("blood_group", models.CharField(choices=[("A+", "A+"), ("A-", "A-"), ("B+", "B+"), ("B-", "B-"), ("O+", "O+"), ("O-", "O-"), ("AB+", "AB+"), ("AB-", "AB-")], max_length=5)),
                ("donation_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("donor", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="donation_records", to="accounts.donorprofile")),
                ("hospital", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="donation_records", to="hospitals.hospital")),
                ("request", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="donation_record", to="blood.willingnessrequest")),
            ],
            options={
                "ordering": ["-donation_date"],
            },
        ),
        migrations.CreateModel(
            name="RequestDismissal",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("dismissed_at", models.DateTimeField(auto_now_add=True)),
                ("hospital", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="dismissals", to="hospitals.hospital")),
                ("request", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="dismissals", to="blood.willingnessrequest")),
            ],
            options={
                "constraints": [models.UniqueConstraint(fields=("hospital", "request"), name="uniq_dismissal_hospital_request")],
            },
        ),
    ]
