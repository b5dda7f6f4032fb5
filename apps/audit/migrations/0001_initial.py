import django.core.serializers.json
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
            name="AuditLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("USER_REGISTRATION", "User registered"),
                            ("USER_LOGIN", "User logged in"),
                            ("RESOURCE_CREATED", "Resource created"),
                            ("RESOURCE_UPDATED", "Resource updated"),
                            ("RESOURCE_DELETED", "Resource deleted"),
                            ("BOOKING_CREATED", "Booking created"),
                            ("BOOKING_APPROVED", "Booking approved"),
                            ("BOOKING_REJECTED", "Booking rejected"),
                            ("BOOKING_CANCELLED", "Booking cancelled"),
                        ],
                        max_length=50,
                    ),
                ),
                ("resource_id", models.PositiveBigIntegerField(blank=True, null=True)),
                ("booking_id", models.PositiveBigIntegerField(blank=True, null=True)),
                (
                    "details",
                    models.JSONField(blank=True, encoder=django.core.serializers.json.DjangoJSONEncoder, null=True),
                ),
                ("ip_address", models.GenericIPAddressField(blank=True, null=True)),
                ("timestamp", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="audit_logs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Audit log entry",
                "verbose_name_plural": "Audit log",
                "ordering": ["-timestamp", "-id"],
                "indexes": [
                    models.Index(fields=["user", "timestamp"], name="audit_user_ts_idx"),
                    models.Index(fields=["action", "timestamp"], name="audit_action_ts_idx"),
                ],
            },
        ),
    ]
