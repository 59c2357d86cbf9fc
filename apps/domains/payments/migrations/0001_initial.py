import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("courses", "0001_initial"),
        ("exams", "0001_initial"),
        ("languages", "0001_initial"),
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="QrPayment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("type", models.CharField(choices=[("course", "Course"), ("unit", "Unit"), ("level", "Level")], max_length=10)),
                ("unique_code", models.CharField(max_length=64, unique=True)),
                ("used", models.BooleanField(default=False)),
                ("used_at", models.DateTimeField(blank=True, null=True)),
                ("course", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="qr_payments", to="courses.course")),
                ("issued_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="issued_qr_payments", to=settings.AUTH_USER_MODEL)),
                ("level", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="qr_payments", to="languages.level")),
                ("unit", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="qr_payments", to="exams.unit")),
                ("used_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="redeemed_qr_payments", to="students.student")),
            ],
            options={
                "db_table": "payments_qr_payment",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            models.Q(("course__isnull", False), ("level__isnull", True), ("type", "course"), ("unit__isnull", True))
                            | models.Q(("course__isnull", True), ("level__isnull", True), ("type", "unit"), ("unit__isnull", False))
                            | models.Q(("course__isnull", True), ("level__isnull", False), ("type", "level"), ("unit__isnull", True))
                        ),
                        name="qr_payment_single_target",
                    ),
                ],
            },
        ),
    ]
