import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("exams", "0001_initial"),
        ("teachers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100)),
                ("institute_name", models.CharField(max_length=100)),
                ("available", models.BooleanField(default=False)),
                ("videos", models.JSONField(default=list)),
                ("subject", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="courses", to="exams.subject")),
                ("teacher", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="courses", to="teachers.teacher")),
            ],
            options={
                "db_table": "courses_course",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(fields=("name", "teacher", "subject"), name="uniq_course_name_teacher_subject"),
                ],
            },
        ),
    ]
