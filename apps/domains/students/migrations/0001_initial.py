import django.core.validators
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
    ]

    operations = [
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("profile_photo", models.ImageField(upload_to="students/profile/")),
                ("purchased_courses", models.ManyToManyField(blank=True, related_name="purchased_by", to="courses.course")),
                ("purchased_levels", models.ManyToManyField(blank=True, related_name="purchased_by", to="languages.level")),
                ("purchased_units", models.ManyToManyField(blank=True, related_name="purchased_by", to="exams.unit")),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="student_profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-id"],
            },
        ),
        migrations.CreateModel(
            name="StudentExamRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("mark", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)])),
                ("number_of_questions", models.PositiveIntegerField()),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exam_records", to="students.student")),
                ("subject", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exam_records", to="exams.subject")),
                ("units", models.ManyToManyField(related_name="exam_records", to="exams.unit")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
