import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("exams", "0001_initial"),
        ("students", "0001_initial"),
        ("teachers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("difficulty", models.CharField(choices=[("hard", "Hard"), ("normal", "Normal"), ("easy", "Easy")], max_length=10)),
                ("question_type", models.CharField(choices=[("single", "Single"), ("multiple", "Multiple")], max_length=10)),
                ("photo", models.ImageField(blank=True, null=True, upload_to="exams/questions/")),
                ("explanation_type", models.CharField(choices=[("text", "Text"), ("video", "Video"), ("image", "Image")], default="text", max_length=10)),
                ("explanation_content", models.TextField(blank=True, default="")),
                ("explanation_image", models.ImageField(blank=True, null=True, upload_to="exams/explanations/")),
                ("requests", models.JSONField(default=list)),
                ("teacher", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="teachers.teacher")),
                ("unit", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="questions", to="exams.unit")),
            ],
            options={
                "db_table": "exams_question",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["teacher", "difficulty", "unit"], name="exams_question_pool_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="exams.question")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="students.student")),
            ],
            options={
                "db_table": "exams_comment",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Exam",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("difficulty", models.CharField(choices=[("hard", "Hard"), ("normal", "Normal"), ("easy", "Easy")], max_length=10)),
                ("number_of_questions", models.PositiveIntegerField()),
                ("created_by", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="generated_exams", to="students.student")),
                ("questions", models.ManyToManyField(related_name="exams", to="exams.question")),
                ("teacher", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exams", to="teachers.teacher")),
                ("units", models.ManyToManyField(related_name="exams", to="exams.unit")),
            ],
            options={
                "db_table": "exams_exam",
                "ordering": ["-created_at"],
            },
        ),
    ]
