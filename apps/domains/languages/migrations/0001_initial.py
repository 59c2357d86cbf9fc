import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Language",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100)),
            ],
            options={
                "db_table": "languages_language",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Level",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("level_number", models.PositiveIntegerField()),
                ("available", models.BooleanField(default=False)),
                ("language", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="levels", to="languages.language")),
            ],
            options={
                "db_table": "languages_level",
                "ordering": ["language_id", "level_number"],
                "constraints": [
                    models.UniqueConstraint(fields=("language", "level_number"), name="uniq_level_language_number"),
                ],
            },
        ),
        migrations.CreateModel(
            name="EmptyQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("word", models.CharField(blank=True, default="", max_length=100)),
                ("correct", models.CharField(max_length=100)),
                ("first_answer", models.CharField(max_length=100)),
                ("second_answer", models.CharField(max_length=100)),
                ("third_answer", models.CharField(max_length=100)),
                ("forth_answer", models.CharField(max_length=100)),
                ("level", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="emptyquestion_set", to="languages.level")),
            ],
            options={
                "db_table": "languages_empty_question",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="MeanQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("word", models.CharField(blank=True, default="", max_length=100)),
                ("correct", models.CharField(max_length=100)),
                ("first_answer", models.CharField(max_length=100)),
                ("second_answer", models.CharField(max_length=100)),
                ("third_answer", models.CharField(max_length=100)),
                ("forth_answer", models.CharField(max_length=100)),
                ("level", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="meanquestion_set", to="languages.level")),
            ],
            options={
                "db_table": "languages_mean_question",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ListenQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("level", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="listenquestion_set", to="languages.level")),
            ],
            options={
                "db_table": "languages_listen_question",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ReadTalkQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("level", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="readtalkquestion_set", to="languages.level")),
            ],
            options={
                "db_table": "languages_read_talk_question",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="RankingQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("level", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="rankingquestion_set", to="languages.level")),
            ],
            options={
                "db_table": "languages_ranking_question",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
    ]
