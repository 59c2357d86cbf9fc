from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("exams", "0002_question_comment_exam"),
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="student",
            name="favorite_questions",
            field=models.ManyToManyField(blank=True, related_name="favorited_by_students", to="exams.question"),
        ),
    ]
