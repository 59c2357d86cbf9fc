import pytest

from apps.domains.languages.models import EmptyQuestion, Language, Level, ListenQuestion


@pytest.fixture
def english(db):
    return Language.objects.create(name="English")


@pytest.fixture
def level_one(english):
    return Level.objects.create(language=english, level_number=1, available=True)


def _choice_body(level, **overrides):
    body = {
        "level": level.id,
        "text": "I ___ a student.",
        "word": "am",
        "correct": "am",
        "firstAnswer": "am",
        "secondAnswer": "is",
        "thirdAnswer": "are",
        "forthAnswer": "be",
    }
    body.update(overrides)
    return body


@pytest.mark.django_db
class TestLanguageAndLevel:
    def test_language_duplicate(self, client_for, admin_user, english):
        res = client_for(admin_user).post(
            "/api/language/language", {"languageName": "English"}, format="json",
        )
        assert res.status_code == 400
        assert res.data["message"] == "This Language Already Exist"

    def test_language_lists_levels(self, client_for, student_user, level_one):
        res = client_for(student_user).get("/api/language/language")
        assert res.status_code == 200
        assert res.data["languages"][0]["levels"][0]["levelNumber"] == 1

    def test_level_create_and_duplicate(self, client_for, admin_user, english):
        client = client_for(admin_user)
        body = {"language": english.id, "levelNumber": 2, "available": False}

        assert client.post("/api/language/level", body, format="json").status_code == 201

        res = client.post("/api/language/level", body, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "This Level Already Exist"

    def test_level_move_onto_existing_number(self, client_for, admin_user, english, level_one):
        other = Level.objects.create(language=english, level_number=2)
        res = client_for(admin_user).put(
            f"/api/language/level/{other.id}", {"levelNumber": 1}, format="json",
        )
        assert res.status_code == 400
        assert res.data["message"] == "This Level Already Exist"

    def test_same_number_in_other_language(self, client_for, admin_user, level_one):
        french = Language.objects.create(name="French")
        res = client_for(admin_user).post(
            "/api/language/level",
            {"language": french.id, "levelNumber": 1, "available": True},
            format="json",
        )
        assert res.status_code == 201

    def test_level_unknown_language(self, client_for, admin_user):
        res = client_for(admin_user).post(
            "/api/language/level",
            {"language": 9999, "levelNumber": 1, "available": True},
            format="json",
        )
        assert res.status_code == 400
        assert res.data["message"] == "Language not found"

    def test_level_filter(self, client_for, student_user, english, level_one):
        Level.objects.create(language=english, level_number=2)
        res = client_for(student_user).get("/api/language/level", {"levelNumber": 2})
        assert res.data["documentCount"] == 1


@pytest.mark.django_db
class TestLevelQuestions:
    def test_empty_question_crud(self, client_for, admin_user, level_one):
        client = client_for(admin_user)

        res = client.post("/api/language/empty", _choice_body(level_one), format="json")
        assert res.status_code == 201
        question = EmptyQuestion.objects.get()

        res = client.put(f"/api/language/empty/{question.id}", {"correct": "is"}, format="json")
        assert res.status_code == 200
        assert res.data["message"] == "Updated Successfully"

        res = client.delete(f"/api/language/empty/{question.id}")
        assert res.data["message"] == "Deleted Successfully"
        assert not EmptyQuestion.objects.exists()

    def test_empty_question_needs_word(self, client_for, admin_user, level_one):
        body = _choice_body(level_one)
        del body["word"]
        res = client_for(admin_user).post("/api/language/empty", body, format="json")
        assert res.status_code == 400
        assert res.data["field"] == "word"

    def test_mean_question_word_optional(self, client_for, admin_user, level_one):
        body = _choice_body(level_one)
        del body["word"]
        res = client_for(admin_user).post("/api/language/mean", body, format="json")
        assert res.status_code == 201

    def test_missing_level(self, client_for, admin_user):
        res = client_for(admin_user).post(
            "/api/language/ranking", {"level": 9999, "text": "order these"}, format="json",
        )
        assert res.status_code == 400
        assert res.data["message"] == "Level not found"

    def test_missing_question(self, client_for, admin_user):
        res = client_for(admin_user).delete("/api/language/readatalk/9999")
        assert res.status_code == 400
        assert res.data["message"] == "Question not found"

    def test_listen_collection_name(self, client_for, admin_user, level_one):
        ListenQuestion.objects.create(level=level_one, text="listen and repeat")
        res = client_for(admin_user).get("/api/language/listen", {"levelId": level_one.id})
        assert res.data["documentCount"] == 1
        assert res.data["listens"][0]["text"] == "listen and repeat"

    def test_students_cannot_read(self, client_for, student_user):
        res = client_for(student_user).get("/api/language/mean")
        assert res.status_code == 403
