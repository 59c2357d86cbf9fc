import pytest

from apps.domains.exams.models import Comment
from apps.domains.exams.services.favorites import toggle_favorite


@pytest.fixture
def question(catalog, teacher_user, make_question):
    return make_question(catalog["unit"], teacher_user.teacher_profile)


@pytest.mark.django_db
class TestFavorites:
    def test_toggle_twice_restores_state(self, student_user, question):
        student = student_user.student_profile

        assert toggle_favorite(owner=student, question=question) is True
        assert list(student.favorite_questions.all()) == [question]

        assert toggle_favorite(owner=student, question=question) is False
        assert not student.favorite_questions.exists()

    def test_api_for_teacher(self, client_for, teacher_user, question):
        client = client_for(teacher_user)

        res = client.post("/api/exam/fav", {"questions": question.id}, format="json")
        assert res.status_code == 200
        assert res.data["message"] == "Question added to favorites"
        assert teacher_user.teacher_profile.favorite_questions.filter(id=question.id).exists()

        res = client.post("/api/exam/fav", {"questions": question.id}, format="json")
        assert res.data["message"] == "Question removed from favorites"

    def test_unknown_question(self, client_for, student_user):
        res = client_for(student_user).post("/api/exam/fav", {"questions": 9999}, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "Question not found"

    def test_admin_has_no_favorites(self, client_for, admin_user, question):
        res = client_for(admin_user).post("/api/exam/fav", {"questions": question.id}, format="json")
        assert res.status_code == 403


@pytest.mark.django_db
class TestComments:
    def test_author_flow(self, client_for, student_user, question):
        client = client_for(student_user)

        res = client.post(
            "/api/exam/comment", {"question": question.id, "comment": "nice"}, format="json",
        )
        assert res.status_code == 201
        assert res.data["message"] == "Create Comment"
        comment_id = res.data["commentId"]

        res = client.put(f"/api/exam/comment/{comment_id}", {"comment": "edited"}, format="json")
        assert res.status_code == 200
        assert Comment.objects.get(id=comment_id).text == "edited"

        res = client.delete(f"/api/exam/comment/{comment_id}")
        assert res.status_code == 200
        assert not Comment.objects.filter(id=comment_id).exists()

    def test_other_student_is_rejected(self, client_for, make_user, student_user, question):
        comment = Comment.objects.create(
            student=student_user.student_profile, question=question, text="mine",
        )
        other = client_for(make_user("student", name="Other"))

        res = other.put(f"/api/exam/comment/{comment.id}", {"comment": "hijack"}, format="json")
        assert res.status_code == 403
        assert res.data["message"] == "Not Allow"

        assert other.delete(f"/api/exam/comment/{comment.id}").status_code == 403

    @pytest.mark.parametrize("role", ["admin", "superAdmin"])
    def test_staff_cannot_delete_student_comment(self, client_for, make_user, student_user, question, role):
        comment = Comment.objects.create(
            student=student_user.student_profile, question=question, text="spam",
        )
        res = client_for(make_user(role)).delete(f"/api/exam/comment/{comment.id}")
        assert res.status_code == 403
        assert Comment.objects.filter(id=comment.id).exists()

    def test_filter_by_question(self, client_for, student_user, question):
        Comment.objects.create(student=student_user.student_profile, question=question, text="a")

        res = client_for(student_user).get("/api/exam/comment", {"questionId": question.id})
        assert res.data["documentCount"] == 1
        assert res.data["comments"][0]["studentName"] == "Student"
