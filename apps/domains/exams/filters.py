import django_filters

from .models import SchoolClass, Subject, Unit, Question, Comment


class SchoolClassFilter(django_filters.FilterSet):
    className = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = SchoolClass
        fields = ["className"]


class SubjectFilter(django_filters.FilterSet):
    subjectName = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    classId = django_filters.NumberFilter(field_name="school_class_id")

    class Meta:
        model = Subject
        fields = ["subjectName", "classId"]


class UnitFilter(django_filters.FilterSet):
    unitName = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    subjectId = django_filters.NumberFilter(field_name="subject_id")
    # 구 클라이언트 호환 (오타 파라미터)
    subjecId = django_filters.NumberFilter(field_name="subject_id")
    available = django_filters.BooleanFilter()

    class Meta:
        model = Unit
        fields = ["unitName", "subjectId", "subjecId", "available"]


class QuestionFilter(django_filters.FilterSet):
    questionText = django_filters.CharFilter(field_name="text", lookup_expr="icontains")
    unitId = django_filters.NumberFilter(field_name="unit_id")
    teacherId = django_filters.NumberFilter(field_name="teacher_id")
    questionType = django_filters.ChoiceFilter(
        field_name="question_type",
        choices=Question.QuestionType.choices,
    )
    difficulty = django_filters.ChoiceFilter(choices=Question.Difficulty.choices)

    class Meta:
        model = Question
        fields = ["questionText", "unitId", "teacherId", "questionType", "difficulty"]


class CommentFilter(django_filters.FilterSet):
    studentId = django_filters.NumberFilter(field_name="student_id")
    questionId = django_filters.NumberFilter(field_name="question_id")

    class Meta:
        model = Comment
        fields = ["studentId", "questionId"]
