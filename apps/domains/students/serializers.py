from django.db import transaction
from rest_framework import serializers

from apps.core.models import User
from apps.core.serializers import RegisterBaseSerializer
from apps.domains.exams.models import Subject, Unit

from .models import Student, StudentExamRecord


# -------------------------------
# Exam history
# -------------------------------

class StudentExamRecordSerializer(serializers.ModelSerializer):
    subjectId = serializers.PrimaryKeyRelatedField(source="subject", read_only=True)
    numberOfQuestions = serializers.IntegerField(source="number_of_questions", read_only=True)
    units = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = StudentExamRecord
        fields = ["id", "subjectId", "mark", "numberOfQuestions", "units", "createdAt"]


class ExamRecordItemSerializer(serializers.Serializer):
    subjectId = serializers.IntegerField()
    mark = serializers.IntegerField(min_value=0, max_value=100)
    numberOfQuestions = serializers.IntegerField(min_value=1)
    units = serializers.ListField(child=serializers.IntegerField())


class ExamRecordAppendSerializer(serializers.Serializer):
    """
    PUT /api/ctrl/student/exam_student
    {exams: [{subjectId, mark, numberOfQuestions, units: [id]}]}
    """

    exams = ExamRecordItemSerializer(many=True, allow_empty=False)

    def validate_exams(self, items):
        subject_ids = {item["subjectId"] for item in items}
        unit_ids = {unit_id for item in items for unit_id in item["units"]}
        subjects = Subject.objects.in_bulk(subject_ids)
        units = Unit.objects.in_bulk(unit_ids)

        for item in items:
            if item["subjectId"] not in subjects:
                raise serializers.ValidationError(f"Subject with ID {item['subjectId']} not found")
            for unit_id in item["units"]:
                if unit_id not in units:
                    raise serializers.ValidationError(f"Unit with ID {unit_id} not found")
        return items

    @transaction.atomic
    def append(self, student):
        records = []
        for item in self.validated_data["exams"]:
            record = StudentExamRecord.objects.create(
                student=student,
                subject_id=item["subjectId"],
                mark=item["mark"],
                number_of_questions=item["numberOfQuestions"],
            )
            record.units.set(item["units"])
            records.append(record)
        return records


# -------------------------------
# Student
# -------------------------------

class StudentSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user_id", read_only=True)
    userName = serializers.CharField(source="user.name", read_only=True)
    phoneNumber = serializers.CharField(source="user.phone", read_only=True)
    gender = serializers.CharField(source="user.gender", read_only=True)
    age = serializers.IntegerField(source="user.age", read_only=True)
    role = serializers.CharField(source="user.role", read_only=True)

    class Meta:
        model = Student
        fields = ["id", "userId", "userName", "phoneNumber", "gender", "age", "role"]


class StudentProfileSerializer(StudentSerializer):
    """본인 프로필 / 시험 이력 추가 응답"""

    profilePhoto = serializers.ImageField(source="profile_photo", read_only=True)
    purchasedUnits = serializers.PrimaryKeyRelatedField(
        source="purchased_units", many=True, read_only=True,
    )
    purchasedCourses = serializers.PrimaryKeyRelatedField(
        source="purchased_courses", many=True, read_only=True,
    )
    purchasedLanguages = serializers.PrimaryKeyRelatedField(
        source="purchased_levels", many=True, read_only=True,
    )
    favoriteQuestions = serializers.PrimaryKeyRelatedField(
        source="favorite_questions", many=True, read_only=True,
    )
    exams = StudentExamRecordSerializer(source="exam_records", many=True, read_only=True)

    class Meta(StudentSerializer.Meta):
        fields = StudentSerializer.Meta.fields + [
            "profilePhoto",
            "purchasedUnits",
            "purchasedCourses",
            "purchasedLanguages",
            "favoriteQuestions",
            "exams",
        ]


class StudentRegisterSerializer(RegisterBaseSerializer):
    """POST /api/auth/register (multipart, profilePhoto 필수)"""

    role_message = "you are not allowed, just for students"
    allowed_roles = (User.Role.STUDENT,)

    profilePhoto = serializers.ImageField(
        error_messages={
            "required": "Profile photo is required",
            "null": "Profile photo is required",
        },
    )

    @transaction.atomic
    def create(self, validated_data):
        photo = validated_data.pop("profilePhoto")
        user = self.create_user(validated_data)
        return Student.objects.create(user=user, profile_photo=photo)
