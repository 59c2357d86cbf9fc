# PATH: apps/domains/exams/serializers/catalog.py
from rest_framework import serializers

from apps.api.common.serializers import AtLeastOneFieldMixin, NamedRelatedField
from apps.domains.exams.models import SchoolClass, Subject, Unit


# ======================================================
# Brief (목록 내 populate 용)
# ======================================================

class UnitBriefSerializer(serializers.ModelSerializer):
    unitName = serializers.CharField(source="name")

    class Meta:
        model = Unit
        fields = ["id", "unitName", "available", "subject"]


class SubjectBriefSerializer(serializers.ModelSerializer):
    subjectName = serializers.CharField(source="name")

    class Meta:
        model = Subject
        fields = ["id", "subjectName"]

    def get_fields(self):
        fields = super().get_fields()
        fields["class"] = serializers.PrimaryKeyRelatedField(
            source="school_class", read_only=True,
        )
        return fields


# ======================================================
# Class
# ======================================================

class SchoolClassSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    className = serializers.CharField(source="name", min_length=2, max_length=100)
    subjects = SubjectBriefSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = SchoolClass
        fields = ["id", "className", "subjects", "createdAt", "updatedAt"]


# ======================================================
# Subject
# ======================================================

class SubjectSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    """
    subjectName + class(id).
    'class' 는 예약어라 get_fields 에서 붙인다.
    """

    subjectName = serializers.CharField(source="name", min_length=2, max_length=100)
    units = UnitBriefSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Subject
        fields = ["id", "subjectName", "units", "createdAt", "updatedAt"]

    def get_fields(self):
        fields = super().get_fields()
        fields["class"] = NamedRelatedField(
            "Class",
            source="school_class",
            queryset=SchoolClass.objects.all(),
        )
        return fields


# ======================================================
# Unit
# ======================================================

class UnitSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    unitName = serializers.CharField(source="name", min_length=2, max_length=100)
    available = serializers.BooleanField(required=False)
    subject = NamedRelatedField("Subject", queryset=Subject.objects.all())
    questionCount = serializers.IntegerField(source="questions.count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Unit
        fields = [
            "id",
            "unitName",
            "available",
            "subject",
            "questionCount",
            "createdAt",
            "updatedAt",
        ]
