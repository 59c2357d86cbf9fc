# apps/core/serializers.py

from rest_framework import serializers

from apps.api.common.serializers import AtLeastOneFieldMixin
from apps.core.models import User


PHONE_TAKEN = "Phone number already exists"
INVALID_CREDENTIALS = "Invalid phone number or password"


def phone_taken(phone: str, exclude_pk=None) -> bool:
    qs = User.objects.filter(phone=phone)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    return qs.exists()


# ------------------------------------
# User Base
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    userName = serializers.CharField(source="name")
    phoneNumber = serializers.CharField(source="phone")
    createdAt = serializers.DateTimeField(source="date_joined")

    class Meta:
        model = User
        fields = [
            "id",
            "userName",
            "phoneNumber",
            "gender",
            "age",
            "role",
            "createdAt",
        ]
        read_only_fields = fields


# ------------------------------------
# Register
# ------------------------------------

class RegisterBaseSerializer(serializers.Serializer):
    """
    가입 공통 필드
    - phoneNumber 는 10자리, 전 계정 통틀어 unique
    - role 은 하위 클래스의 allowed_roles 안에서만 허용 (아니면 role_message)
    """

    role_message = "Invalid role"
    allowed_roles: tuple = ()

    userName = serializers.CharField(min_length=2, max_length=100)
    phoneNumber = serializers.CharField(min_length=10, max_length=10)
    password = serializers.CharField(min_length=8, write_only=True, trim_whitespace=True)
    gender = serializers.ChoiceField(choices=User.Gender.choices)
    role = serializers.CharField()
    age = serializers.IntegerField(min_value=15, max_value=25)

    def validate_phoneNumber(self, value):
        if phone_taken(value):
            raise serializers.ValidationError(PHONE_TAKEN)
        return value

    def validate_role(self, value):
        if value not in self.allowed_roles:
            raise serializers.ValidationError(self.role_message)
        return value

    def create_user(self, validated_data) -> User:
        return User.objects.create_user(
            username=validated_data["phoneNumber"],
            password=validated_data["password"],
            name=validated_data["userName"],
            phone=validated_data["phoneNumber"],
            gender=validated_data["gender"],
            age=validated_data["age"],
            role=validated_data["role"],
        )

    def create(self, validated_data):
        return self.create_user(validated_data)


class DashRegisterSerializer(RegisterBaseSerializer):
    """POST /api/auth/dashadmin/register (superAdmin / admin / sales 계정)"""

    role_message = '"role" must be one of [admin, superAdmin, sales]'
    allowed_roles = User.DASHBOARD_ROLES


# ------------------------------------
# Login
# ------------------------------------

class LoginSerializer(serializers.Serializer):
    """
    전화번호 + 비밀번호
    allowed_roles 밖의 계정은 비밀번호가 맞아도 같은 메시지로 거부
    """

    phoneNumber = serializers.CharField()
    password = serializers.CharField(min_length=8, write_only=True)

    def __init__(self, *args, allowed_roles=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.allowed_roles = tuple(allowed_roles)

    def validate(self, attrs):
        user = User.objects.filter(
            phone=attrs["phoneNumber"],
            role__in=self.allowed_roles,
            is_active=True,
        ).first()
        if user is None or not user.check_password(attrs["password"]):
            raise serializers.ValidationError(INVALID_CREDENTIALS)
        attrs["user"] = user
        return attrs


# ------------------------------------
# Profile
# ------------------------------------

class ProfileUpdateSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    userName = serializers.CharField(source="name", min_length=2, max_length=100)
    phoneNumber = serializers.CharField(source="phone", min_length=10, max_length=10)
    gender = serializers.ChoiceField(choices=User.Gender.choices)
    age = serializers.IntegerField(min_value=15, max_value=25)

    class Meta:
        model = User
        fields = ["userName", "phoneNumber", "gender", "age"]

    def validate_phoneNumber(self, value):
        exclude_pk = self.instance.pk if self.instance is not None else None
        if phone_taken(value, exclude_pk=exclude_pk):
            raise serializers.ValidationError(PHONE_TAKEN)
        return value
