# PATH: apps/core/models/user.py
from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission
from django.core.validators import MaxValueValidator, MinValueValidator


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델 (AUTH_USER_MODEL = core.User)

    - 대시보드 계정 / 강사 / 학생 모두 한 테이블, role 로 구분
    - username = phone (로그인 ID)
    - 강사/학생 전용 데이터는 1:1 프로필 (teacher_profile / student_profile)
    """

    class Role(models.TextChoices):
        SUPER_ADMIN = "superAdmin", "Super admin"
        ADMIN = "admin", "Admin"
        SALES = "sales", "Sales"
        TEACHER = "teacher", "Teacher"
        STUDENT = "student", "Student"

    class Gender(models.TextChoices):
        MALE = "male", "Male"
        FEMALE = "female", "Female"

    DASHBOARD_ROLES = (Role.SUPER_ADMIN, Role.ADMIN, Role.SALES)

    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=10, unique=True)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.SALES,
        db_index=True,
    )
    gender = models.CharField(max_length=10, choices=Gender.choices)
    age = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(15), MaxValueValidator(25)],
        null=True,
        blank=True,
    )
    updated_at = models.DateTimeField(auto_now=True)

    # auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-date_joined", "-id"]

    def __str__(self):
        return f"{self.name} ({self.role})"

    def save(self, *args, **kwargs):
        # 로그인 ID 는 항상 전화번호
        if self.phone:
            self.username = self.phone
        super().save(*args, **kwargs)

    @property
    def is_dashboard_user(self) -> bool:
        return self.role in self.DASHBOARD_ROLES
