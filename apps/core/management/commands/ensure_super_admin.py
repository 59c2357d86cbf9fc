# PATH: apps/core/management/commands/ensure_super_admin.py
"""
첫 superAdmin 계정 보장.

대시보드 계정 가입(/api/auth/dashadmin/register)은 superAdmin/admin 만 가능하므로
배포 직후 최초 계정은 이 커맨드로 만든다.

- phone 에 해당하는 계정이 없으면 role=superAdmin 으로 생성
- 있으면 role=superAdmin, 비밀번호만 맞춘다

사용:
  python manage.py ensure_super_admin --phone=0500000000 --password=changeme123 --name=Owner
"""
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.core.models import User


class Command(BaseCommand):
    help = "Ensure a superAdmin dashboard account exists (creates or resets by phone)."

    def add_arguments(self, parser):
        parser.add_argument("--phone", type=str, required=True, help="10-digit phone number (login ID)")
        parser.add_argument("--password", type=str, required=True, help="Password (min 8 chars)")
        parser.add_argument("--name", type=str, default="Super Admin", help="Display name")
        parser.add_argument(
            "--gender",
            type=str,
            default=User.Gender.MALE,
            choices=User.Gender.values,
        )

    def handle(self, *args, **options):
        phone = (options["phone"] or "").strip()
        password = (options["password"] or "").strip()
        name = (options["name"] or "Super Admin").strip()

        if len(phone) != 10:
            raise CommandError("--phone must be exactly 10 characters")
        if len(password) < 8:
            raise CommandError("--password must be at least 8 characters")

        with transaction.atomic():
            user = User.objects.filter(phone=phone).first()
            if user is None:
                user = User(phone=phone, name=name, gender=options["gender"])
                created = True
            else:
                created = False

            user.role = User.Role.SUPER_ADMIN
            user.is_active = True
            user.is_staff = True
            user.set_password(password)
            user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f"Created superAdmin: phone={phone}, name={name}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Updated superAdmin: phone={phone}, password reset"))
