import pytest
from django.core.management import CommandError, call_command

from apps.core.models import User


@pytest.mark.django_db
class TestEnsureSuperAdmin:
    def test_creates_account(self):
        call_command("ensure_super_admin", phone="0500000000", password="changeme123", name="Owner")

        user = User.objects.get(phone="0500000000")
        assert user.role == User.Role.SUPER_ADMIN
        assert user.username == "0500000000"
        assert user.is_staff
        assert user.check_password("changeme123")

    def test_promotes_existing_account(self, admin_user):
        call_command("ensure_super_admin", phone=admin_user.phone, password="another-pass")

        admin_user.refresh_from_db()
        assert admin_user.role == User.Role.SUPER_ADMIN
        assert admin_user.check_password("another-pass")
        assert User.objects.count() == 1

    @pytest.mark.parametrize(
        "phone, password",
        [("123", "changeme123"), ("0500000000", "short")],
    )
    def test_rejects_bad_input(self, phone, password):
        with pytest.raises(CommandError):
            call_command("ensure_super_admin", phone=phone, password=password)
        assert not User.objects.exists()
