import json

import pytest

from apps.api.common.exceptions import EntityNotFound, InvalidQrCode
from apps.domains.payments.models import QrPayment
from apps.domains.payments.services.qr_payment import (
    build_qr_payload,
    issue_qr_token,
    redeem_qr_token,
    render_qr_svg,
)
from apps.domains.payments.services.targets import InvalidTargetType, PurchaseTarget


@pytest.fixture
def course(catalog, teacher_user):
    from apps.domains.courses.models import Course

    return Course.objects.create(
        name="Math 101",
        teacher=teacher_user.teacher_profile,
        subject=catalog["subject"],
        institute_name="Center",
        videos=[{"title": "intro", "url": "https://example.com/1", "isFree": False}],
    )


@pytest.fixture
def level(db):
    from apps.domains.languages.models import Language, Level

    language = Language.objects.create(name="English")
    return Level.objects.create(language=language, level_number=1)


class TestPurchaseTarget:
    @pytest.mark.parametrize("kind", ["course", "unit", "level"])
    def test_known_kinds(self, kind):
        target = PurchaseTarget.parse(kind, "12")
        assert target.entity_id == 12
        assert target.fk_filter == {f"{kind}_id": 12}

    def test_unknown_kind(self):
        with pytest.raises(InvalidTargetType) as exc:
            PurchaseTarget.parse("video", 1)
        assert str(exc.value.detail) == "Invalid type. Must be 'course' or 'unit' or 'level'."

    def test_non_numeric_id(self):
        with pytest.raises(EntityNotFound):
            PurchaseTarget.parse("unit", "abc")

    @pytest.mark.parametrize("entity_id", ["0", "-3", str(2 ** 63), "99999999999999999999999"])
    def test_out_of_range_id(self, entity_id):
        with pytest.raises(EntityNotFound) as exc:
            PurchaseTarget.parse("course", entity_id)
        assert str(exc.value.detail) == "course not found."


@pytest.mark.django_db
class TestIssueAndRedeem:
    def test_issue_creates_open_token(self, catalog, admin_user):
        payment = issue_qr_token(PurchaseTarget("unit", catalog["locked_unit"].id), issued_by=admin_user)

        assert payment.used is False
        assert payment.unit == catalog["locked_unit"]
        assert payment.course is None and payment.level is None
        assert len(payment.unique_code) == 32

    def test_issue_for_missing_entity(self, db):
        with pytest.raises(EntityNotFound) as exc:
            issue_qr_token(PurchaseTarget("course", 9999))
        assert str(exc.value.detail) == "course not found."
        assert not QrPayment.objects.exists()

    def test_redeem_once(self, catalog, student_user):
        payment = issue_qr_token(PurchaseTarget("unit", catalog["locked_unit"].id))
        student = student_user.student_profile
        payload = build_qr_payload(payment)

        target = redeem_qr_token(payload, student=student)
        assert target.label == "Unit"
        assert student.purchased_units.filter(id=catalog["locked_unit"].id).exists()

        payment.refresh_from_db()
        assert payment.used is True
        assert payment.used_by == student
        assert payment.used_at is not None

        with pytest.raises(InvalidQrCode) as exc:
            redeem_qr_token(payload, student=student)
        assert str(exc.value.detail) == "Invalid or already used QR code."

    def test_code_does_not_transfer_between_targets(self, catalog, student_user):
        payment = issue_qr_token(PurchaseTarget("unit", catalog["locked_unit"].id))
        forged = json.dumps({
            "type": "unit",
            "entityId": catalog["unit"].id,
            "uniqueCode": payment.unique_code,
        })
        with pytest.raises(InvalidQrCode):
            redeem_qr_token(forged, student=student_user.student_profile)

    def test_redeem_course_and_level(self, course, level, student_user):
        student = student_user.student_profile

        for target in (PurchaseTarget("course", course.id), PurchaseTarget("level", level.id)):
            redeem_qr_token(build_qr_payload(issue_qr_token(target)), student=student)

        assert list(student.purchased_courses.all()) == [course]
        assert list(student.purchased_levels.all()) == [level]

    def test_svg_render(self):
        svg = render_qr_svg('{"type": "unit"}', size=150, label="Brand")
        assert "<svg" in svg
        assert "Brand" in svg


@pytest.mark.django_db
class TestQrApi:
    def test_admin_gets_svg(self, client_for, admin_user, course):
        res = client_for(admin_user).get(f"/api/qr/generate-qr/course/{course.id}")

        assert res.status_code == 200
        assert res["Content-Type"].startswith("image/svg+xml")
        assert b"<svg" in res.content
        assert QrPayment.objects.filter(course=course, used=False).count() == 1

    def test_invalid_type(self, client_for, admin_user):
        res = client_for(admin_user).get("/api/qr/generate-qr/video/1")
        assert res.status_code == 400
        assert res.data["message"] == "Invalid type. Must be 'course' or 'unit' or 'level'."

    def test_student_cannot_issue(self, client_for, student_user, catalog):
        res = client_for(student_user).get(f"/api/qr/generate-qr/unit/{catalog['unit'].id}")
        assert res.status_code == 403

    def test_process_payment(self, client_for, student_user, catalog):
        payment = issue_qr_token(PurchaseTarget("unit", catalog["locked_unit"].id))
        client = client_for(student_user)
        body = {"qrData": build_qr_payload(payment)}

        res = client.post("/api/qr/process-payment", body, format="json")
        assert res.status_code == 200
        assert res.data["message"] == "Unit purchased successfully."

        res = client.post("/api/qr/process-payment", body, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "Invalid or already used QR code."

    def test_huge_id_in_url_is_404(self, client_for, admin_user):
        res = client_for(admin_user).get(f"/api/qr/generate-qr/unit/{2 ** 64}")
        assert res.status_code == 404
        assert res.data["message"] == "unit not found."

    def test_huge_id_in_qr_payload(self, client_for, student_user):
        body = {"qrData": json.dumps({"type": "level", "entityId": 2 ** 64, "uniqueCode": "abc"})}
        res = client_for(student_user).post("/api/qr/process-payment", body, format="json")
        assert res.status_code == 404
        assert res.data["message"] == "level not found."

    def test_process_payment_bad_payload(self, client_for, student_user):
        res = client_for(student_user).post(
            "/api/qr/process-payment", {"qrData": "not json"}, format="json",
        )
        assert res.status_code == 400
