# PATH: apps/domains/payments/services/qr_payment.py
from __future__ import annotations

import json
import logging
import uuid

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from reportlab.graphics import renderSVG
from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing, Rect, String
from reportlab.lib import colors
from rest_framework.exceptions import ValidationError

from apps.api.common.exceptions import InvalidQrCode
from apps.domains.payments.models import QrPayment
from .targets import PurchaseTarget

logger = logging.getLogger(__name__)


# ======================================================
# Issue
# ======================================================

def build_qr_payload(payment: QrPayment) -> str:
    return json.dumps({
        "type": payment.type,
        "entityId": payment.entity_id,
        "uniqueCode": payment.unique_code,
    })


@transaction.atomic
def issue_qr_token(target: PurchaseTarget, *, issued_by=None) -> QrPayment:
    """대상 존재 확인 → 1회용 코드 발급 (used=False)"""
    entity = target.resolve()

    payment = QrPayment.objects.create(
        type=target.kind,
        unique_code=uuid.uuid4().hex,
        used=False,
        issued_by=issued_by,
        **{target.kind: entity},
    )
    logger.info(
        "qr issued id=%s type=%s entity=%s by=%s",
        payment.id, target.kind, target.entity_id, getattr(issued_by, "id", None),
    )
    return payment


def render_qr_svg(payload: str, *, size: int | None = None, label: str | None = None) -> str:
    """
    QR(오류정정 H) + 가운데 브랜드 라벨 SVG.
    라벨이 가리는 영역은 H 레벨 복원 범위(~30%) 안.
    """
    size = int(size or settings.QR_IMAGE_SIZE)
    label = settings.QR_BRAND_LABEL if label is None else label
    scale = size / 300.0

    drawing = Drawing(size, size)
    drawing.add(QrCodeWidget(payload, barLevel="H", barWidth=size, barHeight=size))

    if label:
        drawing.add(Rect(
            85 * scale, 125 * scale, 130 * scale, 50 * scale,
            rx=10 * scale, ry=10 * scale,
            fillColor=colors.white, strokeColor=None,
        ))
        drawing.add(String(
            size / 2, size / 2 - 5 * scale, label,
            fontName="Helvetica-Bold", fontSize=16 * scale,
            fillColor=colors.black, textAnchor="middle",
        ))

    return renderSVG.drawToString(drawing)


# ======================================================
# Redeem
# ======================================================

def parse_qr_payload(qr_data) -> tuple[PurchaseTarget, str]:
    if isinstance(qr_data, str):
        try:
            qr_data = json.loads(qr_data)
        except ValueError:
            raise ValidationError({"qrData": ["qrData must be a JSON string."]})
    if not isinstance(qr_data, dict):
        raise ValidationError({"qrData": ["qrData must be a JSON object."]})

    unique_code = qr_data.get("uniqueCode")
    if not unique_code or not isinstance(unique_code, str):
        raise InvalidQrCode()

    target = PurchaseTarget.parse(qr_data.get("type"), qr_data.get("entityId"))
    return target, unique_code


@transaction.atomic
def redeem_qr_token(qr_data, *, student) -> PurchaseTarget:
    """
    1회 사용 보장: used=False 조건부 UPDATE 한 번으로 점유.
    점유 실패(0 row) = 없는 코드 or 이미 사용 → InvalidQrCode.
    구매 목록 추가까지 같은 트랜잭션 (대상 조회 실패 시 used 도 롤백).
    """
    target, unique_code = parse_qr_payload(qr_data)

    claimed = QrPayment.objects.filter(
        unique_code=unique_code,
        type=target.kind,
        used=False,
        **target.fk_filter,
    ).update(used=True, used_by=student, used_at=timezone.now())

    if claimed == 0:
        logger.warning(
            "qr redeem rejected student=%s type=%s entity=%s",
            student.id, target.kind, target.entity_id,
        )
        raise InvalidQrCode()

    entity = target.resolve()
    getattr(student, target.entitlement_field).add(entity)

    logger.info(
        "qr redeemed student=%s type=%s entity=%s",
        student.id, target.kind, target.entity_id,
    )
    return target
