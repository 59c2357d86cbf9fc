# PATH: apps/api/common/exceptions.py
"""
API 에러 분류 + DRF EXCEPTION_HANDLER.

모든 실패 응답은 {message, path, error} 형태로 통일한다.
검증 에러는 첫 번째 필드 메시지를 message 로, 전체를 details 로 내려준다.
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    NotAuthenticated,
    ValidationError,
)
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


NO_TOKEN_MESSAGE = "Access denied. No token provided."
INSUFFICIENT_ROLE_MESSAGE = "Access denied. Insufficient permissions."


# ==================================================
# Error taxonomy
# ==================================================

class DomainError(APIException):
    """
    도메인 에러 베이스.

    status_code 는 클래스 기본값이지만 엔드포인트마다
    다른 상태가 필요하면 인스턴스 단위로 덮어쓸 수 있다.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request."
    default_code = "bad_request"

    def __init__(self, detail=None, code=None, *, http_status: int | None = None):
        super().__init__(detail=detail, code=code)
        if http_status is not None:
            self.status_code = int(http_status)


class EntityNotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class Conflict(DomainError):
    default_detail = "Already exists."
    default_code = "conflict"


class NotAllowed(DomainError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not Allow"
    default_code = "not_allowed"


class PurchaseRequired(DomainError):
    default_detail = "Please purchase it first."
    default_code = "purchase_required"


class InsufficientData(DomainError):
    default_detail = "Not enough data available."
    default_code = "insufficient_data"


class InvalidQrCode(DomainError):
    default_detail = "Invalid or already used QR code."
    default_code = "invalid_qr_code"


# ==================================================
# Handler
# ==================================================

def _first_error(detail, prefix: str = ""):
    """중첩된 ValidationError detail 에서 (field, message, code) 첫 항목을 꺼낸다."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            field = key if not prefix else f"{prefix}.{key}"
            if key == "non_field_errors":
                field = prefix
            found = _first_error(value, field)
            if found is not None:
                return found
        return None
    if isinstance(detail, list):
        for index, value in enumerate(detail):
            field = prefix
            if isinstance(value, (dict, list)):
                field = f"{prefix}[{index}]" if prefix else str(index)
            found = _first_error(value, field)
            if found is not None:
                return found
        return None
    return prefix, str(detail), getattr(detail, "code", None)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        # DRF 가 모르는 예외 → UnhandledExceptionMiddleware 로 넘긴다
        return None

    request = context.get("request")
    path = request.get_full_path() if request is not None else ""

    if isinstance(exc, ValidationError):
        found = _first_error(exc.detail) or ("", "Invalid input.", "invalid")
        field, message, code = found
        body = {
            "message": message,
            "path": path,
            "error": code or "invalid",
            "details": response.data,
        }
        if field:
            body["field"] = field
        response.data = body
        return response

    if isinstance(exc, NotAuthenticated):
        message = NO_TOKEN_MESSAGE
    else:
        message = str(exc.detail) if not isinstance(exc.detail, (list, dict)) else str(response.data)

    codes = exc.get_codes()
    response.data = {
        "message": message,
        "path": path,
        "error": codes if isinstance(codes, str) else "error",
    }

    if response.status_code >= 500:
        logger.error("API error %s on %s: %s", response.status_code, path, message)
    return response
