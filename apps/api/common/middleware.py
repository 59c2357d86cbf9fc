# PATH: apps/api/common/middleware.py
# 뷰에서 미처리 예외 발생 시 500 JSON 반환.
# process_exception 응답은 CorsMiddleware를 거치지 않으므로 여기서 CORS 헤더 추가.
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def _add_cors_headers_to_response(request, response):
    """브라우저가 500 응답 본문도 읽을 수 있도록 허용된 Origin 만 되돌려준다."""
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    allowed = getattr(settings, "CORS_ALLOWED_ORIGINS", []) or []
    if origin and origin in allowed:
        response["Access-Control-Allow-Origin"] = origin
        if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
            response["Access-Control-Allow-Credentials"] = "true"
    return response


class UnhandledExceptionMiddleware:
    """
    미처리 예외 → {message, path, error} 500 JSON.
    error 에는 DEBUG 일 때만 예외 문자열을 싣는다.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception("Unhandled exception on %s: %s", request.path, exception)
        resp = JsonResponse(
            {
                "message": "Server error",
                "path": request.get_full_path(),
                "error": str(exception) if settings.DEBUG else "internal_error",
            },
            status=500,
        )
        return _add_cors_headers_to_response(request, resp)
