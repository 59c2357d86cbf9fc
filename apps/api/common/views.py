"""
공통 API 뷰 (헬스체크, JSON 404)
"""
import logging

from django.db import connection, DatabaseError
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    헬스체크 엔드포인트

    Returns:
        - 200: 모든 시스템 정상
        - 503: 데이터베이스 연결 실패
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.warning("health check failed: %s", e)
        return JsonResponse({
            "status": "unhealthy",
            "service": "universe-api",
            "database": "disconnected",
        }, status=503)

    return JsonResponse({
        "status": "healthy",
        "service": "universe-api",
        "database": "connected",
    }, status=200)


def not_found(request, exception=None):
    """handler404: 매칭되지 않은 경로도 JSON 으로 응답"""
    return JsonResponse({
        "message": f"Not Found - {request.get_full_path()}",
        "path": request.get_full_path(),
        "error": "not_found",
    }, status=404)
