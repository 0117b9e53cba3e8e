"""
공통 API 뷰
"""
import logging

from django.db import connection
from django.http import JsonResponse
from django.db.utils import DatabaseError

logger = logging.getLogger(__name__)

SERVICE_NAME = "courses-api"


def health_check(request):
    """
    헬스체크 엔드포인트

    Returns:
        - 200: 데이터베이스 연결 정상
        - 503: 데이터베이스 연결 실패
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.warning("[health] database ping failed: %s", e)
        return JsonResponse({
            "status": "unhealthy",
            "service": SERVICE_NAME,
            "database": "disconnected",
        }, status=503)

    return JsonResponse({
        "status": "healthy",
        "service": SERVICE_NAME,
        "database": "connected",
    }, status=200)
