# apps/api/common/exceptions.py
# DRF EXCEPTION_HANDLER: 도메인 예외(academy.domain.*.errors)를 HTTP 응답으로 변환.
from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from academy.domain.shared.errors import DomainError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    """
    DomainError → {"detail", "code"} + http_status
    그 외는 DRF 기본 핸들러 (처리 못 하면 None → UnhandledExceptionMiddleware)
    """
    if isinstance(exc, DomainError):
        view = context.get("view")
        logger.info(
            "[domain_error] view=%s code=%s status=%s detail=%s",
            view.__class__.__name__ if view is not None else "-",
            exc.code,
            exc.http_status,
            exc.message,
        )
        return Response(
            {"detail": exc.message, "code": exc.code},
            status=exc.http_status,
        )

    return exception_handler(exc, context)
