"""
도메인 공통: 오류 타입 (외부 라이브러리 없음)

HTTP 매핑은 apps.api.common.exceptions 가 담당한다.
"""
from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """
    Domain rule failures are explicit & client-facing.

    code: stable machine-readable identifier
    http_status: status the API layer answers with
    """

    default_code = "domain_error"
    http_status = 400

    def __init__(self, message: str, *, code: Optional[str] = None):
        super().__init__(message)
        self.message = str(message)
        self.code = str(code or self.default_code)


class NotFoundError(DomainError):
    default_code = "not_found"
    http_status = 404


class ForbiddenError(DomainError):
    default_code = "forbidden"
    http_status = 403


class BadRequestError(DomainError):
    default_code = "bad_request"
    http_status = 400


class UnauthorizedError(DomainError):
    default_code = "unauthorized"
    http_status = 401
