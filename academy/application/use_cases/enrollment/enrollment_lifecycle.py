"""
수강 등록 / 해지 / 상태 조회 Use Case: 도메인/포트만 사용

등록·해지와 카운터(course.number_of_students, user.number_of_enrolled_courses)
갱신은 하나의 UoW 안에서 all-or-nothing.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.enrollment.entities import RETRY_DELAY_MS, EnrollmentRecord, EnrollmentState
from academy.domain.enrollment.errors import (
    AlreadyEnrolledError,
    CourseNotFoundError,
    EnrollmentNotFoundError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def enroll_user(
    uow: UnitOfWork,
    course_id: int,
    user_id: int,
    now: Optional[datetime] = None,
) -> EnrollmentRecord:
    if now is None:
        now = datetime.now(timezone.utc)

    with uow:
        if not uow.courses.exists(course_id):
            raise CourseNotFoundError()
        if not uow.users.exists(user_id):
            raise UserNotFoundError()

        if uow.enrollments.get(course_id, user_id) is not None:
            raise AlreadyEnrolledError()

        enrollment = uow.enrollments.add(course_id, user_id, now)
        uow.courses.adjust_enrollment_count(course_id, 1)
        uow.users.adjust_enrollment_count(user_id, 1)

    logger.info("[enroll] course_id=%s user_id=%s enrollment_id=%s", course_id, user_id, enrollment.enrollment_id)
    return enrollment


def unenroll_user(uow: UnitOfWork, course_id: int, user_id: int) -> None:
    with uow:
        enrollment = uow.enrollments.get_for_update(course_id, user_id)
        if enrollment is None:
            raise EnrollmentNotFoundError()

        uow.enrollments.remove(enrollment)
        uow.courses.adjust_enrollment_count(course_id, -1)
        uow.users.adjust_enrollment_count(user_id, -1)

    logger.info("[unenroll] course_id=%s user_id=%s", course_id, user_id)


def get_enrollment_state(
    uow: UnitOfWork,
    course_id: int,
    user_id: int,
    retry_delay_ms: int = RETRY_DELAY_MS,
) -> EnrollmentState:
    with uow:
        enrollment = uow.enrollments.get(course_id, user_id)
    if enrollment is None:
        raise EnrollmentNotFoundError()
    return enrollment.to_state(retry_delay_ms)
