# PATH: apps/domains/enrollment/services.py
# 수강 등록/해지/상태/과제 채점: 뷰에서 호출하는 애플리케이션 서비스 계층 (UoW + use case 연결)

from __future__ import annotations

from typing import Iterable

from django.conf import settings
from django.utils import timezone

from academy.adapters.db.django import repositories_courses as course_repo
from academy.adapters.db.django import repositories_enrollment as enroll_repo
from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.enrollment.enrollment_lifecycle import (
    enroll_user,
    get_enrollment_state,
    unenroll_user,
)
from academy.application.use_cases.enrollment.submit_assignment import submit_assignment_answers
from academy.domain.enrollment import (
    RETRY_DELAY_MS,
    EnrollmentState,
    GradingResult,
    SubmittedAnswer,
)


def _retry_delay_ms() -> int:
    return int(getattr(settings, "ASSIGNMENT_RETRY_DELAY_MS", RETRY_DELAY_MS))


def enroll_user_in_course(course_id: int, user_id: int):
    """등록 후 갱신된 Course 인스턴스 반환 (number_of_students 반영)."""
    enroll_user(DjangoUnitOfWork(), course_id, user_id, now=timezone.now())
    return course_repo.course_get(course_id)


def unenroll_user_from_course(course_id: int, user_id: int) -> dict:
    unenroll_user(DjangoUnitOfWork(), course_id, user_id)
    return {"message": "User unenrolled successfully"}


def get_state(course_id: int, user_id: int) -> EnrollmentState:
    return get_enrollment_state(
        DjangoUnitOfWork(),
        course_id,
        user_id,
        retry_delay_ms=_retry_delay_ms(),
    )


def submit_answers(course_id: int, user_id: int, answers: Iterable[dict]) -> GradingResult:
    submitted = [
        SubmittedAnswer(question_id=item["question_id"], answer=item["answer"])
        for item in answers
    ]
    return submit_assignment_answers(
        DjangoUnitOfWork(),
        course_id,
        user_id,
        submitted,
        now=timezone.now(),
        retry_delay_ms=_retry_delay_ms(),
    )


def list_user_enrollments(user_id: int):
    return enroll_repo.enrollment_filter_by_user(user_id)


def list_course_enrollments(course_id: int):
    return enroll_repo.enrollment_filter_by_course(course_id)
