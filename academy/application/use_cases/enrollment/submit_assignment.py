"""
과제 제출 Use Case: 도메인/포트만 사용 (Django 미사용)

검증 순서 (앞에서 실패하면 뒤는 보지 않음):
  1) 수강 등록 존재            → EnrollmentNotFoundError
  2) 이미 합격                 → AssignmentAlreadyPassedError
  3) 재응시 쿨다운 진행 중      → RetryCooldownError
  4) 과제 존재 / 문항 1개 이상  → AssignmentNotFoundError / EmptyAssignmentError
  5) 답안 수 == 문항 수         → IncompleteSubmissionError
  6) 모든 question_id 유효      → InvalidQuestionError

enrollment row 는 UoW 트랜잭션 안에서 락을 잡은 채 읽고 갱신한다
(동시 제출 두 건이 모두 쿨다운 검사를 통과하지 못하게).
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.enrollment.entities import RETRY_DELAY_MS, GradingResult, SubmittedAnswer
from academy.domain.enrollment.errors import (
    AssignmentNotFoundError,
    EnrollmentNotFoundError,
    RetryCooldownError,
    AssignmentAlreadyPassedError,
)
from academy.domain.enrollment.grading import grade_answers

logger = logging.getLogger(__name__)


def submit_assignment_answers(
    uow: UnitOfWork,
    course_id: int,
    user_id: int,
    answers: Iterable[SubmittedAnswer],
    now: Optional[datetime] = None,
    retry_delay_ms: int = RETRY_DELAY_MS,
) -> GradingResult:
    if now is None:
        now = datetime.now(timezone.utc)

    with uow:
        enrollment = uow.enrollments.get_for_update(course_id, user_id)
        if enrollment is None:
            raise EnrollmentNotFoundError()

        if enrollment.test_passed:
            raise AssignmentAlreadyPassedError()

        if enrollment.is_cooling_down(now, retry_delay_ms):
            raise RetryCooldownError(enrollment.next_possible_attempt(retry_delay_ms))

        key = uow.assignments.get_key_by_course(course_id)
        if key is None:
            raise AssignmentNotFoundError()

        result = grade_answers(key.questions, answers)

        enrollment.record_attempt(result.passed, now)
        uow.enrollments.save_attempt(enrollment)

    logger.info(
        "[submit_assignment] course_id=%s user_id=%s passed=%s correct=%s/%s",
        course_id,
        user_id,
        result.passed,
        result.correct_answers,
        result.total_questions,
    )
    return result
