"""
Enrollment 도메인 엔티티: 순수 파이썬 (Django/ORM 미사용)

재응시 쿨다운·합격 종단 상태 규칙은 엔티티 메서드로 표현.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Optional

# 실패 후 다음 응시까지 대기 시간 (1분 고정)
RETRY_DELAY_MS = 60_000


def calculate_next_attempt(
    last_attempt: Optional[datetime],
    retry_delay_ms: int = RETRY_DELAY_MS,
) -> Optional[datetime]:
    if last_attempt is None:
        return None
    return last_attempt + timedelta(milliseconds=retry_delay_ms)


@dataclass
class EnrollmentRecord:
    """
    (user, course) 수강 등록 1건.
    DB/ORM 없이 응시 규칙만 보유.
    """
    enrollment_id: Optional[int]
    user_id: int
    course_id: int
    enrollment_date: datetime
    completed: bool = False
    test_passed: bool = False
    date_last_attempt: Optional[datetime] = None

    def next_possible_attempt(self, retry_delay_ms: int = RETRY_DELAY_MS) -> Optional[datetime]:
        return calculate_next_attempt(self.date_last_attempt, retry_delay_ms)

    def is_cooling_down(self, now: datetime, retry_delay_ms: int = RETRY_DELAY_MS) -> bool:
        unlock_at = self.next_possible_attempt(retry_delay_ms)
        return unlock_at is not None and now < unlock_at

    def record_attempt(self, passed: bool, now: datetime) -> None:
        """합격/불합격 모두 date_last_attempt 를 갱신한다. completed 는 합격 시에만 True."""
        self.date_last_attempt = now
        self.test_passed = bool(passed)
        self.completed = bool(passed)

    def to_state(self, retry_delay_ms: int = RETRY_DELAY_MS) -> "EnrollmentState":
        next_attempt = None if self.test_passed else self.next_possible_attempt(retry_delay_ms)
        return EnrollmentState(
            user_id=self.user_id,
            course_id=self.course_id,
            enrollment_date=self.enrollment_date,
            last_attempt_date=self.date_last_attempt,
            is_passed=self.test_passed,
            is_completed=self.completed,
            next_possible_attempt=next_attempt,
        )


@dataclass(frozen=True)
class EnrollmentState:
    user_id: int
    course_id: int
    enrollment_date: datetime
    last_attempt_date: Optional[datetime]
    is_passed: bool
    is_completed: bool
    next_possible_attempt: Optional[datetime]

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "course_id": self.course_id,
            "enrollment_date": self.enrollment_date,
            "last_attempt_date": self.last_attempt_date,
            "is_passed": self.is_passed,
            "is_completed": self.is_completed,
            "next_possible_attempt": self.next_possible_attempt,
        }


@dataclass(frozen=True)
class KeyQuestion:
    """정답 키의 문항 1개 (정답 원문 그대로 보관)."""
    question_id: int
    answer: str


@dataclass(frozen=True)
class AssignmentKey:
    assignment_id: int
    course_id: int
    questions: tuple[KeyQuestion, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SubmittedAnswer:
    question_id: Any
    answer: str


@dataclass(frozen=True)
class GradingResult:
    passed: bool
    correct_answers: int
    total_questions: int
    minimum_required: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "correct_answers": self.correct_answers,
            "total_questions": self.total_questions,
            "minimum_required": self.minimum_required,
        }
