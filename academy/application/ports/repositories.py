"""
Repository 포트: 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Optional, Protocol

from academy.domain.enrollment.entities import AssignmentKey, EnrollmentRecord


class EnrollmentRepository(Protocol):
    """Enrollment 영속화. select_for_update/atomic 은 어댑터에서 수행."""

    @abstractmethod
    def get(self, course_id: int, user_id: int) -> Optional[EnrollmentRecord]:
        """(course, user) 로 조회 (락 없음). 없으면 None."""
        ...

    @abstractmethod
    def get_for_update(self, course_id: int, user_id: int) -> Optional[EnrollmentRecord]:
        """(course, user) 로 조회 + row lock. 없으면 None."""
        ...

    @abstractmethod
    def add(self, course_id: int, user_id: int, now: datetime) -> EnrollmentRecord:
        """
        신규 등록 insert.
        (user, course) 중복이면 AlreadyEnrolledError.
        """
        ...

    @abstractmethod
    def remove(self, enrollment: EnrollmentRecord) -> None:
        ...

    @abstractmethod
    def save_attempt(self, enrollment: EnrollmentRecord) -> None:
        """date_last_attempt / test_passed / completed 저장."""
        ...


class AssignmentRepository(Protocol):
    @abstractmethod
    def get_key_by_course(self, course_id: int) -> Optional[AssignmentKey]:
        """코스의 과제 + 정답 키. 과제가 없으면 None."""
        ...


class CourseRepository(Protocol):
    @abstractmethod
    def exists(self, course_id: int) -> bool:
        ...

    @abstractmethod
    def adjust_enrollment_count(self, course_id: int, delta: int) -> None:
        """number_of_students += delta (DB 상대 갱신). 코스가 없으면 CourseNotFoundError."""
        ...


class UserRepository(Protocol):
    @abstractmethod
    def exists(self, user_id: int) -> bool:
        ...

    @abstractmethod
    def adjust_enrollment_count(self, user_id: int, delta: int) -> None:
        """number_of_enrolled_courses += delta. 사용자가 없으면 UserNotFoundError."""
        ...
