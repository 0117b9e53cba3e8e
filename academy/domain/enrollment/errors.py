"""
Enrollment 도메인 오류: 순수 파이썬
"""
from __future__ import annotations

from datetime import datetime

from academy.domain.shared.errors import BadRequestError, ForbiddenError, NotFoundError


class EnrollmentNotFoundError(NotFoundError):
    default_code = "enrollment_not_found"

    def __init__(self, message: str = "Enrollment not found"):
        super().__init__(message)


class CourseNotFoundError(NotFoundError):
    default_code = "course_not_found"

    def __init__(self, message: str = "Course not found"):
        super().__init__(message)


class UserNotFoundError(NotFoundError):
    default_code = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class AssignmentNotFoundError(NotFoundError):
    default_code = "assignment_not_found"

    def __init__(self, message: str = "No assignment found for this course"):
        super().__init__(message)


class AlreadyEnrolledError(ForbiddenError):
    default_code = "already_enrolled"

    def __init__(self, message: str = "User already enrolled in this course"):
        super().__init__(message)


class AssignmentAlreadyPassedError(ForbiddenError):
    """test_passed 는 종단 상태. 이후 제출은 모두 거부."""

    default_code = "test_already_passed"

    def __init__(self, message: str = "Test already passed"):
        super().__init__(message)


class RetryCooldownError(ForbiddenError):
    default_code = "retry_cooldown"

    def __init__(self, next_possible_attempt: datetime):
        super().__init__(
            f"Please wait until {next_possible_attempt.isoformat()} before attempting again"
        )
        self.next_possible_attempt = next_possible_attempt


class EmptyAssignmentError(BadRequestError):
    default_code = "assignment_empty"

    def __init__(self, message: str = "No questions found in the assignment"):
        super().__init__(message)


class IncompleteSubmissionError(BadRequestError):
    default_code = "incomplete_submission"

    def __init__(self, message: str = "Must answer all questions"):
        super().__init__(message)


class InvalidQuestionError(BadRequestError):
    default_code = "invalid_question"

    def __init__(self, question_id):
        super().__init__(f"Invalid question ID: {question_id}")
        self.question_id = question_id
