"""
use case 단위 테스트: in-memory 포트 + 고정 시계 (DB 미사용)
"""
from __future__ import annotations

import copy
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from academy.application.use_cases.enrollment.enrollment_lifecycle import (
    enroll_user,
    get_enrollment_state,
    unenroll_user,
)
from academy.application.use_cases.enrollment.submit_assignment import submit_assignment_answers
from academy.domain.enrollment import AssignmentKey, EnrollmentRecord, KeyQuestion, SubmittedAnswer
from academy.domain.enrollment.errors import (
    AlreadyEnrolledError,
    AssignmentNotFoundError,
    CourseNotFoundError,
    EmptyAssignmentError,
    EnrollmentNotFoundError,
    IncompleteSubmissionError,
    RetryCooldownError,
    AssignmentAlreadyPassedError,
    UserNotFoundError,
)

T0 = datetime(2026, 3, 1, 9, 0, 0, tzinfo=timezone.utc)
COURSE_ID = 10
USER_ID = 7


class FakeEnrollments:
    def __init__(self):
        self.rows: dict[tuple[int, int], EnrollmentRecord] = {}
        self._next_id = 1

    def get(self, course_id, user_id):
        row = self.rows.get((course_id, user_id))
        return replace(row) if row else None

    def get_for_update(self, course_id, user_id):
        return self.get(course_id, user_id)

    def add(self, course_id, user_id, now):
        if (course_id, user_id) in self.rows:
            raise AlreadyEnrolledError()
        row = EnrollmentRecord(self._next_id, user_id, course_id, now)
        self._next_id += 1
        self.rows[(course_id, user_id)] = row
        return replace(row)

    def remove(self, enrollment):
        self.rows.pop((enrollment.course_id, enrollment.user_id), None)

    def save_attempt(self, enrollment):
        self.rows[(enrollment.course_id, enrollment.user_id)] = replace(enrollment)


class FakeAssignments:
    def __init__(self):
        self.keys: dict[int, AssignmentKey] = {}

    def get_key_by_course(self, course_id):
        return self.keys.get(course_id)


class FakeCounters:
    def __init__(self, not_found_error):
        self.counts: dict[int, int] = {}
        self._error = not_found_error

    def exists(self, entity_id):
        return entity_id in self.counts

    def adjust_enrollment_count(self, entity_id, delta):
        if entity_id not in self.counts:
            raise self._error()
        self.counts[entity_id] += delta


class FakeUnitOfWork:
    """with 블록에서 예외가 나면 모든 저장소를 진입 시점으로 되돌린다."""

    def __init__(self):
        self.enrollments = FakeEnrollments()
        self.assignments = FakeAssignments()
        self.courses = FakeCounters(CourseNotFoundError)
        self.users = FakeCounters(UserNotFoundError)
        self._snapshot = None

    def __enter__(self):
        self._snapshot = copy.deepcopy((self.enrollments.rows, self.courses.counts, self.users.counts))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        self._snapshot = None

    def commit(self):
        pass

    def rollback(self):
        if self._snapshot is not None:
            self.enrollments.rows, self.courses.counts, self.users.counts = self._snapshot


@pytest.fixture
def uow():
    u = FakeUnitOfWork()
    u.courses.counts[COURSE_ID] = 0
    u.users.counts[USER_ID] = 0
    u.assignments.keys[COURSE_ID] = AssignmentKey(
        assignment_id=1,
        course_id=COURSE_ID,
        questions=(KeyQuestion(101, "4"), KeyQuestion(102, "Paris")),
    )
    return u


@pytest.fixture
def enrolled(uow):
    enroll_user(uow, COURSE_ID, USER_ID, now=T0)
    return uow


def _answers(first="4", second="Paris"):
    return [SubmittedAnswer(101, first), SubmittedAnswer(102, second)]


class TestEnrollUnenroll:
    def test_enroll_creates_row_and_increments_counters(self, uow):
        record = enroll_user(uow, COURSE_ID, USER_ID, now=T0)

        assert record.enrollment_date == T0
        assert record.completed is False
        assert record.test_passed is False
        assert uow.courses.counts[COURSE_ID] == 1
        assert uow.users.counts[USER_ID] == 1

    def test_enroll_twice_is_rejected_without_touching_counters(self, enrolled):
        with pytest.raises(AlreadyEnrolledError):
            enroll_user(enrolled, COURSE_ID, USER_ID, now=T0)
        assert enrolled.courses.counts[COURSE_ID] == 1
        assert enrolled.users.counts[USER_ID] == 1

    def test_enroll_unknown_course(self, uow):
        with pytest.raises(CourseNotFoundError):
            enroll_user(uow, 999, USER_ID, now=T0)

    def test_enroll_unknown_user(self, uow):
        with pytest.raises(UserNotFoundError):
            enroll_user(uow, COURSE_ID, 999, now=T0)

    def test_counter_failure_rolls_back_insert(self, uow):
        del uow.users.counts[USER_ID]
        uow.users.exists = lambda user_id: True

        with pytest.raises(UserNotFoundError):
            enroll_user(uow, COURSE_ID, USER_ID, now=T0)
        assert uow.enrollments.rows == {}
        assert uow.courses.counts[COURSE_ID] == 0

    def test_unenroll_deletes_and_decrements(self, enrolled):
        unenroll_user(enrolled, COURSE_ID, USER_ID)

        assert enrolled.enrollments.rows == {}
        assert enrolled.courses.counts[COURSE_ID] == 0
        assert enrolled.users.counts[USER_ID] == 0

    def test_unenroll_missing(self, uow):
        with pytest.raises(EnrollmentNotFoundError):
            unenroll_user(uow, COURSE_ID, USER_ID)

    def test_reenroll_gets_fresh_row(self, enrolled):
        submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers(), now=T0)
        unenroll_user(enrolled, COURSE_ID, USER_ID)

        record = enroll_user(enrolled, COURSE_ID, USER_ID, now=T0 + timedelta(hours=1))
        assert record.test_passed is False
        assert record.date_last_attempt is None


class TestSubmitAssignment:
    def test_not_enrolled(self, uow):
        with pytest.raises(EnrollmentNotFoundError):
            submit_assignment_answers(uow, COURSE_ID, USER_ID, _answers(), now=T0)

    def test_pass_marks_enrollment_completed(self, enrolled):
        result = submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers("4", "paris"), now=T0)

        assert result.to_dict() == {
            "passed": True,
            "correct_answers": 2,
            "total_questions": 2,
            "minimum_required": 1,
        }
        row = enrolled.enrollments.rows[(COURSE_ID, USER_ID)]
        assert row.test_passed is True
        assert row.completed is True
        assert row.date_last_attempt == T0

    def test_passed_is_terminal(self, enrolled):
        submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers(), now=T0)

        with pytest.raises(AssignmentAlreadyPassedError):
            submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers(), now=T0 + timedelta(days=1))

    def test_failed_attempt_starts_cooldown(self, enrolled):
        result = submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers("1", "Rome"), now=T0)
        assert result.passed is False

        with pytest.raises(RetryCooldownError) as exc:
            submit_assignment_answers(
                enrolled, COURSE_ID, USER_ID, _answers(), now=T0 + timedelta(seconds=59)
            )
        assert exc.value.next_possible_attempt == T0 + timedelta(minutes=1)

    def test_retry_allowed_at_exact_boundary(self, enrolled):
        submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers("1", "Rome"), now=T0)

        result = submit_assignment_answers(
            enrolled, COURSE_ID, USER_ID, _answers(), now=T0 + timedelta(milliseconds=60_000)
        )
        assert result.passed is True

    def test_custom_retry_delay(self, enrolled):
        submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers("1", "Rome"), now=T0)

        result = submit_assignment_answers(
            enrolled, COURSE_ID, USER_ID, _answers(),
            now=T0 + timedelta(seconds=5),
            retry_delay_ms=5_000,
        )
        assert result.passed is True

    def test_rejected_submission_does_not_record_attempt(self, enrolled):
        with pytest.raises(IncompleteSubmissionError):
            submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers()[:1], now=T0)

        row = enrolled.enrollments.rows[(COURSE_ID, USER_ID)]
        assert row.date_last_attempt is None

    def test_missing_assignment(self, enrolled):
        enrolled.assignments.keys.clear()
        with pytest.raises(AssignmentNotFoundError):
            submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers(), now=T0)

    def test_assignment_without_questions(self, enrolled):
        enrolled.assignments.keys[COURSE_ID] = AssignmentKey(1, COURSE_ID, ())
        with pytest.raises(EmptyAssignmentError):
            submit_assignment_answers(enrolled, COURSE_ID, USER_ID, [], now=T0)

    def test_cooldown_checked_before_assignment(self, enrolled):
        submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers("1", "Rome"), now=T0)
        enrolled.assignments.keys.clear()

        with pytest.raises(RetryCooldownError):
            submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers(), now=T0 + timedelta(seconds=1))


class TestEnrollmentState:
    def test_state_before_any_attempt(self, enrolled):
        state = get_enrollment_state(enrolled, COURSE_ID, USER_ID)
        assert state.enrollment_date == T0
        assert state.last_attempt_date is None
        assert state.next_possible_attempt is None

    def test_state_after_failed_attempt(self, enrolled):
        submit_assignment_answers(enrolled, COURSE_ID, USER_ID, _answers("1", "Rome"), now=T0)

        state = get_enrollment_state(enrolled, COURSE_ID, USER_ID)
        assert state.is_passed is False
        assert state.next_possible_attempt == T0 + timedelta(minutes=1)

    def test_state_missing(self, uow):
        with pytest.raises(EnrollmentNotFoundError):
            get_enrollment_state(uow, COURSE_ID, USER_ID)
