from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from academy.domain.enrollment import (
    RETRY_DELAY_MS,
    EnrollmentRecord,
    KeyQuestion,
    SubmittedAnswer,
    calculate_next_attempt,
    grade_answers,
    normalize_answer,
)
from academy.domain.enrollment.errors import (
    EmptyAssignmentError,
    IncompleteSubmissionError,
    InvalidQuestionError,
    RetryCooldownError,
)
from academy.domain.enrollment.grading import is_passing, minimum_required

NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestNormalizeAnswer:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  Hello   World ", "hello world"),
            ("PARIS", "paris"),
            ("a\t\nb", "a b"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_answer(raw) == expected

    @pytest.mark.parametrize("submitted", ["  Paris  ", "paris", "PARIS", "Paris"])
    def test_case_and_outer_whitespace_match_key(self, submitted):
        assert normalize_answer(submitted) == normalize_answer("Paris")

    @pytest.mark.parametrize("submitted", ["Par is", "P aris", "Paris!"])
    def test_internal_space_does_not_match_key(self, submitted):
        assert normalize_answer(submitted) != normalize_answer("Paris")


class TestThreshold:
    def test_minimum_required_is_floor_of_half(self):
        assert minimum_required(1) == 0
        assert minimum_required(2) == 1
        assert minimum_required(3) == 1
        assert minimum_required(5) == 2

    def test_single_question_passes_with_zero_correct(self):
        assert is_passing(0, 1) is True

    def test_two_questions_need_one(self):
        assert is_passing(0, 2) is False
        assert is_passing(1, 2) is True


class TestGradeAnswers:
    key = (KeyQuestion(1, "4"), KeyQuestion(2, "Paris"))

    def test_all_correct_after_normalization(self):
        result = grade_answers(
            self.key,
            [SubmittedAnswer(1, " 4 "), SubmittedAnswer(2, "pARIS")],
        )
        assert result.passed is True
        assert result.correct_answers == 2
        assert result.total_questions == 2
        assert result.minimum_required == 1

    def test_all_wrong_fails(self):
        result = grade_answers(
            self.key,
            [SubmittedAnswer(1, "5"), SubmittedAnswer(2, "Lyon")],
        )
        assert result.passed is False
        assert result.correct_answers == 0

    def test_length_mismatch_rejected(self):
        with pytest.raises(IncompleteSubmissionError) as exc:
            grade_answers(self.key, [SubmittedAnswer(1, "4")])
        assert exc.value.message == "Must answer all questions"
        assert exc.value.http_status == 400

    def test_unknown_question_id_rejects_whole_submission(self):
        with pytest.raises(InvalidQuestionError) as exc:
            grade_answers(self.key, [SubmittedAnswer(1, "4"), SubmittedAnswer(99, "x")])
        assert exc.value.message == "Invalid question ID: 99"

    def test_empty_key_rejected(self):
        with pytest.raises(EmptyAssignmentError):
            grade_answers((), [])

    def test_single_question_passes_even_when_wrong(self):
        result = grade_answers((KeyQuestion(1, "Paris"),), [SubmittedAnswer(1, "Par is")])

        assert result.correct_answers == 0
        assert result.total_questions == 1
        assert result.minimum_required == 0
        assert result.passed is True

    def test_duplicate_question_ids_counted_as_submitted(self):
        result = grade_answers(
            self.key,
            [SubmittedAnswer(1, "4"), SubmittedAnswer(1, "4")],
        )
        assert result.correct_answers == 2
        assert result.passed is True


class TestCooldown:
    def _record(self, **kwargs):
        return EnrollmentRecord(
            enrollment_id=1,
            user_id=1,
            course_id=1,
            enrollment_date=NOW - timedelta(days=1),
            **kwargs,
        )

    def test_no_attempt_means_no_cooldown(self):
        record = self._record()
        assert record.next_possible_attempt() is None
        assert record.is_cooling_down(NOW) is False

    def test_boundary_is_exactly_retry_delay(self):
        record = self._record(date_last_attempt=NOW)
        unlock = NOW + timedelta(milliseconds=RETRY_DELAY_MS)
        assert calculate_next_attempt(NOW) == unlock
        assert record.is_cooling_down(unlock - timedelta(milliseconds=1)) is True
        assert record.is_cooling_down(unlock) is False

    def test_record_attempt_sets_flags(self):
        record = self._record()
        record.record_attempt(False, NOW)
        assert record.date_last_attempt == NOW
        assert record.test_passed is False
        assert record.completed is False

        record.record_attempt(True, NOW)
        assert record.test_passed is True
        assert record.completed is True

    def test_state_hides_next_attempt_when_passed(self):
        record = self._record(date_last_attempt=NOW, test_passed=True, completed=True)
        assert record.to_state().next_possible_attempt is None

    def test_state_shows_next_attempt_after_failure(self):
        record = self._record(date_last_attempt=NOW)
        state = record.to_state().to_dict()
        assert state["next_possible_attempt"] == NOW + timedelta(minutes=1)
        assert state["is_passed"] is False
        assert state["last_attempt_date"] == NOW

    def test_cooldown_error_message_includes_unlock_time(self):
        unlock = NOW + timedelta(minutes=1)
        err = RetryCooldownError(unlock)
        assert unlock.isoformat() in err.message
        assert err.http_status == 403
