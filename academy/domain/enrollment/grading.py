"""
과제 채점 정책: 순수 파이썬

- 정답 비교: lower + strip + 내부 공백 1칸으로 축약 후 exact match
- 합격 기준: floor(문항수 / 2) 이상 정답 (1문항이면 0개 정답도 합격)
"""
from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from academy.domain.enrollment.entities import GradingResult, KeyQuestion, SubmittedAnswer
from academy.domain.enrollment.errors import (
    EmptyAssignmentError,
    IncompleteSubmissionError,
    InvalidQuestionError,
)

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_answer(s: Optional[str]) -> str:
    return _WHITESPACE_RUN.sub(" ", (s or "").lower().strip())


def minimum_required(total_questions: int) -> int:
    return total_questions // 2


def is_passing(correct_answers: int, total_questions: int) -> bool:
    return correct_answers >= minimum_required(total_questions)


def grade_answers(
    questions: Sequence[KeyQuestion],
    answers: Iterable[SubmittedAnswer],
) -> GradingResult:
    """
    제출 답안 전체를 채점한다.

    부분 제출·잘못된 문항 ID 는 제출 전체를 거부 (부분 점수 없음).
    """
    if not questions:
        raise EmptyAssignmentError()

    answers = list(answers)
    if len(answers) != len(questions):
        raise IncompleteSubmissionError()

    by_id = {q.question_id: q for q in questions}

    correct = 0
    for submitted in answers:
        question = by_id.get(submitted.question_id)
        if question is None:
            raise InvalidQuestionError(submitted.question_id)
        if normalize_answer(submitted.answer) == normalize_answer(question.answer):
            correct += 1

    total = len(questions)
    return GradingResult(
        passed=is_passing(correct, total),
        correct_answers=correct,
        total_questions=total,
        minimum_required=minimum_required(total),
    )
