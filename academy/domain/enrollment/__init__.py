from academy.domain.enrollment.entities import (
    RETRY_DELAY_MS,
    AssignmentKey,
    EnrollmentRecord,
    EnrollmentState,
    GradingResult,
    KeyQuestion,
    SubmittedAnswer,
    calculate_next_attempt,
)
from academy.domain.enrollment.grading import grade_answers, normalize_answer

__all__ = [
    "RETRY_DELAY_MS",
    "AssignmentKey",
    "EnrollmentRecord",
    "EnrollmentState",
    "GradingResult",
    "KeyQuestion",
    "SubmittedAnswer",
    "calculate_next_attempt",
    "grade_answers",
    "normalize_answer",
]
