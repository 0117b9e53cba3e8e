"""
Course / Assignment / Question DB 조회·저장: ORM 접근은 함수 내부에서만 lazy import.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from academy.domain.enrollment.entities import AssignmentKey, KeyQuestion
from academy.domain.enrollment.errors import CourseNotFoundError

# ---------------------------------------------------------------------------
# Course
# ---------------------------------------------------------------------------


def course_queryset():
    from apps.domains.courses.models import Course
    return Course.objects.all()


def course_get(course_id) -> Optional[Any]:
    from apps.domains.courses.models import Course
    return Course.objects.filter(id=course_id).first()


def course_adjust_enrollment_count(course_id, delta: int) -> int:
    from django.db.models import F
    from apps.domains.courses.models import Course
    return Course.objects.filter(id=course_id).update(
        number_of_students=F("number_of_students") + int(delta)
    )


def course_adjust_enrollment_count_bulk(course_ids: Iterable[int], delta: int) -> int:
    from django.db.models import F
    from apps.domains.courses.models import Course
    return Course.objects.filter(id__in=list(course_ids)).update(
        number_of_students=F("number_of_students") + int(delta)
    )


class DjangoCourseRepository:
    """CourseRepository 구현."""

    def exists(self, course_id: int) -> bool:
        from apps.domains.courses.models import Course
        return Course.objects.filter(id=course_id).exists()

    def adjust_enrollment_count(self, course_id: int, delta: int) -> None:
        if course_adjust_enrollment_count(course_id, delta) == 0:
            raise CourseNotFoundError()


# ---------------------------------------------------------------------------
# Assignment / Question
# ---------------------------------------------------------------------------


def assignment_get_by_course(course_id) -> Optional[Any]:
    from apps.domains.assignments.models import Assignment
    return (
        Assignment.objects.filter(course_id=course_id)
        .select_related("course")
        .prefetch_related("questions")
        .first()
    )


def assignment_exists_for_course(course_id) -> bool:
    from apps.domains.assignments.models import Assignment
    return Assignment.objects.filter(course_id=course_id).exists()


def assignment_create(course):
    from apps.domains.assignments.models import Assignment
    return Assignment.objects.create(course=course)


def question_replace_all(assignment, questions: Iterable[dict]) -> list:
    """기존 문항 삭제 후 입력 순서대로 재생성."""
    from apps.domains.assignments.models import Question
    Question.objects.filter(assignment=assignment).delete()
    return Question.objects.bulk_create(
        [
            Question(
                assignment=assignment,
                order=index,
                question_text=item["question_text"],
                answer=item["answer"],
            )
            for index, item in enumerate(questions)
        ]
    )


class DjangoAssignmentRepository:
    """AssignmentRepository 구현."""

    def get_key_by_course(self, course_id: int) -> Optional[AssignmentKey]:
        assignment = assignment_get_by_course(course_id)
        if assignment is None:
            return None
        return AssignmentKey(
            assignment_id=assignment.id,
            course_id=assignment.course_id,
            questions=tuple(
                KeyQuestion(question_id=q.id, answer=q.answer)
                for q in assignment.questions.all()
            ),
        )
