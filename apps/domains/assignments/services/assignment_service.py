# PATH: apps/domains/assignments/services/assignment_service.py
from __future__ import annotations

import logging
from typing import Optional

from django.db import transaction

from academy.adapters.db.django import repositories_courses as course_repo
from academy.domain.enrollment.errors import AssignmentNotFoundError, CourseNotFoundError
from academy.domain.shared.errors import BadRequestError, ForbiddenError
from apps.domains.assignments.models import Assignment

logger = logging.getLogger(__name__)


def get_assignment_for_course(course_id: int) -> Assignment:
    assignment = course_repo.assignment_get_by_course(course_id)
    if assignment is None:
        raise AssignmentNotFoundError(f"Assignment for course {course_id} not found")
    return assignment


@transaction.atomic
def create_assignment(course_id: int, questions: list[dict]) -> Assignment:
    """
    코스당 과제 1개.
    - 문항 0개 → 400
    - 코스 없음 → 404
    - 이미 과제 있음 → 403 (update 사용)
    """
    if not questions:
        raise BadRequestError("At least one question is required")

    course = course_repo.course_get(course_id)
    if course is None:
        raise CourseNotFoundError(f"Course with id {course_id} not found")

    if course_repo.assignment_exists_for_course(course_id):
        raise ForbiddenError(
            f"Course {course_id} already has an assignment. Use update instead.",
            code="assignment_exists",
        )

    assignment = course_repo.assignment_create(course)
    course_repo.question_replace_all(assignment, questions)

    logger.info(
        "[assignment] created course_id=%s assignment_id=%s questions=%s",
        course_id,
        assignment.id,
        len(questions),
    )
    return get_assignment_for_course(course_id)


@transaction.atomic
def update_assignment(course_id: int, questions: Optional[list[dict]] = None) -> Assignment:
    assignment = get_assignment_for_course(course_id)

    if questions is not None:
        course_repo.question_replace_all(assignment, questions)
        logger.info(
            "[assignment] questions replaced course_id=%s assignment_id=%s questions=%s",
            course_id,
            assignment.id,
            len(questions),
        )

    return get_assignment_for_course(course_id)


@transaction.atomic
def remove_assignment(course_id: int) -> None:
    assignment = get_assignment_for_course(course_id)
    assignment.delete()
    logger.info("[assignment] removed course_id=%s", course_id)
