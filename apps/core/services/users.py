# PATH: apps/core/services/users.py
from __future__ import annotations

import logging

from django.db import transaction

from academy.adapters.db.django import repositories_courses as course_repo
from academy.adapters.db.django import repositories_enrollment as enroll_repo

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_user(user) -> None:
    """
    사용자 삭제: 수강 중인 코스의 number_of_students 도 함께 차감.
    enrollment row 는 FK CASCADE 로 삭제.
    """
    course_ids = enroll_repo.enrollment_course_ids_by_user(user.id)
    if course_ids:
        course_repo.course_adjust_enrollment_count_bulk(course_ids, -1)

    user_id = user.id
    user.delete()
    logger.info("[user] deleted user_id=%s released_courses=%s", user_id, len(course_ids))
