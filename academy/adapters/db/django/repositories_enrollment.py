"""
Enrollment DB 조회·저장: .objects. 접근을 adapters 내부로 한정.
ORM import 는 메서드/함수 내부에서만 (lazy).
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from academy.domain.enrollment.entities import EnrollmentRecord
from academy.domain.enrollment.errors import AlreadyEnrolledError


def _model_to_entity(m) -> Optional[EnrollmentRecord]:
    if m is None:
        return None
    return EnrollmentRecord(
        enrollment_id=m.id,
        user_id=m.user_id,
        course_id=m.course_id,
        enrollment_date=m.enrollment_date,
        completed=bool(m.completed),
        test_passed=bool(m.test_passed),
        date_last_attempt=m.date_last_attempt,
    )


class DjangoEnrollmentRepository:
    """EnrollmentRepository 구현."""

    def get(self, course_id: int, user_id: int) -> Optional[EnrollmentRecord]:
        from apps.domains.enrollment.models import Enrollment
        m = Enrollment.objects.filter(course_id=course_id, user_id=user_id).first()
        return _model_to_entity(m)

    def get_for_update(self, course_id: int, user_id: int) -> Optional[EnrollmentRecord]:
        """호출자가 이미 UoW 트랜잭션 내에 있어야 함 (select_for_update 락 유지)."""
        from apps.domains.enrollment.models import Enrollment
        m = (
            Enrollment.objects.select_for_update()
            .filter(course_id=course_id, user_id=user_id)
            .first()
        )
        return _model_to_entity(m)

    def add(self, course_id: int, user_id: int, now: datetime) -> EnrollmentRecord:
        from django.db import IntegrityError, transaction
        from apps.domains.enrollment.models import Enrollment
        try:
            # savepoint: 동시 insert 가 unique 제약에 걸려도 바깥 트랜잭션은 살아 있게
            with transaction.atomic():
                m = Enrollment.objects.create(
                    course_id=course_id,
                    user_id=user_id,
                    enrollment_date=now,
                    completed=False,
                    test_passed=False,
                )
        except IntegrityError as e:
            raise AlreadyEnrolledError() from e
        return _model_to_entity(m)

    def remove(self, enrollment: EnrollmentRecord) -> None:
        from apps.domains.enrollment.models import Enrollment
        Enrollment.objects.filter(id=enrollment.enrollment_id).delete()

    def save_attempt(self, enrollment: EnrollmentRecord) -> None:
        from apps.domains.enrollment.models import Enrollment
        Enrollment.objects.filter(id=enrollment.enrollment_id).update(
            date_last_attempt=enrollment.date_last_attempt,
            test_passed=enrollment.test_passed,
            completed=enrollment.completed,
        )


# ---------------------------------------------------------------------------
# 조회용 QuerySet (뷰에서 직렬화)
# ---------------------------------------------------------------------------


def enrollment_queryset():
    from apps.domains.enrollment.models import Enrollment
    return Enrollment.objects.all().select_related("user", "course")


def enrollment_filter_by_user(user_id):
    return enrollment_queryset().filter(user_id=user_id)


def enrollment_filter_by_course(course_id):
    return enrollment_queryset().filter(course_id=course_id)


def enrollment_course_ids_by_user(user_id):
    from apps.domains.enrollment.models import Enrollment
    return list(Enrollment.objects.filter(user_id=user_id).values_list("course_id", flat=True))
