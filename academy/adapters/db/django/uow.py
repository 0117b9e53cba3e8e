"""
Django Unit of Work: transaction.atomic 래퍼 (lazy import)
"""
from __future__ import annotations


class DjangoUnitOfWork:
    """Django transaction.atomic으로 트랜잭션 경계. 메서드 내부에서 Django import."""

    def __init__(self) -> None:
        self._atomic = None
        self._enrollments = None
        self._assignments = None
        self._courses = None
        self._users = None

    @property
    def enrollments(self):
        from academy.adapters.db.django.repositories_enrollment import DjangoEnrollmentRepository
        if self._enrollments is None:
            self._enrollments = DjangoEnrollmentRepository()
        return self._enrollments

    @property
    def assignments(self):
        from academy.adapters.db.django.repositories_courses import DjangoAssignmentRepository
        if self._assignments is None:
            self._assignments = DjangoAssignmentRepository()
        return self._assignments

    @property
    def courses(self):
        from academy.adapters.db.django.repositories_courses import DjangoCourseRepository
        if self._courses is None:
            self._courses = DjangoCourseRepository()
        return self._courses

    @property
    def users(self):
        from academy.adapters.db.django.repositories_core import DjangoUserRepository
        if self._users is None:
            self._users = DjangoUserRepository()
        return self._users

    def __enter__(self) -> DjangoUnitOfWork:
        from django.db import transaction
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._atomic is not None:
            self._atomic.__exit__(exc_type, exc_val, exc_tb)
            self._atomic = None

    def commit(self) -> None:
        # atomic() 블록 내에서는 명시적 commit 없음; __exit__ 시 자동
        pass

    def rollback(self) -> None:
        from django.db import transaction
        transaction.set_rollback(True)
