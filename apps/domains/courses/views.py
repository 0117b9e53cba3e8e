# PATH: apps/domains/courses/views.py

from rest_framework.viewsets import ModelViewSet
from rest_framework.filters import SearchFilter
from rest_framework.permissions import IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend

from academy.adapters.db.django import repositories_courses as course_repo
from apps.core.permissions import IsAdminOrStaff
from .filters import CourseFilter
from .serializers import CourseSerializer


class CourseViewSet(ModelViewSet):
    """
    조회: 로그인 사용자 전체
    생성/수정/삭제: 관리자 전용
    """

    serializer_class = CourseSerializer

    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = CourseFilter
    search_fields = ["title", "description"]

    def get_queryset(self):
        return course_repo.course_queryset()

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsAdminOrStaff()]
