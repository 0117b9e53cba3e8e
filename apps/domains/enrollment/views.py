# PATH: apps/domains/enrollment/views.py

from rest_framework import status
from rest_framework.filters import SearchFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ReadOnlyModelViewSet
from django_filters.rest_framework import DjangoFilterBackend

from academy.adapters.db.django import repositories_enrollment as enroll_repo
from apps.core.permissions import IsAdminOrStaff
from apps.domains.courses.serializers import CourseSerializer

from . import services
from .filters import EnrollmentFilter
from .permissions import IsEnrollmentOwnerOrAdmin
from .serializers import EnrollmentSerializer, SubmittedAnswerSerializer


# ========================================================
# 등록 / 해지
# ========================================================

class CourseEnrollView(APIView):
    """POST /enrollments/course-enroll/{course_id}/user/{user_id}/"""

    permission_classes = [IsAuthenticated, IsEnrollmentOwnerOrAdmin]

    def post(self, request, course_id: int, user_id: int):
        course = services.enroll_user_in_course(course_id, user_id)
        return Response(CourseSerializer(course).data, status=status.HTTP_200_OK)


class CourseUnenrollView(APIView):
    """DELETE /enrollments/course-unenroll/{course_id}/user/{user_id}/"""

    permission_classes = [IsAuthenticated, IsEnrollmentOwnerOrAdmin]

    def delete(self, request, course_id: int, user_id: int):
        return Response(services.unenroll_user_from_course(course_id, user_id))


# ========================================================
# 상태 / 과제 제출
# ========================================================

class EnrollmentStateView(APIView):
    permission_classes = [IsAuthenticated, IsEnrollmentOwnerOrAdmin]

    def get(self, request, course_id: int, user_id: int):
        state = services.get_state(course_id, user_id)
        return Response(state.to_dict())


class SubmitAssignmentView(APIView):
    """
    body: [{"question_id": 1, "answer": "..."}, ...]
    응답: {passed, correct_answers, total_questions, minimum_required}
    """

    permission_classes = [IsAuthenticated, IsEnrollmentOwnerOrAdmin]

    def post(self, request, course_id: int, user_id: int):
        serializer = SubmittedAnswerSerializer(data=request.data, many=True)
        serializer.is_valid(raise_exception=True)

        result = services.submit_answers(course_id, user_id, serializer.validated_data)
        return Response(result.to_dict(), status=status.HTTP_200_OK)


# ========================================================
# 목록
# ========================================================

class UserEnrollmentListView(APIView):
    permission_classes = [IsAuthenticated, IsEnrollmentOwnerOrAdmin]

    def get(self, request, user_id: int):
        qs = services.list_user_enrollments(user_id)
        return Response(EnrollmentSerializer(qs, many=True).data)


class CourseEnrollmentListView(APIView):
    permission_classes = [IsAuthenticated, IsAdminOrStaff]

    def get(self, request, course_id: int):
        qs = services.list_course_enrollments(course_id)
        return Response(EnrollmentSerializer(qs, many=True).data)


class EnrollmentViewSet(ReadOnlyModelViewSet):
    """관리자 전용 전체 목록 (course / user / completed / test_passed 필터)"""

    serializer_class = EnrollmentSerializer
    permission_classes = [IsAuthenticated, IsAdminOrStaff]

    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = EnrollmentFilter
    search_fields = ["user__email", "user__name", "course__title"]

    def get_queryset(self):
        return enroll_repo.enrollment_queryset()
