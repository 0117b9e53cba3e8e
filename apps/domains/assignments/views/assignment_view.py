# PATH: apps/domains/assignments/views/assignment_view.py
from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.domain.shared.errors import UnauthorizedError
from apps.core.permissions import IsAdminOrStaff, admin_secret_matches
from apps.domains.assignments.serializers.assignment import (
    AssignmentCreateSerializer,
    AssignmentSerializer,
    AssignmentUpdateSerializer,
    AssignmentWithAnswersSerializer,
)
from apps.domains.assignments.services import assignment_service


class AssignmentByCourseView(APIView):
    """
    /api/v1/assignments/course/{course_id}/

    GET    : 문항 조회 (정답 숨김)
             ?admin_secret=... 이 맞으면 정답 포함, 틀리면 401
    POST   : 과제 생성 (관리자)
    PATCH  : 문항 전체 교체 (관리자)
    DELETE : 과제 삭제 (관리자)
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsAdminOrStaff()]

    def get(self, request, course_id: int):
        assignment = assignment_service.get_assignment_for_course(course_id)

        admin_secret = request.query_params.get("admin_secret")
        if admin_secret:
            if not admin_secret_matches(admin_secret):
                raise UnauthorizedError("Invalid admin secret", code="invalid_admin_secret")
            return Response(AssignmentWithAnswersSerializer(assignment).data)

        if request.user.is_staff:
            return Response(AssignmentWithAnswersSerializer(assignment).data)

        return Response(AssignmentSerializer(assignment).data)

    def post(self, request, course_id: int):
        serializer = AssignmentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        assignment = assignment_service.create_assignment(
            course_id,
            serializer.validated_data["questions"],
        )
        return Response(
            AssignmentWithAnswersSerializer(assignment).data,
            status=status.HTTP_201_CREATED,
        )

    def patch(self, request, course_id: int):
        serializer = AssignmentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        assignment = assignment_service.update_assignment(
            course_id,
            serializer.validated_data.get("questions"),
        )
        return Response(AssignmentWithAnswersSerializer(assignment).data)

    def delete(self, request, course_id: int):
        assignment_service.remove_assignment(course_id)
        return Response({"message": "Assignment deleted successfully."})
