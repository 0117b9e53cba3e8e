# apps/core/views.py

import logging

from django.utils import timezone

from rest_framework import mixins, status, viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from drf_yasg.utils import swagger_auto_schema

from academy.adapters.db.django import repositories_core as core_repo
from academy.domain.shared.errors import BadRequestError
from apps.api.common.auth_jwt import issue_tokens
from apps.core.permissions import HasAdminSecret, IsAdminOrStaff, IsSelfOrAdmin
from apps.core.serializers import (
    AdminCreateSerializer,
    PasswordResetRequestSerializer,
    PasswordResetSerializer,
    RefreshTokenSerializer,
    SignUpSerializer,
    UserSerializer,
    UserShortSerializer,
    UserUpdateSerializer,
)
from apps.core.services import password_reset
from apps.core.services.users import delete_user

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Auth: /core/me/
# --------------------------------------------------

class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserSerializer(request.user)
        return Response(serializer.data)


# --------------------------------------------------
# Auth: sign-up / sign-out
# --------------------------------------------------

class SignUpView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=SignUpSerializer)
    def post(self, request):
        serializer = SignUpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        logger.info("[auth] sign-up user_id=%s", user.id)
        return Response(issue_tokens(user), status=status.HTTP_201_CREATED)


class SignOutView(APIView):
    """refresh token 을 blacklist 에 등록"""

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(request_body=RefreshTokenSerializer)
    def post(self, request):
        serializer = RefreshTokenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            RefreshToken(serializer.validated_data["refresh"]).blacklist()
        except TokenError as e:
            raise BadRequestError(str(e), code="invalid_refresh_token") from e

        logger.info("[auth] sign-out user_id=%s", request.user.id)
        return Response({"message": "Signed out successfully"})


class LoggedInUsersView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        qs = core_repo.logged_in_user_queryset(timezone.now())
        return Response(UserShortSerializer(qs, many=True).data)


class LoggedInUsersCountView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        count = core_repo.logged_in_user_queryset(timezone.now()).count()
        return Response({"count": count})


# --------------------------------------------------
# Auth: password reset
# --------------------------------------------------

class PasswordResetRequestView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=PasswordResetRequestSerializer)
    def post(self, request):
        serializer = PasswordResetRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = password_reset.request_password_reset(serializer.validated_data["email"])
        return Response({"message": message})


class PasswordResetView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=PasswordResetSerializer)
    def post(self, request):
        serializer = PasswordResetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = password_reset.reset_password(
            serializer.validated_data["token"],
            serializer.validated_data["new_password"],
        )
        return Response({"message": message})


# --------------------------------------------------
# Users
# --------------------------------------------------

class UserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    목록: 관리자
    조회/수정/삭제: 본인 또는 관리자
    """

    http_method_names = ["get", "patch", "delete", "head", "options"]

    def get_queryset(self):
        return core_repo.user_queryset()

    def get_serializer_class(self):
        if self.action in ("update", "partial_update"):
            return UserUpdateSerializer
        return UserSerializer

    def get_permissions(self):
        if self.action == "list":
            return [IsAuthenticated(), IsAdminOrStaff()]
        return [IsSelfOrAdmin()]

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        super().update(request, *args, **kwargs)
        return Response(UserSerializer(self.get_object()).data)

    def perform_destroy(self, instance):
        delete_user(instance)


# --------------------------------------------------
# Admin accounts (X-Admin-Secret)
# --------------------------------------------------

class AdminAccountViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    관리자 계정 관리: JWT 대신 공유 시크릿으로 보호 (없거나 틀리면 403)
    """

    authentication_classes = []
    permission_classes = [HasAdminSecret]

    def get_queryset(self):
        return core_repo.admin_queryset()

    def get_serializer_class(self):
        if self.action == "create":
            return AdminCreateSerializer
        return UserSerializer

    def create(self, request, *args, **kwargs):
        serializer = AdminCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        admin = serializer.save()

        logger.info("[admin_account] created user_id=%s", admin.id)
        return Response(UserSerializer(admin).data, status=status.HTTP_201_CREATED)

    def perform_destroy(self, instance):
        logger.info("[admin_account] deleting user_id=%s", instance.id)
        delete_user(instance)
