from rest_framework.permissions import BasePermission


class IsEnrollmentOwnerOrAdmin(BasePermission):
    """
    경로의 user_id 가 본인이거나 관리자일 때만 접근 허용
    """
    message = "You do not have access to this enrollment."

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        if user.is_staff or user.is_superuser:
            return True

        user_id = view.kwargs.get("user_id")
        if user_id is None:
            return False

        return str(user.id) == str(user_id)
