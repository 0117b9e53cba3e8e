from django.contrib.auth.models import AbstractUser, Group, Permission
from django.db import models


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - 관리자 = is_staff 계정
    - auth.User 와의 groups / permissions reverse accessor 충돌 방지
    """

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=50, blank=True, null=True)

    # 비정규화 카운터: 수강 등록/해지 시 F() 로만 갱신
    number_of_enrolled_courses = models.IntegerField(default=0)

    # 비밀번호 재설정 토큰 (1시간 유효)
    reset_token = models.CharField(max_length=64, blank=True, null=True, db_index=True)
    reset_token_expires = models.DateTimeField(blank=True, null=True)

    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.email or self.username
