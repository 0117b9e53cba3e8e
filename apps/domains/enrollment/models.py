from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.domains.courses.models import Course


# ========================================================
# Enrollment (코스 단위 수강 등록 + 과제 응시 상태)
# ========================================================

class Enrollment(models.Model):
    """
    사용자가 특정 코스를 수강하는 행위.
    과제 응시 결과(test_passed / completed)와 마지막 응시 시각을 함께 보관한다.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="enrollments",
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="enrollments",
    )

    enrollment_date = models.DateTimeField(default=timezone.now)

    completed = models.BooleanField(default=False)
    test_passed = models.BooleanField(default=False)
    date_last_attempt = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "course"],
                name="unique_enrollment_per_course",
            )
        ]

    def __str__(self):
        return f"{self.user} -> {self.course.title}"
