from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.courses.models import Course


class Assignment(TimestampModel):
    """
    코스 단위 과제 (코스당 최대 1개)
    """

    course = models.OneToOneField(
        Course,
        on_delete=models.CASCADE,
        related_name="assignment",
    )

    class Meta:
        db_table = "assignments_assignment"

    def __str__(self):
        return f"Assignment for {self.course.title}"
