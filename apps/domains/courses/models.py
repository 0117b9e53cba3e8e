from django.db import models

from apps.api.common.models import TimestampModel


# ========================================================
# Course
# ========================================================

class Course(TimestampModel):
    title = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)

    is_active = models.BooleanField(default=True)

    # 비정규화 카운터: 수강 등록/해지 시 F() 로만 갱신
    number_of_students = models.IntegerField(default=0)

    class Meta:
        ordering = ["-id"]

    def __str__(self):
        return self.title
