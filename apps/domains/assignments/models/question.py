from django.db import models

from apps.api.common.models import TimestampModel
from .assignment import Assignment


class Question(TimestampModel):
    """
    과제 문항 + 정답 (정답은 원문 그대로 저장, 비교 시 정규화)
    """

    assignment = models.ForeignKey(
        Assignment,
        on_delete=models.CASCADE,
        related_name="questions",
    )

    order = models.PositiveIntegerField(default=0)
    question_text = models.CharField(max_length=255)
    answer = models.CharField(max_length=255)

    class Meta:
        db_table = "assignments_question"
        ordering = ["order", "id"]

    def __str__(self):
        return f"{self.assignment} Q{self.order + 1}"
