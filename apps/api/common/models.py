# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    created_at / updated_at 자동 기록 추상 모델 (Course, Assignment, Question)
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
