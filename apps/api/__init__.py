# Django 기동 시 Celery app 로드 → shared_task 가 이 app 설정(eager 등)을 사용
from .celery import app as celery_app

__all__ = ("celery_app",)
