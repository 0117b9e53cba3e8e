# apps/api/celery.py

import os

from celery import Celery

# worker 단독 실행 시 기본값; API 프로세스는 manage.py / wsgi 에서 이미 지정
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "apps.api.config.settings.dev")

app = Celery("courses")

app.config_from_object(
    "django.conf:settings",
    namespace="CELERY",
)

# Django INSTALLED_APPS 기준으로 자동 탐색 (apps.shared.tasks)
app.autodiscover_tasks()
