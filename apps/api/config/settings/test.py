# PATH: apps/api/config/settings/test.py
# pytest-django 전용: 외부 의존(PostgreSQL / Redis / SMTP) 없이 실행
from .base import *

DEBUG = False
ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

ADMIN_SECRET = "test-admin-secret"
FRONTEND_URL = "http://frontend.test"
ASSIGNMENT_RETRY_DELAY_MS = 60000

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
EMAIL_HOST_USER = "noreply@example.com"
DEFAULT_FROM_EMAIL = "noreply@example.com"

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"

LOGGING["root"]["level"] = "WARNING"
