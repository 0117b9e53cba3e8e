# apps/shared/tasks/__init__.py

from .email import send_password_reset_email_task

__all__ = [
    "send_password_reset_email_task",
]
