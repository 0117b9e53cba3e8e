from django.apps import AppConfig


class EnrollmentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"

    name = "apps.domains.enrollment"
    label = "enrollment"
