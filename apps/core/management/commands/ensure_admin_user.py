# PATH: apps/core/management/commands/ensure_admin_user.py
"""
로컬 개발용 관리자(is_staff) 계정 생성 / 비밀번호 재설정.

- email 로 조회, 없으면 생성
- 있으면 비밀번호 + is_staff/is_active 만 맞춤

사용:
  python manage.py ensure_admin_user --email=admin@local.dev --password=Admin1234 --name=Admin
"""
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from academy.adapters.db.django import repositories_core as core_repo
from apps.core.serializers import validate_password_strength
from rest_framework import serializers


class Command(BaseCommand):
    help = "Ensure a staff account exists for local login (default: admin@local.dev / Admin1234)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--email",
            type=str,
            default="admin@local.dev",
            help="Admin email (default: admin@local.dev)",
        )
        parser.add_argument(
            "--password",
            type=str,
            default="Admin1234",
            help="Password: 8-32 chars, one uppercase letter and one digit (default: Admin1234)",
        )
        parser.add_argument(
            "--name",
            type=str,
            default="Admin",
            help="Display name (default: Admin)",
        )

    def handle(self, *args, **options):
        email = (options["email"] or "").strip()
        password = options["password"] or ""
        name = (options["name"] or "").strip() or None

        if not email:
            raise CommandError("--email is required")
        try:
            validate_password_strength(password)
        except serializers.ValidationError as e:
            raise CommandError(" ".join(str(d) for d in e.detail)) from e

        with transaction.atomic():
            user = core_repo.user_get_by_email(email)
            if user is None:
                user = core_repo.user_create(email=email, password=password, name=name, is_staff=True)
                self.stdout.write(self.style.SUCCESS(f"Created admin: email={email}"))
            else:
                user.set_password(password)
                user.is_staff = True
                user.is_active = True
                if name:
                    user.name = name
                user.save(update_fields=["password", "is_staff", "is_active", "name"])
                self.stdout.write(self.style.SUCCESS(f"Updated admin: email={email}, password set"))

        self.stdout.write(self.style.SUCCESS(f"Done. Sign in at /api/v1/auth/sign-in/admin/ with email={email}"))
