from __future__ import annotations

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.domains.assignments.models import Assignment, Question
from apps.domains.courses.models import Course

PASSWORD = "Passw0rdX"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(email="student@example.com", password=PASSWORD, is_staff=False, name=None):
        return get_user_model().objects.create_user(
            username=email,
            email=email,
            password=password,
            name=name,
            is_staff=is_staff,
        )
    return _make


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def other_user(make_user):
    return make_user(email="other@example.com")


@pytest.fixture
def admin_user(make_user):
    return make_user(email="admin@example.com", is_staff=True)


@pytest.fixture
def user_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def course(db):
    return Course.objects.create(title="Intro", description="basics")


@pytest.fixture
def assignment(course):
    """2문항: "2+2" → "4", "Capital of France" → "Paris" """
    a = Assignment.objects.create(course=course)
    Question.objects.create(assignment=a, order=0, question_text="2+2", answer="4")
    Question.objects.create(assignment=a, order=1, question_text="Capital of France", answer="Paris")
    return a


@pytest.fixture
def questions(assignment):
    return list(assignment.questions.order_by("order"))
