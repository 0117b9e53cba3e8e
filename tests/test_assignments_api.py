from __future__ import annotations

import pytest

from apps.domains.assignments.models import Assignment, Question

pytestmark = pytest.mark.django_db


def url(course_id):
    return f"/api/v1/assignments/course/{course_id}/"


QUESTIONS = [
    {"question_text": "2+2", "answer": "4"},
    {"question_text": "Capital of France", "answer": "Paris"},
]


class TestCreate:
    def test_admin_creates_assignment(self, admin_client, course):
        res = admin_client.post(url(course.id), {"questions": QUESTIONS}, format="json")

        assert res.status_code == 201
        assert res.data["course"] == course.id
        assert [q["question_text"] for q in res.data["questions"]] == ["2+2", "Capital of France"]
        assert [q["answer"] for q in res.data["questions"]] == ["4", "Paris"]

    def test_empty_questions_rejected(self, admin_client, course):
        res = admin_client.post(url(course.id), {"questions": []}, format="json")
        assert res.status_code == 400
        assert not Assignment.objects.exists()

    def test_question_without_answer_rejected(self, admin_client, course):
        res = admin_client.post(url(course.id), {"questions": [{"question_text": "?"}]}, format="json")
        assert res.status_code == 400

    def test_long_answer_accepted(self, admin_client, course):
        answer = "x" * 100
        res = admin_client.post(
            url(course.id), {"questions": [{"question_text": "Long", "answer": answer}]}, format="json"
        )

        assert res.status_code == 201
        assert Question.objects.get(assignment__course=course).answer == answer

    def test_unknown_course(self, admin_client):
        res = admin_client.post(url(9999), {"questions": QUESTIONS}, format="json")
        assert res.status_code == 404

    def test_second_assignment_forbidden(self, admin_client, assignment, course):
        res = admin_client.post(url(course.id), {"questions": QUESTIONS}, format="json")
        assert res.status_code == 403
        assert res.data["detail"] == f"Course {course.id} already has an assignment. Use update instead."

    def test_non_admin_forbidden(self, user_client, course):
        res = user_client.post(url(course.id), {"questions": QUESTIONS}, format="json")
        assert res.status_code == 403


class TestRetrieve:
    def test_answers_hidden_for_users(self, user_client, assignment, course):
        res = user_client.get(url(course.id))

        assert res.status_code == 200
        assert len(res.data["questions"]) == 2
        assert all("answer" not in q for q in res.data["questions"])

    def test_admin_secret_reveals_answers(self, user_client, assignment, course, settings):
        res = user_client.get(url(course.id), {"admin_secret": settings.ADMIN_SECRET})
        assert res.status_code == 200
        assert [q["answer"] for q in res.data["questions"]] == ["4", "Paris"]

    def test_wrong_admin_secret_unauthorized(self, user_client, assignment, course):
        res = user_client.get(url(course.id), {"admin_secret": "nope"})
        assert res.status_code == 401

    def test_staff_sees_answers(self, admin_client, assignment, course):
        res = admin_client.get(url(course.id))
        assert res.data["questions"][0]["answer"] == "4"

    def test_missing(self, user_client, course):
        res = user_client.get(url(course.id))
        assert res.status_code == 404


class TestUpdateDelete:
    def test_update_replaces_questions(self, admin_client, assignment, course):
        res = admin_client.patch(
            url(course.id),
            {"questions": [{"question_text": "1+1", "answer": "2"}]},
            format="json",
        )

        assert res.status_code == 200
        assert [q["question_text"] for q in res.data["questions"]] == ["1+1"]
        assert Question.objects.filter(assignment=assignment).count() == 1

    def test_update_without_questions_keeps_existing(self, admin_client, assignment, course):
        res = admin_client.patch(url(course.id), {}, format="json")
        assert res.status_code == 200
        assert len(res.data["questions"]) == 2

    def test_update_missing(self, admin_client, course):
        res = admin_client.patch(url(course.id), {"questions": QUESTIONS}, format="json")
        assert res.status_code == 404

    def test_delete(self, admin_client, assignment, course):
        res = admin_client.delete(url(course.id))

        assert res.status_code == 200
        assert not Assignment.objects.exists()
        assert not Question.objects.exists()

    def test_delete_missing(self, admin_client, course):
        assert admin_client.delete(url(course.id)).status_code == 404
