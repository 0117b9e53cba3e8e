from rest_framework import serializers

from .models import Enrollment
from apps.core.serializers import UserShortSerializer
from apps.domains.courses.serializers import CourseShortSerializer


class EnrollmentSerializer(serializers.ModelSerializer):
    user = UserShortSerializer(read_only=True)
    course = CourseShortSerializer(read_only=True)

    class Meta:
        model = Enrollment
        fields = [
            "id",
            "user",
            "course",
            "enrollment_date",
            "completed",
            "test_passed",
            "date_last_attempt",
        ]


class SubmittedAnswerSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    answer = serializers.CharField(allow_blank=True, trim_whitespace=False)
