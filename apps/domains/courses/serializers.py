# domains/courses/serializers.py

from rest_framework import serializers

from .models import Course


# ========================================================
# Course
# ========================================================

class CourseSerializer(serializers.ModelSerializer):
    class Meta:
        model = Course
        fields = "__all__"
        read_only_fields = ["number_of_students", "created_at", "updated_at"]
        ref_name = "Course"


class CourseShortSerializer(serializers.ModelSerializer):
    class Meta:
        model = Course
        fields = ["id", "title", "is_active"]
        ref_name = "CourseShort"
