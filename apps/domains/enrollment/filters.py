# apps/domains/enrollment/filters.py

import django_filters

from .models import Enrollment


class EnrollmentFilter(django_filters.FilterSet):
    """
    Enrollment list filtering.
    /enrollments/?course={courseId}&test_passed=true
    """

    class Meta:
        model = Enrollment
        fields = {
            "course": ["exact"],
            "user": ["exact"],
            "completed": ["exact"],
            "test_passed": ["exact"],
        }
