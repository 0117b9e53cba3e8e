# apps/domains/courses/filters.py

import django_filters

from .models import Course


class CourseFilter(django_filters.FilterSet):
    """
    Course list filtering.
    /courses/?is_active=true&title=...
    """

    title = django_filters.CharFilter(field_name="title", lookup_expr="icontains")

    class Meta:
        model = Course
        fields = ["is_active", "title"]
