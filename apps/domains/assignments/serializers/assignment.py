from rest_framework import serializers

from apps.domains.assignments.models import Assignment, Question


# --------------------------------------------------
# Read (정답 노출 여부로 분리)
# --------------------------------------------------

class QuestionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Question
        fields = ["id", "question_text"]
        ref_name = "AssignmentQuestion"


class QuestionWithAnswerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Question
        fields = ["id", "question_text", "answer"]
        ref_name = "AssignmentQuestionWithAnswer"


class AssignmentSerializer(serializers.ModelSerializer):
    questions = QuestionSerializer(many=True, read_only=True)

    class Meta:
        model = Assignment
        fields = ["id", "course", "questions"]


class AssignmentWithAnswersSerializer(serializers.ModelSerializer):
    questions = QuestionWithAnswerSerializer(many=True, read_only=True)

    class Meta:
        model = Assignment
        fields = ["id", "course", "questions"]


# --------------------------------------------------
# Write
# --------------------------------------------------

class QuestionWriteSerializer(serializers.Serializer):
    question_text = serializers.CharField(max_length=255)
    answer = serializers.CharField(max_length=255)


class AssignmentCreateSerializer(serializers.Serializer):
    questions = QuestionWriteSerializer(many=True, allow_empty=False)


class AssignmentUpdateSerializer(serializers.Serializer):
    """questions 가 오면 기존 문항 전체 교체."""
    questions = QuestionWriteSerializer(many=True, allow_empty=False, required=False)
