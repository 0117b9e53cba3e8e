# apps/core/serializers.py

import re

from rest_framework import serializers
from django.contrib.auth import get_user_model

from academy.adapters.db.django import repositories_core as core_repo

User = get_user_model()

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 32
_PASSWORD_RE = re.compile(r"^(?=.*[A-Z])(?=.*\d).+$")


def validate_password_strength(value: str) -> str:
    """8~32자, 대문자 1개 이상, 숫자 1개 이상"""
    if len(value) < PASSWORD_MIN_LENGTH or len(value) > PASSWORD_MAX_LENGTH:
        raise serializers.ValidationError(
            f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters long"
        )
    if not _PASSWORD_RE.match(value):
        raise serializers.ValidationError(
            "Password must contain at least one uppercase letter and one number"
        )
    return value


# ------------------------------------
# User Base
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "number_of_enrolled_courses",
            "is_staff",
            "date_joined",
        ]
        read_only_fields = fields


class UserShortSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "name"]
        ref_name = "CoreUserShort"


class UserUpdateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True,
        required=False,
        trim_whitespace=False,
        validators=[validate_password_strength],
    )

    class Meta:
        model = User
        fields = ["email", "name", "password"]
        extra_kwargs = {
            "email": {"required": False, "validators": []},
            "name": {"required": False},
        }

    def validate_email(self, value):
        value = value.strip()
        qs = User.objects.filter(email__iexact=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("User with this email already exists")
        return value

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        email = validated_data.get("email")
        if email:
            instance.username = email
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance


# ------------------------------------
# Sign up / Admin create
# ------------------------------------

class SignUpSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        validators=[validate_password_strength],
    )
    name = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)

    is_staff = False

    def validate_email(self, value):
        value = value.strip()
        if core_repo.user_email_exists(value):
            raise serializers.ValidationError("User with this email already exists")
        return value

    def create(self, validated_data):
        return core_repo.user_create(
            email=validated_data["email"],
            password=validated_data["password"],
            name=validated_data.get("name") or None,
            is_staff=self.is_staff,
        )


class AdminCreateSerializer(SignUpSerializer):
    is_staff = True


# ------------------------------------
# Password reset
# ------------------------------------

class PasswordResetRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class PasswordResetSerializer(serializers.Serializer):
    token = serializers.CharField()
    new_password = serializers.CharField(
        trim_whitespace=False,
        validators=[validate_password_strength],
    )


class RefreshTokenSerializer(serializers.Serializer):
    refresh = serializers.CharField()
