"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import authenticate, get_user_model  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import exceptions, serializers  # type: ignore

from shared.exceptions import Conflict

from .permissions import Role, is_admin

User = get_user_model()


class EmailAlreadyRegistered(Conflict):
    default_message = "Email already registered"


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    confirmPassword = serializers.CharField(write_only=True)
    role = serializers.ChoiceField(choices=Role.choices, required=False)

    def validate_role(self, value: str) -> str:
        request = self.context.get("request")
        if value == Role.ADMIN and not is_admin(getattr(request, "user", None)):
            raise serializers.ValidationError("Only administrators can register administrators.")
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if attrs.get("password") != attrs.get("confirmPassword"):
            raise serializers.ValidationError({"confirmPassword": "Passwords do not match"})
        if User.objects.filter(email__iexact=attrs["email"]).exists():
            raise EmailAlreadyRegistered()
        return attrs

    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        validated_data.pop("confirmPassword", None)
        validated_data.setdefault("role", Role.STUDENT)
        try:
            with transaction.atomic():
                return User.objects.create_user(password=password, **validated_data)
        except IntegrityError as exc:
            raise EmailAlreadyRegistered() from exc


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = authenticate(
            request=self.context.get("request"),
            email=attrs["email"],
            password=attrs["password"],
        )
        if user is None:
            raise exceptions.AuthenticationFailed("Invalid email or password")
        attrs["user"] = user
        return attrs
