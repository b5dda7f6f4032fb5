"""Views for authentication flows (register, login, profile)."""

from __future__ import annotations

import structlog
from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny, IsAuthenticated  # type: ignore
from rest_framework.views import APIView  # type: ignore
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from apps.audit.models import AuditLog
from apps.audit.services import record
from shared.api.responses import success_response

from .auth_serializers import LoginSerializer, RegisterSerializer
from .serializers import UserSerializer

logger = structlog.get_logger(__name__)


def tokens_for_user(user) -> dict[str, str]:
    """Issue a refresh/access pair carrying the identity claims clients display."""
    refresh = RefreshToken.for_user(user)
    refresh["role"] = user.role
    refresh["name"] = user.name
    refresh["email"] = user.email
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        record(
            AuditLog.Action.USER_REGISTRATION,
            user,
            details={"email": user.email, "role": user.role},
            request=request,
        )
        logger.info("user.registered", user_id=user.id, role=user.role)
        return success_response(
            UserSerializer(user).data,
            message="User registered successfully",
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        tokens = tokens_for_user(user)
        record(AuditLog.Action.USER_LOGIN, user, details={"email": user.email}, request=request)
        data = {
            "token": tokens["access"],
            "refresh": tokens["refresh"],
            "user": UserSerializer(user).data,
        }
        return success_response(data, message="Login successful")


class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):  # type: ignore
        return success_response(UserSerializer(request.user).data)
