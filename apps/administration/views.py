"""Administrator login, health check and SMTP smoke test."""

from __future__ import annotations

import logging

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.notifications.messages import smtp_test_message
from apps.notifications.services import send_email_notification

from .gate import get_admin_gate
from .permissions import IsAdministrator
from .serializers import AdminLoginSerializer

logger = logging.getLogger(__name__)


class AdminLoginView(APIView):
    """Exchange the administrator password for the dashboard token.

    The token is the configured secret itself: privileged endpoints
    compare the presented header against it on every call.
    """

    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        password = serializer.validated_data["password"]
        if not get_admin_gate().authorize(password):
            logger.warning("Failed administrator login attempt")
            return Response({"error": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)
        return Response({"token": password})


class HealthCheckView(APIView):
    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]

    def get(self, request):  # type: ignore
        return Response({"ok": True})


class SmtpTestView(APIView):
    """Send a test message synchronously to the administrator address."""

    permission_classes = [IsAdministrator]

    def post(self, request):  # type: ignore
        notification = smtp_test_message()
        if not send_email_notification(notification.recipient, notification.subject, notification.html_body):
            return Response({"error": "Email test failed"}, status=status.HTTP_502_BAD_GATEWAY)
        return Response({"ok": True})
