"""API views for the contact form."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.administration.permissions import IsAdministrator

from .serializers import ContactSubmissionCreateSerializer, ContactSubmissionSerializer
from .services import list_submissions, submit_contact


class ContactView(APIView):
    def post(self, request):  # type: ignore
        serializer = ContactSubmissionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission = submit_contact(**serializer.validated_data)
        return Response({"ok": True, "id": str(submission.id)}, status=status.HTTP_201_CREATED)


class AdminContactViewSet(viewsets.ReadOnlyModelViewSet):
    """Contact submissions, administrators only."""

    serializer_class = ContactSubmissionSerializer
    permission_classes = [IsAdministrator]

    def get_queryset(self):  # type: ignore
        return list_submissions()
