"""API views for the newsletter."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.administration.permissions import IsAdministrator
from shared.domain.errors import InvalidInputError

from .serializers import SubscribeSerializer, SubscriberSerializer
from .services import list_subscribers, subscribe


class SubscribeView(APIView):
    """Subscribe an email address; repeating it is acknowledged, not refused."""

    def post(self, request):  # type: ignore
        serializer = SubscribeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            subscriber, created = subscribe(serializer.validated_data["email"])
        except InvalidInputError as exc:
            return Response(exc.as_dict(), status=status.HTTP_400_BAD_REQUEST)
        return Response(
            {"ok": True, "already_subscribed": not created},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class AdminSubscriberViewSet(viewsets.ReadOnlyModelViewSet):
    """Subscriber list, administrators only."""

    serializer_class = SubscriberSerializer
    permission_classes = [IsAdministrator]

    def get_queryset(self):  # type: ignore
        return list_subscribers()
