"""API views for submitting, listing and moderating reviews."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.administration.permissions import IsAdministrator
from shared.domain.errors import InvalidInputError, NotFoundError

from .filters import ReviewStatusFilter
from .serializers import (
    AdminReviewSerializer,
    ApprovalSerializer,
    LimitQuerySerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
)
from .services import ModerationWorkflow, ReviewStore


def _limit(request) -> int | None:
    query = LimitQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data.get("limit")


def _not_found(exc: NotFoundError) -> Response:
    return Response({"code": exc.code, "detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)


class ReviewViewSet(mixins.ListModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    """Public endpoints: approved reviews and review submission."""

    pagination_class = None

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return ReviewCreateSerializer
        return ReviewSerializer

    def get_queryset(self):  # type: ignore
        return ReviewStore().list_approved()

    def list(self, request, *args, **kwargs):  # type: ignore
        reviews = ReviewStore().list_approved(limit=_limit(request))
        return Response(ReviewSerializer(reviews, many=True).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            review = ReviewStore().submit(serializer.to_submission())
        except InvalidInputError as exc:
            return Response(exc.as_dict(), status=status.HTTP_400_BAD_REQUEST)
        return Response({"id": str(review.id), "status": review.status}, status=status.HTTP_201_CREATED)


class AdminReviewViewSet(mixins.ListModelMixin, mixins.DestroyModelMixin, viewsets.GenericViewSet):
    """Administrator endpoints: all reviews, approval and deletion."""

    serializer_class = AdminReviewSerializer
    permission_classes = [IsAdministrator]
    filter_backends = [DjangoFilterBackend]
    filterset_class = ReviewStatusFilter
    pagination_class = None

    def get_queryset(self):  # type: ignore
        return ReviewStore().list_all()

    def list(self, request, *args, **kwargs):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        limit = _limit(request)
        if limit:
            queryset = queryset[:limit]
        return Response(self.get_serializer(queryset, many=True).data)

    def destroy(self, request, pk=None, *args, **kwargs):  # type: ignore
        try:
            ReviewStore().delete(pk)
        except NotFoundError as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["patch"], serializer_class=ApprovalSerializer)
    def approve(self, request, pk=None):  # type: ignore
        serializer = ApprovalSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            review = ModerationWorkflow().set_approval(pk, serializer.validated_data["approved"])
        except NotFoundError as exc:
            return _not_found(exc)
        return Response(AdminReviewSerializer(review).data)
