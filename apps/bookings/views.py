"""API views for the booking domain."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.administration.permissions import IsAdministrator
from shared.domain.errors import InvalidInputError, SlotConflictError

from .application.command_handlers import CreateReservationHandler
from .domain.calendar import SlotCalendar
from .filters import ReservationSlotFilter
from .serializers import (
    OfferedSlotSerializer,
    ReservationCreatedSerializer,
    ReservationCreateSerializer,
    ReservationSerializer,
    ReservationSlotSerializer,
    SlotQuerySerializer,
)
from .services import BookingLedger


class BookingViewSet(mixins.ListModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    """Public booking endpoints: occupied slots, offered slots and booking."""

    filter_backends = [DjangoFilterBackend]
    filterset_class = ReservationSlotFilter
    pagination_class = None

    def get_queryset(self):  # type: ignore
        return BookingLedger().occupied()

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return ReservationCreateSerializer
        return ReservationSlotSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            reservation = CreateReservationHandler().handle(serializer.to_command())
        except InvalidInputError as exc:
            return Response(exc.as_dict(), status=status.HTTP_400_BAD_REQUEST)
        except SlotConflictError as exc:
            return Response(
                {"code": exc.code, "detail": str(exc)},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(ReservationCreatedSerializer(reservation).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["get"])
    def slots(self, request):  # type: ignore
        """Offered slots of one date with their booked flag."""
        query = SlotQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        day = query.validated_data["date"]

        calendar = SlotCalendar.from_settings()
        offered = calendar.offered_slots(day, timezone.localdate())
        taken = set(BookingLedger().list_reservations(start=day, end=day))
        slots = [{"time": slot.start, "booked": slot in taken} for slot in offered]
        return Response(
            {
                "date": day.isoformat(),
                "offerable": bool(offered),
                "slots": OfferedSlotSerializer(slots, many=True).data,
            }
        )


class AdminReservationViewSet(viewsets.ReadOnlyModelViewSet):
    """Full reservation records, administrators only."""

    serializer_class = ReservationSerializer
    permission_classes = [IsAdministrator]

    def get_queryset(self):  # type: ignore
        return BookingLedger().list_records()
