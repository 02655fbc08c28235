"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.domain.value_objects import SLOT_TIME_FORMAT

from .application.command_handlers import CreateReservationCommand
from .models import Reservation


class ReservationCreateSerializer(serializers.Serializer):
    """Booking request submitted by a visitor."""

    name = serializers.CharField(max_length=255)
    contact = serializers.CharField(max_length=255)
    booking_date = serializers.DateField()
    booking_time = serializers.TimeField(input_formats=[SLOT_TIME_FORMAT, "%H:%M:%S"])
    email = serializers.EmailField(required=False, allow_blank=True)

    def to_command(self) -> CreateReservationCommand:
        data = self.validated_data
        return CreateReservationCommand(
            name=data["name"],
            contact=data["contact"],
            booking_date=data["booking_date"],
            booking_time=data["booking_time"],
            email=data.get("email", ""),
        )


class ReservationSlotSerializer(serializers.ModelSerializer):
    """Public view of a reservation: the occupied slot only."""

    booking_time = serializers.TimeField(format=SLOT_TIME_FORMAT)

    class Meta:
        model = Reservation
        fields = ["booking_date", "booking_time"]


class ReservationCreatedSerializer(ReservationSlotSerializer):
    class Meta(ReservationSlotSerializer.Meta):
        fields = ["id", "booking_date", "booking_time"]


class ReservationSerializer(serializers.ModelSerializer):
    """Full reservation record for administrators."""

    booking_time = serializers.TimeField(format=SLOT_TIME_FORMAT)

    class Meta:
        model = Reservation
        fields = [
            "id",
            "name",
            "contact",
            "booking_date",
            "booking_time",
            "created_at",
        ]
        read_only_fields = fields


class SlotQuerySerializer(serializers.Serializer):
    date = serializers.DateField()


class OfferedSlotSerializer(serializers.Serializer):
    time = serializers.TimeField(format=SLOT_TIME_FORMAT)
    booked = serializers.BooleanField()
