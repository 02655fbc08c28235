"""Admin registration for reservations."""

from __future__ import annotations

from django.contrib import admin

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("booking_date", "booking_time", "name", "contact", "created_at")
    list_filter = ("booking_date",)
    search_fields = ("name", "contact")
    readonly_fields = ("id", "name", "contact", "booking_date", "booking_time", "created_at")

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False
