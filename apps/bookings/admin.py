"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "hotel",
        "room",
        "user",
        "status",
        "payment_status",
        "check_in",
        "check_out",
        "total_amount",
        "created_at",
    )
    list_filter = ("status", "payment_status", "check_in", "check_out", "hotel")
    search_fields = ("hotel__name", "room__room_number", "user__email")
    readonly_fields = (
        "total_amount",
        "payment_status",
        "cancelled_at",
        "created_at",
        "updated_at",
    )
