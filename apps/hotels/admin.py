"""Admin registration for the hotel catalog."""

from __future__ import annotations

from django.contrib import admin

from .models import Hotel, Room, RoomType


class RoomTypeInline(admin.TabularInline):
    model = RoomType
    extra = 0


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("name", "address", "rating", "price_range", "created_at")
    search_fields = ("name", "address")
    inlines = [RoomTypeInline]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("room_number", "hotel", "room_type", "floor", "status")
    list_filter = ("status", "hotel")
    search_fields = ("room_number", "hotel__name")
