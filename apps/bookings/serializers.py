"""Serializers for the booking domain."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.hotels.models import Hotel, Room
from apps.hotels.serializers import HotelShortSerializer, RoomSerializer
from apps.users.serializers import UserShortSerializer

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    hotel = HotelShortSerializer(read_only=True)
    room = RoomSerializer(read_only=True)
    nights = serializers.IntegerField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "user",
            "hotel",
            "room",
            "check_in",
            "check_out",
            "nights",
            "total_amount",
            "status",
            "payment_status",
            "cancelled_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class HotelBookingSerializer(BookingSerializer):
    """Booking as seen from the hotel side, with guest details."""

    user = UserShortSerializer(read_only=True)

    class Meta(BookingSerializer.Meta):
        pass


class BookingCreateSerializer(serializers.Serializer):
    """Input for a new booking. Resolves ``hotel_id`` and ``room_id`` to instances."""

    hotel_id = serializers.PrimaryKeyRelatedField(queryset=Hotel.objects.all(), source="hotel")
    room_id = serializers.PrimaryKeyRelatedField(queryset=Room.objects.all(), source="room")
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0"))

    def validate(self, attrs):  # type: ignore
        check_in: date = attrs["check_in"]
        check_out: date = attrs["check_out"]
        if check_in <= timezone.localdate():
            raise serializers.ValidationError({"check_in": "Check-in date must be in the future."})
        if check_out <= check_in:
            raise serializers.ValidationError({"check_out": "Check-out date must be after check-in date."})
        if attrs["room"].hotel_id != attrs["hotel"].pk:
            raise serializers.ValidationError({"room_id": "Room does not belong to the selected hotel."})
        return attrs
