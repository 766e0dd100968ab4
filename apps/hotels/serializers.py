"""Serializers for the hotel catalog."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import Hotel, Room, RoomType


class RoomTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = RoomType
        fields = [
            "id",
            "hotel",
            "name",
            "description",
            "price_per_night",
            "capacity",
            "amenities",
        ]
        read_only_fields = fields


class RoomSerializer(serializers.ModelSerializer):
    room_type = RoomTypeSerializer(read_only=True)

    class Meta:
        model = Room
        fields = ["id", "hotel", "room_type", "room_number", "floor", "status"]
        read_only_fields = fields


class HotelSerializer(serializers.ModelSerializer):
    room_types = RoomTypeSerializer(many=True, read_only=True)

    class Meta:
        model = Hotel
        fields = [
            "id",
            "name",
            "address",
            "description",
            "rating",
            "price_range",
            "room_types",
            "created_at",
        ]
        read_only_fields = fields


class HotelShortSerializer(serializers.ModelSerializer):
    class Meta:
        model = Hotel
        fields = ["id", "name", "address", "rating", "price_range"]
        read_only_fields = fields


class StayQuerySerializer(serializers.Serializer):
    """Query parameters for the available-rooms lookup."""

    check_in = serializers.DateField()
    check_out = serializers.DateField()

    def validate(self, attrs):  # type: ignore
        if attrs["check_in"] <= timezone.localdate():
            raise serializers.ValidationError({"check_in": "Check-in date must be in the future."})
        if attrs["check_out"] <= attrs["check_in"]:
            raise serializers.ValidationError({"check_out": "Check-out date must be after check-in date."})
        return attrs
