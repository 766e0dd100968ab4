"""Public read-only views over the hotel catalog."""

from __future__ import annotations

import structlog
from django.db.models import Q  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.services import available_rooms

from .models import Hotel, Room
from .serializers import (
    HotelSerializer,
    RoomSerializer,
    RoomTypeSerializer,
    StayQuerySerializer,
)

logger = structlog.get_logger(__name__)

SEARCH_MIN_LENGTH = 2


def _ok(message: str, data) -> Response:
    return Response({"status": "success", "message": message, "data": data})


def _hotel_or_404(hotel_id: int):
    hotel = Hotel.objects.filter(pk=hotel_id).first()
    if hotel is None:
        return None, Response({"error": "Hotel not found"}, status=status.HTTP_404_NOT_FOUND)
    return hotel, None


class CatalogView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes: list = []


class HotelListView(CatalogView):
    def get(self, request):  # type: ignore
        hotels = Hotel.objects.prefetch_related("room_types")
        return _ok("Hotels retrieved successfully", HotelSerializer(hotels, many=True).data)


class HotelSearchView(CatalogView):
    def get(self, request):  # type: ignore
        query = (request.query_params.get("q") or "").strip()
        if len(query) < SEARCH_MIN_LENGTH:
            return Response(
                {"error": f"Search query must be at least {SEARCH_MIN_LENGTH} characters"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        hotels = Hotel.objects.prefetch_related("room_types").filter(
            Q(name__icontains=query) | Q(address__icontains=query) | Q(description__icontains=query)
        )
        logger.debug("hotel_search", query=query, results=len(hotels))
        return _ok("Search completed successfully", HotelSerializer(hotels, many=True).data)


class HotelDetailView(CatalogView):
    def get(self, request, hotel_id: int):  # type: ignore
        hotel, error = _hotel_or_404(hotel_id)
        if error:
            return error
        return _ok("Hotel retrieved successfully", HotelSerializer(hotel).data)


class HotelRoomsView(CatalogView):
    def get(self, request, hotel_id: int):  # type: ignore
        hotel, error = _hotel_or_404(hotel_id)
        if error:
            return error
        rooms = Room.objects.select_related("room_type").filter(hotel=hotel)
        return _ok("Rooms retrieved successfully", RoomSerializer(rooms, many=True).data)


class HotelRoomTypesView(CatalogView):
    def get(self, request, hotel_id: int):  # type: ignore
        hotel, error = _hotel_or_404(hotel_id)
        if error:
            return error
        return _ok(
            "Room types retrieved successfully",
            RoomTypeSerializer(hotel.room_types.all(), many=True).data,
        )


class HotelAvailableRoomsView(CatalogView):
    """Rooms of a hotel with no confirmed booking overlapping the stay."""

    def get(self, request, hotel_id: int):  # type: ignore
        hotel, error = _hotel_or_404(hotel_id)
        if error:
            return error
        query = StayQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        rooms = available_rooms(
            hotel,
            query.validated_data["check_in"],
            query.validated_data["check_out"],
        ).select_related("room_type")
        return _ok("Available rooms retrieved successfully", RoomSerializer(rooms, many=True).data)
