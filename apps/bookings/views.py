"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.hotels.models import Hotel
from shared.api import domain_error_response, error_response, invalid_input_response
from shared.domain.exceptions import DomainError

from . import services
from .models import Booking
from .serializers import BookingCreateSerializer, BookingSerializer, HotelBookingSerializer


class BookingCreateView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer)
        data = serializer.validated_data
        try:
            booking = services.create_booking(
                request.user,
                data["hotel"],
                data["room"],
                data["check_in"],
                data["check_out"],
                data["total_amount"],
            )
        except DomainError as exc:
            return domain_error_response(exc)

        booking = services.bookings_for_user(request.user).get(pk=booking.pk)
        return Response(
            {"booking": BookingSerializer(booking).data, "message": "Booking created successfully"},
            status=status.HTTP_201_CREATED,
        )


class BookingDetailView(APIView):
    """Owner-only retrieval and cancellation of a booking."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, booking_id: int):  # type: ignore
        booking = Booking.objects.select_related("hotel", "room", "room__room_type").filter(pk=booking_id).first()
        if booking is None:
            return error_response("Booking not found", status.HTTP_404_NOT_FOUND)
        if booking.user_id != request.user.pk:
            return error_response("Unauthorized to view this booking", status.HTTP_403_FORBIDDEN)
        return Response(BookingSerializer(booking).data)

    def delete(self, request, booking_id: int):  # type: ignore
        try:
            refund = services.cancel_booking(booking_id, request.user)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response({"message": "Booking cancelled successfully", "refund_amount": refund})


class UserBookingsView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        bookings = services.bookings_for_user(request.user)
        return Response(BookingSerializer(bookings, many=True).data)


class HotelBookingsView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, hotel_id: int):  # type: ignore
        hotel = Hotel.objects.filter(pk=hotel_id).first()
        if hotel is None:
            return error_response("Hotel not found", status.HTTP_404_NOT_FOUND)
        bookings = services.bookings_for_hotel(hotel)
        return Response(HotelBookingSerializer(bookings, many=True).data)
