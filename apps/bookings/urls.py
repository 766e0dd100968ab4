"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingCreateView, BookingDetailView, HotelBookingsView, UserBookingsView

urlpatterns = [
    path("bookings/", BookingCreateView.as_view(), name="booking-create"),
    path("bookings/<int:booking_id>/", BookingDetailView.as_view(), name="booking-detail"),
    path("user/bookings/", UserBookingsView.as_view(), name="user-bookings"),
    path("hotels/<int:hotel_id>/bookings/", HotelBookingsView.as_view(), name="hotel-bookings"),
]
