"""URL routing for the hotel catalog."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    HotelAvailableRoomsView,
    HotelDetailView,
    HotelListView,
    HotelRoomsView,
    HotelRoomTypesView,
    HotelSearchView,
)

urlpatterns = [
    path("hotels/", HotelListView.as_view(), name="hotel-list"),
    path("hotels/search/", HotelSearchView.as_view(), name="hotel-search"),
    path("hotels/<int:hotel_id>/", HotelDetailView.as_view(), name="hotel-detail"),
    path("hotels/<int:hotel_id>/rooms/", HotelRoomsView.as_view(), name="hotel-rooms"),
    path("hotels/<int:hotel_id>/room-types/", HotelRoomTypesView.as_view(), name="hotel-room-types"),
    path(
        "hotels/<int:hotel_id>/available-rooms/",
        HotelAvailableRoomsView.as_view(),
        name="hotel-available-rooms",
    ),
]
