"""API tests for the public hotel catalog."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.hotels.models import Hotel, Room, RoomType
from apps.users.models import User


class HotelCatalogAPITests(APITestCase):
    def setUp(self) -> None:
        self.hotel = Hotel.objects.create(
            name="Grand Hotel",
            address="123 Main Street, City Center",
            description="Luxury hotel in the heart of the city",
            rating=Decimal("4.5"),
            price_range="$$$",
        )
        self.other_hotel = Hotel.objects.create(
            name="Business Inn",
            address="789 Business District, Downtown",
            description="Modern business hotel",
        )
        self.room_type = RoomType.objects.create(
            hotel=self.hotel,
            name="Standard Room",
            price_per_night=Decimal("100.00"),
            amenities=["WiFi", "TV"],
        )
        self.room_101 = Room.objects.create(hotel=self.hotel, room_type=self.room_type, room_number="101")
        self.room_102 = Room.objects.create(hotel=self.hotel, room_type=self.room_type, room_number="102")

    def test_list_is_public(self) -> None:
        response = self.client.get(reverse("hotel-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "success")
        names = [hotel["name"] for hotel in response.data["data"]]
        self.assertEqual(names, ["Business Inn", "Grand Hotel"])

    def test_detail_includes_room_types(self) -> None:
        response = self.client.get(reverse("hotel-detail", kwargs={"hotel_id": self.hotel.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["room_types"][0]["name"], "Standard Room")

    def test_detail_of_missing_hotel(self) -> None:
        response = self.client.get(reverse("hotel-detail", kwargs={"hotel_id": 9999}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Hotel not found"})

    def test_search_matches_address(self) -> None:
        response = self.client.get(reverse("hotel-search"), {"q": "downtown"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([hotel["id"] for hotel in response.data["data"]], [self.other_hotel.id])

    def test_search_requires_two_characters(self) -> None:
        response = self.client.get(reverse("hotel-search"), {"q": "g"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("error", response.data)

    def test_rooms_and_room_types(self) -> None:
        rooms = self.client.get(reverse("hotel-rooms", kwargs={"hotel_id": self.hotel.id}))
        room_types = self.client.get(reverse("hotel-room-types", kwargs={"hotel_id": self.hotel.id}))

        self.assertEqual([room["room_number"] for room in rooms.data["data"]], ["101", "102"])
        self.assertEqual(rooms.data["data"][0]["room_type"]["price_per_night"], Decimal("100.00"))
        self.assertEqual(len(room_types.data["data"]), 1)

    def test_available_rooms_excludes_booked_room(self) -> None:
        guest = User.objects.create_user(email="guest@example.com", password="StrongPass123")
        check_in = timezone.localdate() + timedelta(days=5)
        check_out = check_in + timedelta(days=2)
        Booking.objects.create(
            user=guest,
            hotel=self.hotel,
            room=self.room_101,
            check_in=check_in,
            check_out=check_out,
            total_amount=Decimal("200.00"),
        )

        response = self.client.get(
            reverse("hotel-available-rooms", kwargs={"hotel_id": self.hotel.id}),
            {"check_in": str(check_in + timedelta(days=1)), "check_out": str(check_out + timedelta(days=1))},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([room["id"] for room in response.data["data"]], [self.room_102.id])

        back_to_back = self.client.get(
            reverse("hotel-available-rooms", kwargs={"hotel_id": self.hotel.id}),
            {"check_in": str(check_out), "check_out": str(check_out + timedelta(days=1))},
        )

        self.assertEqual([room["id"] for room in back_to_back.data["data"]], [self.room_101.id, self.room_102.id])

    def test_available_rooms_rejects_past_check_in(self) -> None:
        today = timezone.localdate()
        response = self.client.get(
            reverse("hotel-available-rooms", kwargs={"hotel_id": self.hotel.id}),
            {"check_in": str(today), "check_out": str(today + timedelta(days=1))},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
