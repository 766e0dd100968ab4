"""Tests for the seed_hotels management command."""

from __future__ import annotations

from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.hotels.models import Hotel, Room, RoomType


class SeedHotelsCommandTests(TestCase):
    def test_creates_default_catalog(self) -> None:
        call_command("seed_hotels", stdout=StringIO())

        self.assertEqual(
            set(Hotel.objects.values_list("name", flat=True)),
            {"Grand Hotel", "Seaside Resort", "Business Inn"},
        )
        self.assertEqual(RoomType.objects.count(), 9)
        self.assertEqual(Room.objects.count(), 27)
        suite = RoomType.objects.get(hotel__name="Seaside Resort", name="Suite")
        self.assertEqual(suite.price_per_night, Decimal("250.00"))
        self.assertEqual(suite.capacity, 4)
        self.assertIn("Jacuzzi", suite.amenities)

    def test_is_idempotent(self) -> None:
        call_command("seed_hotels", stdout=StringIO())
        call_command("seed_hotels", "--rooms-per-type", "1", stdout=StringIO())

        self.assertEqual(Hotel.objects.count(), 3)
        self.assertEqual(Room.objects.count(), 27)
