"""Concurrent booking tests; they need a database with real row locks."""

from __future__ import annotations

import threading
from datetime import timedelta
from decimal import Decimal
from unittest import skipUnless

from django.db import connection, connections
from django.test import TransactionTestCase
from django.utils import timezone

from apps.bookings import services
from apps.bookings.models import Booking
from apps.hotels.models import Hotel, Room, RoomType
from apps.users.models import User
from apps.wallets import services as wallets
from apps.wallets.models import Transaction
from shared.domain.exceptions import RoomUnavailable


@skipUnless(connection.vendor == "postgresql", "row-level locks need PostgreSQL")
class ConcurrentBookingTests(TransactionTestCase):
    def setUp(self) -> None:
        self.hotel = Hotel.objects.create(name="Grand Hotel", address="123 Main Street")
        room_type = RoomType.objects.create(hotel=self.hotel, name="Standard Room", price_per_night=Decimal("100.00"))
        self.room = Room.objects.create(hotel=self.hotel, room_type=room_type, room_number="101")
        self.guests = [
            User.objects.create_user(email=f"guest{index}@example.com", password="StrongPass123")
            for index in range(2)
        ]
        for guest in self.guests:
            wallets.deposit(guest, Decimal("500"))
        self.check_in = timezone.localdate() + timedelta(days=10)
        self.check_out = self.check_in + timedelta(days=3)

    def test_only_one_of_two_simultaneous_bookings_wins(self) -> None:
        barrier = threading.Barrier(len(self.guests))
        outcomes = []

        def attempt(guest) -> None:
            try:
                barrier.wait()
                services.create_booking(
                    guest, self.hotel, self.room, self.check_in, self.check_out, Decimal("300.00")
                )
                outcomes.append("booked")
            except RoomUnavailable:
                outcomes.append("rejected")
            finally:
                connections.close_all()

        threads = [threading.Thread(target=attempt, args=(guest,)) for guest in self.guests]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(sorted(outcomes), ["booked", "rejected"])
        self.assertEqual(Booking.objects.filter(room=self.room).count(), 1)
        self.assertEqual(Transaction.objects.filter(type=Transaction.Type.BOOKING_PAYMENT).count(), 1)
