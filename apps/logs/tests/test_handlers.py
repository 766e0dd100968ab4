"""Tests for shipping committed domain events to the logging service."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.test import SimpleTestCase

from apps.bookings.domain.events import BookingCreated
from apps.logs import handlers
from apps.wallets.domain.events import WalletTransferred
from shared.application.message_bus import message_bus


class LogHandlerTests(SimpleTestCase):
    def test_handlers_are_registered_on_startup(self) -> None:
        for event_type, handler in handlers.HANDLERS.items():
            self.assertIn(handler, message_bus.handlers_for(event_type))

    @mock.patch("apps.logs.handlers.ship_log")
    def test_booking_created_is_enqueued_as_plain_json(self, ship_log) -> None:
        event = BookingCreated(
            aggregate_id=1,
            booking_id=1,
            user_id=5,
            hotel_id=2,
            room_id=3,
            check_in=date(2030, 1, 10),
            check_out=date(2030, 1, 12),
            total_amount=Decimal("200.00"),
            transaction_id=11,
        )

        message_bus.publish_events([event])

        level, message, context, source, user_id = ship_log.delay.call_args.args
        self.assertEqual((level, message, source, user_id), ("info", "Booking created", "bookings", 5))
        self.assertEqual(context["check_in"], "2030-01-10")
        self.assertEqual(context["total_amount"], "200.00")

    @mock.patch("apps.logs.handlers.ship_log")
    def test_transfer_is_attributed_to_sender(self, ship_log) -> None:
        event = WalletTransferred(
            from_user_id=1,
            to_user_id=2,
            amount=Decimal("10.00"),
            reference="ABC",
            debit_transaction_id=1,
            credit_transaction_id=2,
        )

        message_bus.publish_events([event])

        self.assertEqual(ship_log.delay.call_args.args[4], 1)
        self.assertEqual(ship_log.delay.call_args.args[2]["to_user_id"], 2)
