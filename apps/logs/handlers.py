"""
Event handlers that ship committed business events to the logging service.

Handlers only enqueue :func:`apps.logs.tasks.ship_log`; they run after the
originating transaction has committed.
"""

from __future__ import annotations

from typing import Any, Dict

import structlog

from apps.bookings.domain.events import BookingCancelled, BookingCreated, RefundWithoutWallet
from apps.wallets.domain.events import WalletDeposited, WalletTransferred, WalletWithdrawn
from shared.application.message_bus import message_bus

from .client import jsonable
from .tasks import ship_log

logger = structlog.get_logger(__name__)


def _enqueue(level: str, message: str, context: Dict[str, Any], source: str, user_id) -> None:
    ship_log.delay(level, message, jsonable(context), source, user_id)


def on_booking_created(event: BookingCreated) -> None:
    _enqueue(
        "info",
        "Booking created",
        {
            "booking_id": event.booking_id,
            "hotel_id": event.hotel_id,
            "room_id": event.room_id,
            "check_in": event.check_in,
            "check_out": event.check_out,
            "total_amount": event.total_amount,
            "status": "confirmed",
            "payment_status": "paid",
            "transaction_id": event.transaction_id,
        },
        "bookings",
        event.user_id,
    )


def on_booking_cancelled(event: BookingCancelled) -> None:
    _enqueue(
        "info",
        "Booking cancelled",
        {
            "booking_id": event.booking_id,
            "hotel_id": event.hotel_id,
            "room_id": event.room_id,
            "refund_amount": event.refund_amount,
            "status": "cancelled",
            "transaction_id": event.transaction_id,
        },
        "bookings",
        event.user_id,
    )


def on_refund_without_wallet(event: RefundWithoutWallet) -> None:
    _enqueue(
        "warning",
        "Refund issued to a user without a wallet",
        {"booking_id": event.booking_id, "refund_amount": event.refund_amount},
        "bookings",
        event.user_id,
    )


def on_wallet_deposited(event: WalletDeposited) -> None:
    _enqueue(
        "info",
        "Transaction deposit",
        {
            "transaction_id": event.transaction_id,
            "wallet_id": event.aggregate_id,
            "type": "deposit",
            "amount": event.amount,
            "new_balance": event.new_balance,
        },
        "wallets",
        event.user_id,
    )


def on_wallet_withdrawn(event: WalletWithdrawn) -> None:
    _enqueue(
        "info",
        "Transaction withdrawal",
        {
            "transaction_id": event.transaction_id,
            "wallet_id": event.aggregate_id,
            "type": "withdrawal",
            "amount": event.amount,
            "new_balance": event.new_balance,
        },
        "wallets",
        event.user_id,
    )


def on_wallet_transferred(event: WalletTransferred) -> None:
    _enqueue(
        "info",
        "Transaction transfer",
        {
            "type": "transfer",
            "amount": event.amount,
            "reference_id": event.reference,
            "to_user_id": event.to_user_id,
            "debit_transaction_id": event.debit_transaction_id,
            "credit_transaction_id": event.credit_transaction_id,
        },
        "wallets",
        event.from_user_id,
    )


HANDLERS = {
    BookingCreated: on_booking_created,
    BookingCancelled: on_booking_cancelled,
    RefundWithoutWallet: on_refund_without_wallet,
    WalletDeposited: on_wallet_deposited,
    WalletWithdrawn: on_wallet_withdrawn,
    WalletTransferred: on_wallet_transferred,
}


def register_handlers() -> None:
    for event_type, handler in HANDLERS.items():
        message_bus.register_event_handler(event_type, handler)
    logger.debug("logs.handlers.registered", count=len(HANDLERS))
