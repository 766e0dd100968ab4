"""Domain services for booking workflows."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

import structlog
from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils import timezone  # type: ignore

from apps.hotels.models import Room
from apps.wallets import services as wallets
from apps.wallets.models import Transaction, Wallet
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import (
    AlreadyCancelled,
    BookingCreationFailed,
    DomainError,
    InsufficientBalance,
    NotFound,
    RoomUnavailable,
    TransactionAborted,
    Unauthorized,
    ValidationFailed,
)
from shared.domain.value_objects import to_amount

from .domain.events import BookingCancelled, BookingCreated, RefundWithoutWallet
from .models import Booking

logger = structlog.get_logger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def is_room_available(room, check_in: date, check_out: date, *, exclude_booking_id=None) -> bool:
    """True when no non-cancelled booking of ``room`` overlaps ``[check_in, check_out)``."""

    conflicts = Booking.objects.active().overlapping(check_in, check_out).filter(room=room)
    if exclude_booking_id is not None:
        conflicts = conflicts.exclude(pk=exclude_booking_id)
    return not conflicts.exists()


def available_rooms(hotel, check_in: date, check_out: date):
    """Rooms of ``hotel`` that are free for the whole stay."""

    taken = Booking.objects.active().overlapping(check_in, check_out).filter(hotel=hotel)
    return Room.objects.filter(hotel=hotel).exclude(pk__in=taken.values("room_id"))


def validate_booking_request(hotel, room, check_in: date, check_out: date, total_amount: Any) -> Decimal:
    try:
        amount = to_amount(total_amount)
    except ValueError:
        raise ValidationFailed("Total amount must be a valid number")
    if amount < 0:
        raise ValidationFailed("Total amount cannot be negative")
    if check_in <= timezone.localdate():
        raise ValidationFailed("Check-in date must be in the future")
    if check_out <= check_in:
        raise ValidationFailed("Check-out date must be after check-in date")
    if room.hotel_id != hotel.pk:
        raise ValidationFailed("Room does not belong to the selected hotel")
    return amount


def create_booking(user, hotel, room, check_in: date, check_out: date, total_amount: Any) -> Booking:
    """
    Book ``room`` for the stay and pay for it from the user's wallet.

    Room lock, availability check, wallet debit, ledger entry and the
    booking row are one atomic unit: on any failure nothing is persisted.

    Raises:
        ValidationFailed: bad dates, amount or hotel/room pairing
        RoomUnavailable: the room is booked for overlapping dates
        InsufficientBalance: the wallet cannot cover ``total_amount``
        BookingCreationFailed: any unexpected failure, with ``cause`` set
    """
    amount = validate_booking_request(hotel, room, check_in, check_out, total_amount)
    log = logger.bind(user_id=user.pk, hotel_id=hotel.pk, room_id=room.pk)

    try:
        with DjangoUnitOfWork() as uow:
            # Serializes concurrent bookings of the same room
            _lock_queryset_if_possible(Room.objects.filter(pk=room.pk)).get()

            if not is_room_available(room, check_in, check_out):
                log.info("booking.rejected", reason="room_unavailable")
                raise RoomUnavailable()

            wallet = wallets.lock_wallet(user, create=True)
            if wallet.balance < amount:
                log.info("booking.rejected", reason="insufficient_balance", balance=str(wallet.balance))
                raise InsufficientBalance()

            booking = Booking.objects.create(
                user=user,
                hotel=hotel,
                room=room,
                check_in=check_in,
                check_out=check_out,
                total_amount=amount,
                status=Booking.Status.CONFIRMED,
                payment_status=Booking.PaymentStatus.PENDING,
            )
            entry = _charge_for_booking(wallet, booking)
            booking.mark_paid()

            uow.add_event(
                BookingCreated(
                    aggregate_id=booking.pk,
                    booking_id=booking.pk,
                    user_id=user.pk,
                    hotel_id=hotel.pk,
                    room_id=room.pk,
                    check_in=check_in,
                    check_out=check_out,
                    total_amount=amount,
                    transaction_id=entry.pk if entry else None,
                )
            )
    except DomainError:
        raise
    except Exception as exc:
        log.error("booking.failed", error=str(exc), exc_info=True)
        raise BookingCreationFailed(f"Booking creation failed: {exc}", cause=exc) from exc

    log.info("booking.created", booking_id=booking.pk, total_amount=str(amount))
    return booking


def _charge_for_booking(wallet: Wallet, booking: Booking) -> Transaction | None:
    # A free booking leaves no ledger entry; ledger amounts are strictly positive
    if booking.total_amount == 0:
        return None
    return wallets.debit_wallet(
        wallet,
        booking.total_amount,
        type=Transaction.Type.BOOKING_PAYMENT,
        description=f"Payment for booking #{booking.pk}",
        reference_id=booking.payment_reference,
        metadata={"booking_id": booking.pk, "hotel_id": booking.hotel_id, "room_id": booking.room_id},
    )


def _ensure_cancellable(booking: Booking | None, user) -> Booking:
    if booking is None:
        raise NotFound("Booking not found")
    if booking.user_id != user.pk:
        raise Unauthorized("Unauthorized to cancel this booking")
    if booking.is_cancelled:
        raise AlreadyCancelled()
    return booking


def cancel_booking(booking_id: int, user) -> Decimal:
    """
    Cancel the user's booking and refund its full amount to their wallet.

    Returns the refunded amount. A second cancellation raises
    AlreadyCancelled and leaves the ledger untouched.
    """
    log = logger.bind(user_id=user.pk, booking_id=booking_id)

    # Fail fast without opening a transaction
    _ensure_cancellable(Booking.objects.filter(pk=booking_id).first(), user)

    try:
        with DjangoUnitOfWork() as uow:
            booking = _ensure_cancellable(
                _lock_queryset_if_possible(Booking.objects.filter(pk=booking_id)).first(),
                user,
            )
            refund = booking.total_amount
            booking.mark_cancelled()
            entry = _refund_booking(booking, user, uow, log)
            uow.add_event(
                BookingCancelled(
                    aggregate_id=booking.pk,
                    booking_id=booking.pk,
                    user_id=user.pk,
                    hotel_id=booking.hotel_id,
                    room_id=booking.room_id,
                    refund_amount=refund,
                    transaction_id=entry.pk if entry else None,
                )
            )
    except DomainError:
        raise
    except Exception as exc:
        log.error("booking.cancel.failed", error=str(exc), exc_info=True)
        raise TransactionAborted(f"Booking cancellation failed: {exc}", cause=exc) from exc

    log.info("booking.cancelled", refund_amount=str(refund))
    return refund


def _refund_booking(booking: Booking, user, uow: DjangoUnitOfWork, log) -> Transaction | None:
    refund = booking.total_amount

    wallet = wallets.lock_wallet(user)
    if wallet is None:
        # Paid bookings always have a wallet; recover by creating one
        wallet = wallets.lock_wallet(user, create=True)
        log.warning("booking.refund.wallet_missing", refund_amount=str(refund))
        uow.add_event(
            RefundWithoutWallet(
                aggregate_id=booking.pk,
                booking_id=booking.pk,
                user_id=user.pk,
                refund_amount=refund,
            )
        )

    if refund == 0:
        return None
    return wallets.credit_wallet(
        wallet,
        refund,
        type=Transaction.Type.REFUND,
        description=f"Refund for cancelled booking #{booking.pk}",
        reference_id=booking.refund_reference,
        metadata={"booking_id": booking.pk},
    )


def bookings_for_user(user):
    return Booking.objects.select_related("hotel", "room", "room__room_type").filter(user=user)


def bookings_for_hotel(hotel):
    return Booking.objects.select_related("user", "room", "room__room_type").filter(hotel=hotel)
