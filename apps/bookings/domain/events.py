"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from shared.domain.base import DomainEvent


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: A booking was created and paid from the guest's wallet

    Triggers:
    - Ship a booking record to the logging service
    """
    booking_id: int
    user_id: int
    hotel_id: int
    room_id: int
    check_in: date
    check_out: date
    total_amount: Decimal
    transaction_id: Optional[int]


@dataclass
class BookingCancelled(DomainEvent):
    """
    Event: Booking was cancelled and refunded

    Triggers:
    - Ship a cancellation record to the logging service
    """
    booking_id: int
    user_id: int
    hotel_id: int
    room_id: int
    refund_amount: Decimal
    transaction_id: Optional[int]


@dataclass
class RefundWithoutWallet(DomainEvent):
    """
    Event: A paid booking was cancelled but its owner had no wallet

    A wallet was created to receive the refund. This should never happen
    and is reported as a warning.
    """
    booking_id: int
    user_id: int
    refund_amount: Decimal
