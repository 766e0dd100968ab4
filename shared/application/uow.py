"""
Unit of Work Pattern

Scoped database transaction: entering the block opens an atomic unit,
leaving it commits, and any exception rolls everything back. Domain events
recorded inside the unit are published only after a successful commit.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass

    @abstractmethod
    def add_event(self, event: DomainEvent):
        """Record an event to publish after commit"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork() as uow:
            room = Room.objects.select_for_update().get(pk=room_id)
            booking = Booking.objects.create(...)
            uow.add_event(BookingCreated(...))
            # Transaction commits here
        # Events are published after commit
    """

    def __init__(self, using: str | None = None):
        self._events: List[DomainEvent] = []
        self._using = using
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self._using)
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)
                self._transaction = None
        return False

    def commit(self):
        """
        Schedule event publishing

        Events go out through transaction.on_commit() so they are only
        sent after the database commit succeeds.
        """
        logger.debug(f"Committing transaction with {len(self._events)} events")

        events = self._events.copy()
        self._events.clear()

        if events:
            transaction.on_commit(lambda: self._publish_events(events), using=self._using)

    def rollback(self):
        """Discard events; the atomic block rolls the database back"""
        logger.warning(f"Rolling back transaction, discarding {len(self._events)} events")
        self._events.clear()

    def add_event(self, event: DomainEvent):
        self._events.append(event)
        logger.debug(f"Recorded event {event.__class__.__name__} (aggregate {event.aggregate_id})")

    def _publish_events(self, events: List[DomainEvent]):
        """
        Publish collected events to message bus

        Called after successful transaction commit.
        """
        from shared.application.message_bus import message_bus

        logger.info(f"Publishing {len(events)} domain events after commit")

        try:
            message_bus.publish_events(events)
        except Exception as e:
            # Data is already committed; only the notification is lost
            logger.error(f"Error publishing events: {e}", exc_info=True)
