"""Tests for the unit of work and the message bus."""

from __future__ import annotations

from dataclasses import dataclass
from unittest import mock

from django.test import SimpleTestCase, TestCase

from apps.users.models import User
from shared.application.message_bus import MessageBus, message_bus
from shared.application.uow import DjangoUnitOfWork
from shared.domain.base import DomainEvent


@dataclass
class SomethingHappened(DomainEvent):
    name: str


class UnitOfWorkTests(TestCase):
    def test_events_are_published_after_commit(self) -> None:
        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True) as callbacks:
                with DjangoUnitOfWork() as uow:
                    uow.add_event(SomethingHappened(name="first"))
                    publish.assert_not_called()

        self.assertEqual(len(callbacks), 1)
        (events,), _ = publish.call_args
        self.assertEqual([event.name for event in events], ["first"])

    def test_exception_rolls_back_and_discards_events(self) -> None:
        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True) as callbacks:
                with self.assertRaises(RuntimeError):
                    with DjangoUnitOfWork() as uow:
                        User.objects.create_user(email="ghost@example.com", password="StrongPass123")
                        uow.add_event(SomethingHappened(name="lost"))
                        raise RuntimeError("abort")

        self.assertEqual(callbacks, [])
        publish.assert_not_called()
        self.assertFalse(User.objects.filter(email="ghost@example.com").exists())

    def test_publish_failure_does_not_raise(self) -> None:
        with mock.patch.object(message_bus, "publish_events", side_effect=RuntimeError("bus down")):
            with self.captureOnCommitCallbacks(execute=True):
                with DjangoUnitOfWork() as uow:
                    uow.add_event(SomethingHappened(name="x"))


class MessageBusTests(SimpleTestCase):
    def test_failing_handler_does_not_stop_others(self) -> None:
        bus = MessageBus()
        seen = []

        def broken(event):
            raise ValueError("nope")

        bus.register_event_handler(SomethingHappened, broken)
        bus.register_event_handler(SomethingHappened, seen.append)
        bus.register_event_handler(SomethingHappened, seen.append)

        bus.publish_events([SomethingHappened(name="a")])

        self.assertEqual(len(bus.handlers_for(SomethingHappened)), 2)
        self.assertEqual([event.name for event in seen], ["a"])

    def test_event_serialization(self) -> None:
        event = SomethingHappened(name="a", aggregate_id=3)

        data = event.to_dict()

        self.assertEqual(data["event_type"], "SomethingHappened")
        self.assertEqual(data["aggregate_id"], 3)
