"""Tests for EventStore implementations.

Both stores must satisfy the same contract.
Run with: pytest tests/test_stores.py -v
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from events.domain import Event, EventId, InvalidArgumentError
from events.services.event_service import EventService
from events.stores import EventStore, InMemoryEventStore
from events.stores.django_store import DjangoEventStore


@pytest.fixture(params=["memory", "django"])
def event_store(request) -> EventStore:
    if request.param == "django":
        request.getfixturevalue("db")
        return DjangoEventStore()
    return InMemoryEventStore()


def _event(name: str, **fields) -> Event:
    return Event(id=EventId.generate(), event_name=name, **fields)


class TestEventStoreContract:
    """Contract tests run against every store."""

    def test_save_and_get_round_trip(self, event_store):
        event = _event(
            "Opera",
            tags=("classical", "Evening"),
            ticket_price=Decimal("42.50"),
            event_date_time=datetime(2026, 9, 1, 19, 30, tzinfo=timezone.utc),
            duration_minutes=150,
        )
        saved = event_store.save_event(event)
        assert saved == event
        assert event_store.get_event(event.id) == event

    def test_get_missing_returns_none(self, event_store):
        assert event_store.get_event(EventId.generate()) is None

    def test_save_existing_id_replaces_event(self, event_store):
        event = _event("First", tags=("a",), ticket_price=Decimal("1.00"))
        event_store.save_event(event)
        replacement = Event(id=event.id, event_name="Second")
        event_store.save_event(replacement)
        assert event_store.get_event(event.id) == replacement
        assert len(event_store.list_events()) == 1

    def test_list_events_in_insertion_order(self, event_store):
        for name in ["one", "two", "three"]:
            event_store.save_event(_event(name))
        assert [e.event_name for e in event_store.list_events()] == ["one", "two", "three"]

    def test_exists_and_delete(self, event_store):
        event = event_store.save_event(_event("Temp"))
        assert event_store.event_exists(event.id)
        event_store.delete_event(event.id)
        assert not event_store.event_exists(event.id)
        assert event_store.get_event(event.id) is None

    def test_delete_missing_is_noop(self, event_store):
        event_store.delete_event(EventId.generate())
        assert event_store.list_events() == []

    def test_save_without_id_is_rejected(self, event_store):
        with pytest.raises(ValueError):
            event_store.save_event(Event(event_name="No id"))


def test_in_memory_store_accepts_initial_events():
    events = [_event("a"), _event("b")]
    store = InMemoryEventStore(events)
    assert store.list_events() == events


@pytest.mark.django_db
class TestDjangoStorePrices:
    """The ORM store keeps prices exact or refuses them."""

    def test_price_within_column_round_trips_exactly(self):
        store = DjangoEventStore()
        event = store.save_event(_event("Exact", ticket_price=Decimal("12345678.90")))
        assert store.get_event(event.id).ticket_price == Decimal("12345678.90")

    @pytest.mark.parametrize(
        "price", [Decimal("1.005"), Decimal("123456789012"), Decimal("NaN")]
    )
    def test_price_outside_column_is_rejected(self, price):
        store = DjangoEventStore()
        event = _event("Too precise", ticket_price=price)
        with pytest.raises(InvalidArgumentError):
            store.save_event(event)
        assert not store.event_exists(event.id)

    def test_price_update_beyond_two_decimals_leaves_price_unchanged(self):
        service = EventService(DjangoEventStore())
        created = service.create_event(Event(event_name="Gig", ticket_price=Decimal("20.00")))
        with pytest.raises(InvalidArgumentError):
            service.update_event_price(created.id, Decimal("1.005"))
        assert service.get_event(created.id).ticket_price == Decimal("20.00")
